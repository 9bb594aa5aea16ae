"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .entry_repository import SqlEntryRepository
from .transfer_repository import SqlTransferRepository
from .user_repository import SqlUserRepository

__all__ = [
    "SqlAccountRepository",
    "SqlEntryRepository",
    "SqlTransferRepository",
    "SqlUserRepository",
]
