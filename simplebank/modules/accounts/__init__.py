"""Account domain services and models."""

from .currency import Currency, is_supported_currency
from .exceptions import (
    AccountAlreadyExistsError,
    AccountError,
    AccountNotFoundError,
    AccountOwnerNotFoundError,
    AccountOwnershipError,
)
from .models import Account, AccountCreateInput
from .service import AccountService

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountCreateInput",
    "AccountError",
    "AccountNotFoundError",
    "AccountOwnerNotFoundError",
    "AccountOwnershipError",
    "AccountService",
    "Currency",
    "is_supported_currency",
]
