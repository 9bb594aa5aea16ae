"""Transfer domain services and models."""

from .exceptions import (
    CurrencyMismatchError,
    InvalidTransferError,
    SameAccountTransferError,
    TransferError,
)
from .models import Entry, Transfer, TransferParams, TransferResult
from .service import TransferService, canonical_order

__all__ = [
    "CurrencyMismatchError",
    "Entry",
    "InvalidTransferError",
    "SameAccountTransferError",
    "Transfer",
    "TransferError",
    "TransferParams",
    "TransferResult",
    "TransferService",
    "canonical_order",
]
