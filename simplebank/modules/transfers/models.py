"""Domain models for transfers and ledger entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from simplebank.modules.accounts.models import Account

from .exceptions import InvalidTransferError, SameAccountTransferError


@dataclass(slots=True)
class Transfer:
    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class Entry:
    """A signed balance delta on one account; negative amounts are debits."""

    id: int
    account_id: int
    amount: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class TransferParams:
    from_account_id: int
    to_account_id: int
    amount: int

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise InvalidTransferError("amount must be greater than zero")
        if self.from_account_id == self.to_account_id:
            raise SameAccountTransferError("cannot transfer to the same account")


@dataclass(slots=True)
class TransferResult:
    transfer: Transfer
    from_account: Account
    to_account: Account
    from_entry: Entry
    to_entry: Entry
