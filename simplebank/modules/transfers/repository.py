"""Protocols for the transactional primitives a transfer is composed of."""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol, Sequence, TypeVar

from simplebank.modules.accounts.models import Account

from .models import Entry, Transfer

T = TypeVar("T")


class TransferRepository(Protocol):
    """Primitives bound to one live transaction."""

    async def get_account_for_update(self, account_id: int) -> Account:
        ...

    async def add_account_balance(self, account_id: int, amount: int) -> Account:
        ...

    async def create_transfer(self, *, from_account_id: int, to_account_id: int, amount: int) -> Transfer:
        ...

    async def create_entry(self, *, account_id: int, amount: int) -> Entry:
        ...

    async def get_transfer(self, transfer_id: int) -> Transfer | None:
        ...

    async def list_transfers(
        self, *, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> Sequence[Transfer]:
        ...

    async def list_entries(self, account_id: int, *, limit: int, offset: int) -> Sequence[Entry]:
        ...


class TransferStore(Protocol):
    """Runs a unit of work inside one database transaction."""

    async def run_in_tx(self, fn: Callable[[TransferRepository], Awaitable[T]]) -> T:
        ...
