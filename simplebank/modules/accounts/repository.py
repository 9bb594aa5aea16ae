"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: int) -> Account | None:
        ...

    async def get_for_update(self, account_id: int) -> Account:
        ...

    async def list_by_owner(self, owner: str, *, limit: int, offset: int) -> Sequence[Account]:
        ...

    async def create_account(self, *, owner: str, currency: str, balance: int) -> Account:
        ...

    async def add_balance(self, account_id: int, amount: int) -> Account:
        ...
