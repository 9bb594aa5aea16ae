"""Domain services for account management."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.modules.common import ForeignKeyViolationError, UniqueViolationError

from .exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AccountOwnerNotFoundError,
    AccountOwnershipError,
)
from .models import Account, AccountCreateInput
from .repository import AccountRepository


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        # Deferred import: the repository module imports this package.
        from simplebank.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: int) -> Account:
        account = await self._repository.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"account {account_id} not found")
        return account

    async def get_owned(self, account_id: int, username: str) -> Account:
        account = await self.get_by_id(account_id)
        if not account.is_owned_by(username):
            raise AccountOwnershipError("account doesn't belong to the authenticated user")
        return account

    async def list_accounts(self, owner: str, *, page_id: int, page_size: int) -> Sequence[Account]:
        return await self._repository.list_by_owner(
            owner,
            limit=page_size,
            offset=(page_id - 1) * page_size,
        )

    async def create_account(self, payload: AccountCreateInput) -> Account:
        try:
            return await self._repository.create_account(
                owner=payload.owner,
                currency=payload.currency,
                balance=payload.balance,
            )
        except UniqueViolationError as exc:
            raise AccountAlreadyExistsError(
                f"owner {payload.owner} already has a {payload.currency} account"
            ) from exc
        except ForeignKeyViolationError as exc:
            raise AccountOwnerNotFoundError(f"owner {payload.owner} does not exist") from exc
