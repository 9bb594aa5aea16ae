"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.db.models import Account as AccountModel
from simplebank.infrastructure.database.errors import flush
from simplebank.modules.accounts.models import Account
from simplebank.modules.accounts.repository import AccountRepository
from simplebank.modules.common import RecordNotFoundError


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_for_update(self, account_id: int) -> Account:
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise RecordNotFoundError(f"account {account_id} not found")
        return self._to_domain(model)

    async def list_by_owner(self, owner: str, *, limit: int, offset: int) -> Sequence[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.owner == owner)
            .order_by(AccountModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_account(self, *, owner: str, currency: str, balance: int) -> Account:
        model = AccountModel(owner=owner, currency=currency, balance=balance)
        self._session.add(model)
        await flush(self._session)
        await self._session.refresh(model)
        return self._to_domain(model)

    async def add_balance(self, account_id: int, amount: int) -> Account:
        """Atomically add ``amount`` (possibly negative) and return the updated row."""
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(balance=AccountModel.balance + amount)
            .execution_options(synchronize_session=False)
            .returning(
                AccountModel.id,
                AccountModel.owner,
                AccountModel.balance,
                AccountModel.currency,
                AccountModel.created_at,
            )
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            raise RecordNotFoundError(f"account {account_id} not found")
        return Account(
            id=row.id,
            owner=row.owner,
            balance=row.balance,
            currency=row.currency,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            owner=model.owner,
            balance=model.balance,
            currency=model.currency,
            created_at=model.created_at,
        )
