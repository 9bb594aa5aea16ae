"""SQLAlchemy implementation of the transfer primitives.

Every method runs on the session it was built with; the caller owns the
transaction boundaries.
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.db.models import Transfer as TransferModel
from simplebank.infrastructure.database.errors import flush
from simplebank.modules.accounts.models import Account
from simplebank.modules.transfers.models import Entry, Transfer
from simplebank.modules.transfers.repository import TransferRepository

from .account_repository import SqlAccountRepository
from .entry_repository import SqlEntryRepository


class SqlTransferRepository(TransferRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._accounts = SqlAccountRepository(session)
        self._entries = SqlEntryRepository(session)

    async def get_account_for_update(self, account_id: int) -> Account:
        return await self._accounts.get_for_update(account_id)

    async def add_account_balance(self, account_id: int, amount: int) -> Account:
        return await self._accounts.add_balance(account_id, amount)

    async def create_entry(self, *, account_id: int, amount: int) -> Entry:
        return await self._entries.create_entry(account_id=account_id, amount=amount)

    async def list_entries(self, account_id: int, *, limit: int, offset: int) -> Sequence[Entry]:
        return await self._entries.list_entries(account_id, limit=limit, offset=offset)

    async def create_transfer(self, *, from_account_id: int, to_account_id: int, amount: int) -> Transfer:
        model = TransferModel(
            from_account_id=from_account_id,
            to_account_id=to_account_id,
            amount=amount,
        )
        self._session.add(model)
        await flush(self._session)
        await self._session.refresh(model)
        return self._to_domain(model)

    async def get_transfer(self, transfer_id: int) -> Transfer | None:
        result = await self._session.execute(select(TransferModel).where(TransferModel.id == transfer_id))
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def list_transfers(
        self, *, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> Sequence[Transfer]:
        stmt = (
            select(TransferModel)
            .where(
                TransferModel.from_account_id == from_account_id,
                TransferModel.to_account_id == to_account_id,
            )
            .order_by(TransferModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: TransferModel) -> Transfer:
        return Transfer(
            id=model.id,
            from_account_id=model.from_account_id,
            to_account_id=model.to_account_id,
            amount=model.amount,
            created_at=model.created_at,
        )
