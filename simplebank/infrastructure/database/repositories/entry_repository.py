"""SQLAlchemy implementation for ledger entries."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.db.models import Entry as EntryModel
from simplebank.infrastructure.database.errors import flush
from simplebank.modules.transfers.models import Entry


class SqlEntryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_entry(self, *, account_id: int, amount: int) -> Entry:
        model = EntryModel(account_id=account_id, amount=amount)
        self._session.add(model)
        await flush(self._session)
        await self._session.refresh(model)
        return self._to_domain(model)

    async def get_entry(self, entry_id: int) -> Entry | None:
        result = await self._session.execute(select(EntryModel).where(EntryModel.id == entry_id))
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def list_entries(self, account_id: int, *, limit: int, offset: int) -> Sequence[Entry]:
        stmt = (
            select(EntryModel)
            .where(EntryModel.account_id == account_id)
            .order_by(EntryModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: EntryModel) -> Entry:
        return Entry(
            id=model.id,
            account_id=model.account_id,
            amount=model.amount,
            created_at=model.created_at,
        )
