"""Transaction runner handed to the transfer engine."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from simplebank.infrastructure.database.errors import translate_integrity_error
from simplebank.infrastructure.database.repositories.transfer_repository import SqlTransferRepository

T = TypeVar("T")


class SqlStore:
    """Opens a fresh session per unit of work and scopes it to one transaction.

    Leaving the ``transaction()`` block normally commits; leaving it through
    any exception, cancellation included, rolls back.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[SqlTransferRepository]:
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    yield SqlTransferRepository(session)
            except IntegrityError as exc:
                # Deferred constraints surface at commit rather than at flush.
                raise translate_integrity_error(exc) from exc

    async def run_in_tx(self, fn: Callable[[SqlTransferRepository], Awaitable[T]]) -> T:
        async with self.transaction() as repo:
            return await fn(repo)
