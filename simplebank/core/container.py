"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from simplebank.core.config import Settings
from simplebank.infrastructure.database import build_engine, build_session_factory
from simplebank.infrastructure.database.store import SqlStore
from simplebank.modules.tokens import TokenMaker, new_token_maker
from simplebank.modules.tokens.maker import Clock, utc_now


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    store: SqlStore
    token_maker: TokenMaker

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_container(settings: Settings, clock: Clock = utc_now) -> ApplicationContainer:
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    return ApplicationContainer(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        store=SqlStore(session_factory),
        token_maker=new_token_maker(settings.token_scheme, settings.token_symmetric_key, clock=clock),
    )


__all__ = ["ApplicationContainer", "build_container"]
