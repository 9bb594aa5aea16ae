"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.db.models import User as UserModel
from simplebank.infrastructure.database.errors import flush
from simplebank.modules.users.models import User
from simplebank.modules.users.repository import UserRepository


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_user(
        self,
        *,
        username: str,
        hashed_password: str,
        full_name: str,
        email: str,
    ) -> User:
        model = UserModel(
            username=username,
            hashed_password=hashed_password,
            full_name=full_name,
            email=email,
        )
        self._session.add(model)
        await flush(self._session)
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            username=model.username,
            full_name=model.full_name,
            email=model.email,
            hashed_password=model.hashed_password,
            password_changed_at=model.password_changed_at,
            created_at=model.created_at,
        )
