"""Domain services for user registration and login."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.core.crypto import hash_password, verify_password
from simplebank.modules.common import UniqueViolationError

from .exceptions import IncorrectPasswordError, UserAlreadyExistsError, UserNotFoundError
from .models import User, UserCreateInput
from .repository import UserRepository


class UserService:
    """Encapsulates core user use cases."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        # Deferred import: the repository module imports this package.
        from simplebank.infrastructure.database.repositories.user_repository import SqlUserRepository

        return cls(SqlUserRepository(session))

    async def get_by_username(self, username: str) -> User | None:
        return await self._repository.get_by_username(username)

    async def create_user(self, payload: UserCreateInput) -> User:
        hashed_password = hash_password(payload.password)
        try:
            return await self._repository.create_user(
                username=payload.username,
                hashed_password=hashed_password,
                full_name=payload.full_name,
                email=payload.email,
            )
        except UniqueViolationError as exc:
            if exc.constraint and "email" in exc.constraint:
                raise UserAlreadyExistsError(f"email {payload.email} is already registered") from exc
            raise UserAlreadyExistsError(f"username {payload.username} already exists") from exc

    async def authenticate(self, username: str, password: str) -> User:
        user = await self._repository.get_by_username(username)
        if user is None:
            raise UserNotFoundError(f"user {username} not found")
        if not verify_password(password, user.hashed_password):
            raise IncorrectPasswordError("incorrect password")
        return user
