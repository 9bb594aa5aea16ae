"""Repository protocol for users."""

from __future__ import annotations

from typing import Protocol

from .models import User


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def get_by_username(self, username: str) -> User | None:
        ...

    async def create_user(
        self,
        *,
        username: str,
        hashed_password: str,
        full_name: str,
        email: str,
    ) -> User:
        ...
