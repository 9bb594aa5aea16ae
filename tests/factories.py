"""Seed helpers shared by the test suites."""

from __future__ import annotations

import uuid
from datetime import timedelta

from simplebank.core.container import ApplicationContainer
from simplebank.modules.accounts import Account, AccountCreateInput, AccountService
from simplebank.modules.users import User, UserCreateInput, UserService

TEST_PASSWORD = "secret123"
TEST_SYMMETRIC_KEY = "12345678901234567890123456789012"


def random_username() -> str:
    return "user" + uuid.uuid4().hex[:12]


async def seed_user(container: ApplicationContainer, username: str | None = None) -> User:
    username = username or random_username()
    async with container.session_factory() as session:
        user = await UserService.with_session(session).create_user(
            UserCreateInput(
                username=username,
                password=TEST_PASSWORD,
                full_name=f"{username} tester",
                email=f"{username}@example.com",
            )
        )
        await session.commit()
    return user


async def seed_account(
    container: ApplicationContainer,
    owner: str,
    currency: str = "USD",
    balance: int = 1000,
) -> Account:
    async with container.session_factory() as session:
        account = await AccountService.with_session(session).create_account(
            AccountCreateInput(owner=owner, currency=currency, balance=balance)
        )
        await session.commit()
    return account


def auth_header(
    container: ApplicationContainer,
    username: str,
    duration: timedelta = timedelta(minutes=15),
) -> dict[str, str]:
    token = container.token_maker.create_token(username, duration)
    return {"Authorization": f"Bearer {token}"}
