from __future__ import annotations

from datetime import timedelta
from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from simplebank.core import crypto
from simplebank.core.config import Settings
from simplebank.core.container import ApplicationContainer, build_container
from simplebank.infrastructure.database import init_db
from simplebank.main import create_app

from .factories import TEST_SYMMETRIC_KEY


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(crypto, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        db_driver="sqlite",
        db_source=f"sqlite:///{tmp_path / 'simplebank.db'}",
        token_symmetric_key=TEST_SYMMETRIC_KEY,
        token_scheme="local",
        access_token_duration=timedelta(minutes=15),
        request_timeout=30.0,
    )


@pytest.fixture
async def container(settings) -> AsyncIterator[ApplicationContainer]:
    container = build_container(settings)
    await init_db(container.engine)
    yield container
    await container.dispose()


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    container = app.state.container
    await init_db(container.engine)
    yield app
    await container.dispose()


@pytest.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
