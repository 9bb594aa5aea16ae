import logging

import pytest
from sqlalchemy import inspect

from simplebank.core.config import get_settings
from simplebank.main import create_app, run


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Simple Bank"}


async def test_lifespan_creates_schema(settings):
    app = create_app(settings)
    engine = app.state.container.engine

    async with app.router.lifespan_context(app):
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert {"users", "accounts", "transfers", "entries"} <= set(tables)


async def test_schema_indexes_match_the_migration(container):
    def index_names(sync_conn):
        inspector = inspect(sync_conn)
        return {
            index["name"]
            for table in ("accounts", "entries", "transfers")
            for index in inspector.get_indexes(table)
        }

    async with container.engine.connect() as conn:
        names = await conn.run_sync(index_names)

    assert {
        "ix_accounts_owner",
        "ix_entries_account_id",
        "ix_transfers_from_account_id",
        "ix_transfers_to_account_id",
    } <= names


async def test_unknown_route_uses_error_body(client):
    response = await client.get("/nowhere")

    assert response.status_code == 404
    assert "error" in response.json()


def test_run_exits_on_invalid_config(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TOKEN_SYMMETRIC_KEY", raising=False)
    get_settings.cache_clear()

    logger = logging.getLogger("simplebank")
    try:
        with pytest.raises(SystemExit) as exc_info:
            run()
    finally:
        get_settings.cache_clear()
        logger.handlers.clear()
        logger.propagate = True

    assert exc_info.value.code == 1
