import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from simplebank import __version__
from simplebank.api import create_api_router
from simplebank.core.config import Settings, get_settings
from simplebank.core.container import build_container
from simplebank.core.logging_config import setup_logging
from simplebank.infrastructure.database import init_db, ping
from simplebank.interfaces.http.errors import register_exception_handlers
from simplebank.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    await ping(container.engine)
    await init_db(container.engine)
    logger.info("database ready", extra={"driver": container.engine.url.drivername})
    yield
    logger.info("shutting down")
    await container.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Accounts, users and money transfers",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings)

    register_exception_handlers(app)
    app.include_router(create_api_router())

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service=settings.project_name)

    return app


def run() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        logger.error("cannot load config: %s", exc)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    try:
        app = create_app(settings)
    except ValueError as exc:
        logger.error("invalid config: %s", exc)
        sys.exit(1)

    logger.info("starting server", extra={"address": settings.server_address, "environment": settings.environment})
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
