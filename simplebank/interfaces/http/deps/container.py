"""Accessors for objects held by the application container."""

from fastapi import Depends, Request

from simplebank.core.config import Settings
from simplebank.core.container import ApplicationContainer
from simplebank.infrastructure.database.store import SqlStore
from simplebank.modules.tokens import TokenMaker


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_app_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_store(container: ApplicationContainer = Depends(get_container)) -> SqlStore:
    return container.store


def get_token_maker(container: ApplicationContainer = Depends(get_container)) -> TokenMaker:
    return container.token_maker


__all__ = ["get_app_settings", "get_container", "get_store", "get_token_maker"]
