"""Domain service providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.core.config import Settings
from simplebank.infrastructure.database.store import SqlStore
from simplebank.modules.accounts import AccountService
from simplebank.modules.transfers import TransferService
from simplebank.modules.users import UserService

from .container import get_app_settings, get_store
from .database import get_db_session


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService.with_session(db)


def get_transfer_service(
    store: SqlStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> TransferService:
    return TransferService(store, timeout=settings.request_timeout)


__all__ = ["get_account_service", "get_transfer_service", "get_user_service"]
