"""Reusable FastAPI dependencies."""

from .container import get_app_settings, get_container, get_store, get_token_maker
from .database import get_db_session
from .services import get_account_service, get_transfer_service, get_user_service

__all__ = [
    "get_account_service",
    "get_app_settings",
    "get_container",
    "get_db_session",
    "get_store",
    "get_token_maker",
    "get_transfer_service",
    "get_user_service",
]
