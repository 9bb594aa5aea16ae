"""User domain services and models."""

from .exceptions import (
    IncorrectPasswordError,
    UserAlreadyExistsError,
    UserError,
    UserNotFoundError,
)
from .models import User, UserCreateInput
from .service import UserService

__all__ = [
    "IncorrectPasswordError",
    "User",
    "UserAlreadyExistsError",
    "UserCreateInput",
    "UserError",
    "UserNotFoundError",
    "UserService",
]
