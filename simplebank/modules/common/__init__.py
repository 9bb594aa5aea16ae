"""Shared domain primitives."""

from .exceptions import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    StoreError,
    UniqueViolationError,
)

__all__ = [
    "ForeignKeyViolationError",
    "RecordNotFoundError",
    "StoreError",
    "UniqueViolationError",
]
