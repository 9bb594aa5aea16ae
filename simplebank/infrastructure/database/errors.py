"""Translate driver integrity errors into the storage error kinds."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.modules.common import (
    ForeignKeyViolationError,
    StoreError,
    UniqueViolationError,
)

# PostgreSQL SQLSTATE codes.
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> str | None:
    for candidate in (exc.orig, getattr(exc.orig, "__cause__", None)):
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None


def _constraint(exc: IntegrityError) -> str | None:
    cause = getattr(exc.orig, "__cause__", None)
    name = getattr(cause, "constraint_name", None)
    if name:
        return name
    message = str(exc.orig)
    if "constraint failed:" in message:
        return message.split("constraint failed:", 1)[1].strip()
    return None


def translate_integrity_error(exc: IntegrityError) -> StoreError:
    message = str(exc.orig)
    sqlstate = _sqlstate(exc)
    constraint = _constraint(exc)
    if sqlstate == UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
        return UniqueViolationError(message, constraint)
    if sqlstate == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return ForeignKeyViolationError(message, constraint)
    return StoreError(message)


async def flush(session: AsyncSession) -> None:
    """Flush pending writes, raising storage error kinds on constraint violations."""
    try:
        await session.flush()
    except IntegrityError as exc:
        raise translate_integrity_error(exc) from exc


__all__ = ["flush", "translate_integrity_error", "UNIQUE_VIOLATION", "FOREIGN_KEY_VIOLATION"]
