"""Token payload carried inside every access token."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping

from .exceptions import ExpiredTokenError, InvalidTokenError


@dataclass(frozen=True, slots=True)
class TokenPayload:
    id: uuid.UUID
    username: str
    issued_at: datetime
    expired_at: datetime

    @classmethod
    def new(cls, username: str, duration: timedelta, now: datetime) -> "TokenPayload":
        if duration <= timedelta(0):
            raise ValueError("token duration must be positive")
        return cls(
            id=uuid.uuid4(),
            username=username,
            issued_at=now,
            expired_at=now + duration,
        )

    def valid(self, now: datetime) -> None:
        """Accepts the token only while ``issued_at <= now < expired_at``."""
        if now < self.issued_at:
            raise InvalidTokenError()
        if now >= self.expired_at:
            raise ExpiredTokenError()

    def to_claims(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "username": self.username,
            "issued_at": self.issued_at.isoformat(),
            "expired_at": self.expired_at.isoformat(),
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "TokenPayload":
        try:
            payload = cls(
                id=uuid.UUID(claims["id"]),
                username=claims["username"],
                issued_at=datetime.fromisoformat(claims["issued_at"]),
                expired_at=datetime.fromisoformat(claims["expired_at"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
        if (
            not isinstance(payload.username, str)
            or payload.issued_at.tzinfo is None
            or payload.expired_at.tzinfo is None
        ):
            raise InvalidTokenError()
        return payload
