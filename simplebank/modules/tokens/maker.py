"""Token maker capability shared by every token scheme."""

from __future__ import annotations

import base64
import binascii
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Protocol

from .exceptions import InvalidTokenError
from .models import TokenPayload

MIN_SECRET_KEY_SIZE = 32

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenScheme(str, Enum):
    LOCAL = "local"
    JWT = "jwt"


class TokenMaker(Protocol):
    """Issues and verifies bearer tokens for a username."""

    def create_token(self, username: str, duration: timedelta) -> str:
        ...

    def issue_token(self, username: str, duration: timedelta) -> tuple[str, TokenPayload]:
        """Like ``create_token`` but also returns the payload sealed into the token."""
        ...

    def verify_token(self, token: str) -> TokenPayload:
        ...


def check_secret_key(secret_key: str) -> None:
    if len(secret_key) < MIN_SECRET_KEY_SIZE:
        raise ValueError(f"invalid key size: must be at least {MIN_SECRET_KEY_SIZE} characters")


def b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Strict base64url decoding; non-canonical encodings are rejected."""
    try:
        raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError) as exc:
        raise InvalidTokenError() from exc
    if b64url_encode(raw) != segment:
        raise InvalidTokenError()
    return raw


__all__ = [
    "Clock",
    "MIN_SECRET_KEY_SIZE",
    "TokenMaker",
    "TokenScheme",
    "b64url_decode",
    "b64url_encode",
    "check_secret_key",
    "utc_now",
]
