"""HS256 JSON Web Token maker."""

from __future__ import annotations

import logging
from datetime import timedelta

from jose import JWTError, jwt

from .exceptions import InvalidTokenError
from .maker import Clock, b64url_decode, check_secret_key, utc_now
from .models import TokenPayload

logger = logging.getLogger(__name__)


class JWTMaker:
    """Signs the payload as JWT claims with HMAC-SHA256.

    Only ``HS256`` is accepted on decode, so a token whose header names any
    other algorithm (``none`` or an asymmetric one) is rejected outright.
    """

    algorithm = "HS256"

    def __init__(self, secret_key: str, clock: Clock = utc_now) -> None:
        check_secret_key(secret_key)
        self._secret_key = secret_key
        self._clock = clock

    def create_token(self, username: str, duration: timedelta) -> str:
        token, _ = self.issue_token(username, duration)
        return token

    def issue_token(self, username: str, duration: timedelta) -> tuple[str, TokenPayload]:
        payload = TokenPayload.new(username, duration, self._clock())
        return jwt.encode(payload.to_claims(), self._secret_key, algorithm=self.algorithm), payload

    def verify_token(self, token: str) -> TokenPayload:
        segments = token.split(".")
        if len(segments) != 3:
            raise InvalidTokenError()
        for segment in segments:
            b64url_decode(segment)
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False, "verify_nbf": False},
            )
        except JWTError as exc:
            logger.warning("JWT verification failed: %s", exc)
            raise InvalidTokenError() from exc
        payload = TokenPayload.from_claims(claims)
        payload.valid(self._clock())
        return payload
