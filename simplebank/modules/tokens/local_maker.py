"""Opaque tokens sealed with an AEAD cipher under the symmetric key."""

from __future__ import annotations

import json
import logging
import os
from datetime import timedelta

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .exceptions import InvalidTokenError
from .maker import Clock, b64url_decode, b64url_encode, check_secret_key, utc_now
from .models import TokenPayload

logger = logging.getLogger(__name__)

HEADER = "local."
NONCE_SIZE = 12
TAG_SIZE = 16


class LocalTokenMaker:
    """ChaCha20-Poly1305 sealed payloads.

    Token layout is ``local.`` followed by base64url(nonce || ciphertext || tag).
    The header is bound as associated data, so the same bytes presented under
    another prefix fail authentication.
    """

    def __init__(self, secret_key: str, clock: Clock = utc_now) -> None:
        check_secret_key(secret_key)
        key = HKDF(
            algorithm=hashes.SHA256(),
            length=32,
            salt=None,
            info=b"simplebank local access token",
        ).derive(secret_key.encode("utf-8"))
        self._aead = ChaCha20Poly1305(key)
        self._clock = clock

    def create_token(self, username: str, duration: timedelta) -> str:
        token, _ = self.issue_token(username, duration)
        return token

    def issue_token(self, username: str, duration: timedelta) -> tuple[str, TokenPayload]:
        payload = TokenPayload.new(username, duration, self._clock())
        message = json.dumps(payload.to_claims(), separators=(",", ":"), sort_keys=True)
        nonce = os.urandom(NONCE_SIZE)
        sealed = self._aead.encrypt(nonce, message.encode("utf-8"), HEADER.encode("ascii"))
        return HEADER + b64url_encode(nonce + sealed), payload

    def verify_token(self, token: str) -> TokenPayload:
        if not token.startswith(HEADER):
            raise InvalidTokenError()
        raw = b64url_decode(token[len(HEADER):])
        if len(raw) < NONCE_SIZE + TAG_SIZE:
            raise InvalidTokenError()
        try:
            message = self._aead.decrypt(raw[:NONCE_SIZE], raw[NONCE_SIZE:], HEADER.encode("ascii"))
        except InvalidTag as exc:
            logger.warning("local token failed authentication")
            raise InvalidTokenError() from exc
        try:
            claims = json.loads(message)
        except ValueError as exc:
            raise InvalidTokenError() from exc
        if not isinstance(claims, dict):
            raise InvalidTokenError()
        payload = TokenPayload.from_claims(claims)
        payload.valid(self._clock())
        return payload
