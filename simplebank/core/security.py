"""Bearer token authentication for protected routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from simplebank.interfaces.http.deps.container import get_token_maker
from simplebank.modules.tokens import TokenError, TokenMaker, TokenPayload

logger = logging.getLogger(__name__)

AUTHORIZATION_TYPE_BEARER = "bearer"
# Attribute of ``request.state`` holding the verified payload.
AUTHORIZATION_PAYLOAD_KEY = "authorization_payload"


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


async def get_authorization_payload(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    token_maker: TokenMaker = Depends(get_token_maker),
) -> TokenPayload:
    """Verify the ``Authorization: bearer <token>`` header.

    Every failure is a 401. On success the payload is attached to
    ``request.state`` under ``AUTHORIZATION_PAYLOAD_KEY`` and returned.
    """
    if not authorization:
        raise _unauthorized("authorization header is not provided")

    fields = authorization.split()
    if len(fields) < 2:
        raise _unauthorized("invalid authorization header format")

    authorization_type = fields[0].lower()
    if authorization_type != AUTHORIZATION_TYPE_BEARER:
        raise _unauthorized(f"unsupported authorization type {authorization_type}")

    try:
        payload = token_maker.verify_token(fields[1])
    except TokenError as exc:
        logger.warning("rejected access token: %s", exc, extra={"path": request.url.path})
        raise _unauthorized(str(exc)) from exc

    setattr(request.state, AUTHORIZATION_PAYLOAD_KEY, payload)
    return payload


__all__ = [
    "AUTHORIZATION_PAYLOAD_KEY",
    "AUTHORIZATION_TYPE_BEARER",
    "get_authorization_payload",
]
