"""Access token issuance and verification."""

from .exceptions import ExpiredTokenError, InvalidTokenError, TokenError
from .factory import new_token_maker
from .jwt_maker import JWTMaker
from .local_maker import LocalTokenMaker
from .maker import MIN_SECRET_KEY_SIZE, TokenMaker, TokenScheme
from .models import TokenPayload

__all__ = [
    "ExpiredTokenError",
    "InvalidTokenError",
    "JWTMaker",
    "LocalTokenMaker",
    "MIN_SECRET_KEY_SIZE",
    "TokenError",
    "TokenMaker",
    "TokenPayload",
    "TokenScheme",
    "new_token_maker",
]
