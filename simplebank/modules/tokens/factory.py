"""Select a token maker by scheme tag."""

from __future__ import annotations

from .jwt_maker import JWTMaker
from .local_maker import LocalTokenMaker
from .maker import Clock, TokenMaker, TokenScheme, utc_now


def new_token_maker(scheme: TokenScheme | str, secret_key: str, clock: Clock = utc_now) -> TokenMaker:
    scheme = TokenScheme(scheme)
    if scheme is TokenScheme.JWT:
        return JWTMaker(secret_key, clock=clock)
    return LocalTokenMaker(secret_key, clock=clock)
