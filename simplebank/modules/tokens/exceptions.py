"""Token verification errors."""


class TokenError(Exception):
    """Base class for token errors."""


class InvalidTokenError(TokenError):
    """Raised when a token is malformed, tampered with or signed by another key or scheme."""

    def __init__(self, message: str = "token is invalid") -> None:
        super().__init__(message)


class ExpiredTokenError(TokenError):
    """Raised when a token is presented at or after its expiry instant."""

    def __init__(self, message: str = "token has expired") -> None:
        super().__init__(message)
