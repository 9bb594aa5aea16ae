"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserAlreadyExistsError(UserError):
    """Raised when the username or email is already registered."""


class UserNotFoundError(UserError):
    """Raised when no user has the requested username."""


class IncorrectPasswordError(UserError):
    """Raised when the supplied password does not match the stored hash."""
