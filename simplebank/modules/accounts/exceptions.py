"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(AccountError):
    """Raised when the owner already holds an account in that currency."""


class AccountOwnerNotFoundError(AccountError):
    """Raised when the owner username does not reference an existing user."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""


class AccountOwnershipError(AccountError):
    """Raised when an account does not belong to the authenticated user."""
