"""Transfer domain specific exceptions."""


class TransferError(Exception):
    """Base class for transfer domain errors."""


class InvalidTransferError(TransferError):
    """Raised when transfer parameters violate a precondition."""


class SameAccountTransferError(InvalidTransferError):
    """Raised when the source and destination account are the same."""


class CurrencyMismatchError(TransferError):
    """Raised when an account's currency differs from the transfer currency."""

    def __init__(self, account_id: int, account_currency: str, currency: str) -> None:
        super().__init__(f"account [{account_id}] currency mismatch {account_currency} vs {currency}")
        self.account_id = account_id
        self.account_currency = account_currency
        self.currency = currency
