"""Storage error kinds surfaced to services and handlers."""


class StoreError(Exception):
    """Base class for persistence failures the caller can classify."""


class RecordNotFoundError(StoreError):
    """Raised when a requested row does not exist."""


class UniqueViolationError(StoreError):
    """Raised when a write collides with a unique index."""

    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


class ForeignKeyViolationError(StoreError):
    """Raised when a write references a row that does not exist."""

    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint
