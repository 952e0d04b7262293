class SalesViewError(Exception):
    """Base class for errors raised by the transaction browser."""


class StoreUnavailable(SalesViewError):
    """The transaction store could not be opened or reached."""


class QueryFailed(SalesViewError):
    def __init__(self, operation: str):
        super().__init__(f"{operation} failed")
        self.operation = operation


class ImportConflict(SalesViewError):
    """Raised when a bulk import targets a table that already holds rows.

    The loader only proceeds after an explicit confirmation (``replace=True``),
    which clears the table first.
    """

    def __init__(self, existing: int):
        super().__init__(f"transactions table already has {existing} records")
        self.existing = existing


__all__ = ["ImportConflict", "QueryFailed", "SalesViewError", "StoreUnavailable"]
