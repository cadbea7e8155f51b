"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class InvalidDateError(AppError):
    """Raised when a date string is malformed or names an impossible day."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date (expected YYYY-MM-DD): {value!r}", code="INVALID_DATE")


class UnknownTickerError(AppError):
    """Raised when an operation requires a registered asset that does not exist."""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"Unknown ticker: {ticker}. Add the asset first", code="UNKNOWN_TICKER")


class IndexOutOfRangeError(AppError):
    """Raised when a transaction position does not exist in the ledger."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Transaction index {index} out of range (ledger has {size} entries)",
            code="INDEX_OUT_OF_RANGE",
        )


class StorageError(AppError):
    """Raised when a portfolio or export file cannot be opened, read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot access {path}: {reason}", code="IO_ERROR")


class ParseError(AppError):
    """Raised when persisted portfolio text cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(message, code="PARSE_ERROR")
