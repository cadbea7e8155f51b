"""Core utilities and shared functionality."""

from folio.core.dates import (
    validate,
    to_serial,
    format_date,
    is_leap,
    days_in_month,
)
from folio.core.exceptions import (
    AppError,
    ValidationError,
    InvalidDateError,
    UnknownTickerError,
    IndexOutOfRangeError,
    StorageError,
    ParseError,
)

__all__ = [
    "validate",
    "to_serial",
    "format_date",
    "is_leap",
    "days_in_month",
    "AppError",
    "ValidationError",
    "InvalidDateError",
    "UnknownTickerError",
    "IndexOutOfRangeError",
    "StorageError",
    "ParseError",
]
