"""Custom exceptions for the mortgage rate updater."""

from pathlib import Path


class MortgageRatesException(Exception):
    """Base exception for the mortgage rate updater.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class RateInputException(MortgageRatesException):
    """Raised when a rate input is missing or not a number.

    This exception is raised when:
    - A required current rate or APR variable is not set
    - A rate, APR or previous rate value cannot be parsed as a number

    Attributes:
        config_key: The environment variable that caused the error
        config_value: The raw value that failed to parse
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value


class SnapshotReadException(MortgageRatesException):
    """Raised when the previous snapshot cannot be loaded.

    This exception is raised when:
    - The snapshot file does not exist or cannot be opened
    - The file is not valid JSON
    - The JSON does not match the snapshot schema

    Attributes:
        path: The snapshot file that failed to load
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class SnapshotWriteException(MortgageRatesException):
    """Raised when the updated snapshot cannot be written.

    Attributes:
        path: The snapshot file that failed to write
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.original_error = original_error
