"""Custom exceptions for loading and validating story documents."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a story document is missing, unreadable or not JSON."""


class DataValidationError(DataError):
    """Raised when a story document fails structural validation."""
