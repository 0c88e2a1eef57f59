"""Custom exceptions for data loading, validation and remote storage."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when JSON files or documents are missing or invalid."""


class DataValidationError(DataError):
    """Raised when JSON content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when definitions reference unknown attributes."""


class DataTransportError(DataError):
    """Raised when the remote roster store cannot be reached."""
