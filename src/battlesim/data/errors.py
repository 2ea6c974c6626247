"""Exceptions raised while loading move, class and item definitions."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when a definition has missing, unknown or mistyped fields."""


class DataReferenceError(DataError):
    """Raised when a class names a move or item that is not defined."""
