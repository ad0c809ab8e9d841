"""Custom exceptions for tsmock."""


class TsMockError(Exception):
    """Base exception for tsmock related errors."""
    pass


class SourceReadError(TsMockError):
    """Raised when a source directory or file cannot be read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read source at {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParseFailure(TsMockError):
    """Raised when a source unit cannot be turned into a usable syntax tree."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot parse {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedLanguageError(TsMockError, ValueError):
    """Raised when no analyzer exists for the requested language."""
    pass


class RouteNotFound(TsMockError):
    """Raised when a mock route is requested that was never registered."""
    pass


class MethodNotAllowed(TsMockError):
    """Raised when a mock route is requested with a method other than GET."""
    pass
