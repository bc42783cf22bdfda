"""Application exceptions.

Anything raised below the handlers propagates untouched to the central
exception handler, which reads ``status_code`` and ``message`` off the error.
"""


class AppException(Exception):
    """Base class for errors that know how to become an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RepositoryError(AppException):
    """Storage operation failed."""


class ConfigurationError(AppException):
    """Startup configuration is missing or malformed."""
