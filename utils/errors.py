"""
Application error types.

Data-access functions raise these and the app-level error handlers turn
them into JSON responses. IntegrityWarning is only ever logged.
"""


class ApiError(Exception):
    """Base class for errors that map to an HTTP status."""

    status = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(ApiError, ValueError):
    """Invalid input: missing field, bad range, bad enum, bad format."""

    status = 400


class NotFoundError(ApiError, LookupError):
    """Referenced entity does not exist or has been deleted."""

    status = 404


class IntegrityWarning(UserWarning):
    """A link, unlink or cascade step failed after the primary write succeeded."""
