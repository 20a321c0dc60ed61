"""
Domain exceptions.

Every error a service can raise carries the HTTP status it maps to and a
message that is safe to show to the caller.
"""


class MilkCoopError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MilkCoopError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(MilkCoopError):
    """A unique value (username, center code) is already taken."""

    status_code = 400


class NotFoundError(MilkCoopError):
    """The entity addressed by the request does not exist."""

    status_code = 404


class AuthError(MilkCoopError):
    """Bad credentials. Reported as 400 so callers can't tell which half failed."""

    status_code = 400


class StorageError(MilkCoopError):
    """The database failed. The message is generic; details are only logged."""

    status_code = 500
