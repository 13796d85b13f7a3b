"""
Domain exceptions - Semantic error types for registration.

Domain rejections (DUPLICATED, UNDERAGE, DEAD, INVALID) are returned as
RegisterResult values, never raised. The only raised error is
StorageUnavailable, which signals an infrastructure failure.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class StorageUnavailable(RegistrationError):
    """The voter repository failed (connectivity, SQL error, constraint violation)."""

    pass
