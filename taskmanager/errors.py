# taskmanager/errors.py
"""Domain errors raised by the services and mapped to HTTP at the boundary."""


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing or invalid."""


class ServiceError(Exception):
    """Base class for expected failures of a service operation."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A required field is missing or blank."""

    status_code = 400


class ConflictError(ServiceError):
    """Username or email is already registered."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Bad credentials, or an invalid, expired or malformed token."""

    status_code = 401


class NotFoundError(ServiceError):
    """The resource does not exist or is not owned by the caller."""

    status_code = 404
