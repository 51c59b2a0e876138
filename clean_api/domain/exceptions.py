# clean_api/domain/exceptions.py

"""
Domain exceptions.

Every error raised by the auth core is a DomainException subclass carrying
an HTTP status code, a stable internal code and optional details. The
ErrorHandlerMiddleware turns them into JSON responses.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code: int = 400
    internal_code: str = "DOMAIN_ERROR"
    default_message: str = "Domain error."

    def __init__(
            self,
            message: Optional[str] = None,
            details: Optional[Dict[str, Any]] = None,
            status_code: Optional[int] = None,
            internal_code: Optional[str] = None,
            headers: Optional[Dict[str, str]] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.headers = headers
        if status_code is not None:
            self.status_code = status_code
        if internal_code is not None:
            self.internal_code = internal_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnauthorizedException(DomainException):
    """Missing, invalid, expired or revoked credentials or tokens."""

    status_code = 401
    internal_code = "UNAUTHORIZED"
    default_message = "Unauthorized."


class InvalidCredentialsException(UnauthorizedException):
    """Wrong email/password pair. The message never says which one."""

    internal_code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class ResourceNotFoundException(DomainException):
    status_code = 404
    internal_code = "RESOURCE_NOT_FOUND"
    default_message = "Resource not found."

    def __init__(self, message: Optional[str] = None, resource_id: Any = None, **kwargs):
        details = kwargs.pop("details", None) or {}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message=message, details=details, **kwargs)


class ResourceAlreadyExistsException(DomainException):
    status_code = 409
    internal_code = "RESOURCE_ALREADY_EXISTS"
    default_message = "Resource already exists."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None, **kwargs):
        super().__init__(message=message or detail, **kwargs)


class DatabaseOperationException(DomainException):
    """Storage failure. The original error is kept for logs, never returned to clients."""

    status_code = 500
    internal_code = "DATABASE_ERROR"
    default_message = "Database operation failed."

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None, **kwargs):
        self.original_error = original_error
        super().__init__(message=message, **kwargs)


class PasswordHashingException(DomainException):
    """A hash record could not be produced or parsed (not a password mismatch)."""

    status_code = 500
    internal_code = "PASSWORD_HASHING_ERROR"
    default_message = "Password hashing failed."

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None, **kwargs):
        self.original_error = original_error
        super().__init__(message=message, **kwargs)


class PermissionDeniedException(DomainException):
    """Authenticated, but not allowed to act on the target resource."""

    status_code = 403
    internal_code = "PERMISSION_DENIED"
    default_message = "Permission denied."
