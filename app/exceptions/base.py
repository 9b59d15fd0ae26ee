# ruff: noqa: D107
"""Base exception classes."""

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "details": details},
            headers=headers,
        )


class ValidationError(BaseAppException):
    """Exception raised when request input is missing or malformed."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: str | None = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class NotFoundError(BaseAppException):
    """Exception raised when a resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: str | None = None,
        error_code: str = "NOT_FOUND",
    ):
        super().__init__(message=message, status_code=404, error_code=error_code, details=details)


class AuthenticationError(BaseAppException):
    """Exception raised when no credential was presented."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_REQUIRED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class AppPermissionError(BaseAppException):
    """Exception raised when the presented credential is not accepted."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message=message, status_code=403, error_code="PERMISSION_DENIED")


class ServerConfigurationError(BaseAppException):
    """Exception raised when the server is missing required configuration."""

    def __init__(self, message: str = "Server configuration error"):
        super().__init__(message=message, status_code=500, error_code="CONFIGURATION_ERROR")
