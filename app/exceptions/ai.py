# ruff: noqa: D107
"""AI service exceptions."""

from .base import BaseAppException


class AIServiceError(BaseAppException):
    """Raised when the completion call fails upstream."""

    def __init__(
        self,
        message: str = "AI service error occurred",
        error_code: str = "AI_SERVICE_ERROR",
        details: str | None = None,
    ):
        super().__init__(message, status_code=500, error_code=error_code, details=details)


class AIConfigurationError(AIServiceError):
    """Exception raised when AI service is not properly configured."""

    def __init__(
        self,
        message: str = "AI service is not properly configured",
        details: str | None = None,
    ):
        super().__init__(message, "AI_CONFIGURATION_ERROR", details)
