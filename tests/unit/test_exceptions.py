"""
Unit tests for Exception classes.

This module contains unit tests for custom exception classes
used throughout the application.
"""

from fastapi import HTTPException, status

from app.exceptions.ai import AIConfigurationError, AIServiceError
from app.exceptions.base import (
    AppPermissionError,
    AuthenticationError,
    BaseAppException,
    NotFoundError,
    ServerConfigurationError,
    ValidationError,
)
from app.exceptions.conversation import ConversationNotFoundError, MessageSendError


class TestBaseAppException:
    """Test cases for BaseAppException."""

    def test_base_exception_default_values(self):
        """Test BaseAppException with default values."""
        exc = BaseAppException("Test error")

        assert isinstance(exc, HTTPException)
        assert exc.message == "Test error"
        assert exc.status_code == 500
        assert exc.error_code == "INTERNAL_ERROR"
        assert exc.details is None
        assert exc.detail == {"message": "Test error", "error_code": "INTERNAL_ERROR", "details": None}

    def test_base_exception_custom_values(self):
        """Test BaseAppException with custom values."""
        exc = BaseAppException(
            message="Custom error",
            status_code=400,
            error_code="CUSTOM_ERROR",
            details="field: bad",
        )

        assert exc.status_code == 400
        assert exc.detail["details"] == "field: bad"


class TestGatewayExceptions:
    """Test cases for the concrete exception classes."""

    def test_validation_error(self):
        exc = ValidationError("Title is required")

        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.message == "Title is required"

    def test_not_found_error(self):
        assert NotFoundError().status_code == status.HTTP_404_NOT_FOUND

    def test_authentication_error(self):
        exc = AuthenticationError()

        assert exc.status_code == status.HTTP_401_UNAUTHORIZED
        assert exc.message == "No token provided"
        assert exc.headers == {"WWW-Authenticate": "Bearer"}

    def test_permission_error(self):
        exc = AppPermissionError()

        assert exc.status_code == status.HTTP_403_FORBIDDEN
        assert exc.message == "Invalid token"

    def test_server_configuration_error(self):
        exc = ServerConfigurationError()

        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.message == "Server configuration error"

    def test_conversation_not_found(self):
        exc = ConversationNotFoundError()

        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert exc.message == "Conversation not found"
        assert exc.error_code == "CONVERSATION_NOT_FOUND"
        assert isinstance(exc, NotFoundError)

    def test_message_send_error(self):
        exc = MessageSendError(details="rate limited")

        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.message == "Failed to get response from model"
        assert exc.details == "rate limited"


class TestAIExceptions:
    """Test cases for AI service exceptions."""

    def test_ai_service_error(self):
        exc = AIServiceError("upstream down")

        assert exc.status_code == 500
        assert exc.error_code == "AI_SERVICE_ERROR"
        assert exc.message == "upstream down"

    def test_ai_configuration_error_is_service_error(self):
        exc = AIConfigurationError()

        assert isinstance(exc, AIServiceError)
        assert exc.error_code == "AI_CONFIGURATION_ERROR"
