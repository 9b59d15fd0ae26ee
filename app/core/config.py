# python
# app/core/config.py
"""Configuration settings for the chat gateway.

Uses Pydantic BaseSettings for environment variable management.
"""
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentEnum(str, Enum):
    development = "development"
    testing = "testing"
    staging = "staging"
    production = "production"


class LogLevelEnum(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormatEnum(str, Enum):
    simple = "simple"
    json = "json"


class Settings(BaseSettings):
    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Application Settings =====
    app_name: str = Field(default="Chat Gateway API", description="Application name")
    environment: EnvironmentEnum = Field(
        default=EnvironmentEnum.development, description="Environment type"
    )
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    # ===== Security Settings =====
    gateway_token: str | None = Field(
        default=None, description="Shared bearer token for protected routes"
    )

    # ===== Database Settings =====
    database_url: str = Field(
        default="sqlite+aiosqlite:///./gateway.db", description="Database connection URL"
    )
    test_database_url: str | None = Field(default=None, description="Test database URL")

    # ===== AI Service (Anthropic) =====
    anthropic_api_key: str | None = Field(default=None, description="Anthropic API key")
    default_model: str = Field(
        default="claude-3-5-sonnet-20241022", description="Model used when none is configured"
    )
    default_temperature: float = Field(default=0.7, description="Sampling temperature fallback")
    max_tokens: int = Field(default=4096, description="Maximum tokens per completion")
    default_agent: str = Field(
        default="gateway-default", description="Agent identifier reported in status"
    )

    # ===== Conversation Defaults =====
    default_conversation_title: str = Field(
        default="New conversation", description="Title used when none is supplied"
    )

    # ===== CORS Settings =====
    allowed_origins: str = Field(
        default="http://localhost:5173",
        description="Allowed CORS origins (comma-separated)",
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # ===== Monitoring & Logging =====
    log_level: LogLevelEnum = Field(default=LogLevelEnum.INFO, description="Logging level")
    log_format: LogFormatEnum = Field(default=LogFormatEnum.simple, description="Log format")

    # ===== Server Settings =====
    host: str = Field(default="127.0.0.1", description="Host to bind the server")
    port: int = Field(default=3001, description="Port to bind the server")

    # ===== Computed Properties =====
    @property
    def is_development(self) -> bool:
        return self.environment == EnvironmentEnum.development

    @property
    def is_production(self) -> bool:
        return self.environment == EnvironmentEnum.production

    @property
    def is_testing(self) -> bool:
        return self.environment == EnvironmentEnum.testing

    @property
    def has_ai_enabled(self) -> bool:
        return bool(self.anthropic_api_key)

    # ===== Validation Methods =====
    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if v and isinstance(v, str):
            lv = v.lower()
            if lv in ["dev", "develop"]:
                return "development"
            if lv in ["prod"]:
                return "production"
            return lv
        return v

    @field_validator("default_temperature")
    @classmethod
    def validate_temperature(cls, v):
        if not 0.0 <= v <= 1.0:
            raise ValueError("Default temperature must be between 0 and 1")
        return v


settings = Settings()


class ConfigValidator:
    @staticmethod
    def validate_required_settings():
        errors = []
        if not settings.gateway_token:
            errors.append("GATEWAY_TOKEN is required")
        if not settings.anthropic_api_key:
            errors.append("ANTHROPIC_API_KEY is required")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")


def get_config_summary() -> dict:
    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "database_url": settings.database_url,
        "auth_configured": bool(settings.gateway_token),
        "ai_enabled": settings.has_ai_enabled,
        "default_model": settings.default_model,
    }


__all__ = [
    "settings",
    "Settings",
    "ConfigValidator",
    "get_config_summary",
    "EnvironmentEnum",
    "LogLevelEnum",
    "LogFormatEnum",
]
