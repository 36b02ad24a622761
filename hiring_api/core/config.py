"""Application configuration from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "Hiring API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "PUT", "OPTIONS"]

    # Roles
    ROLE_EXPIRATION_MONTHS: int = 3

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WRITES: str = "60/minute"

    # Features
    FEATURE_HIRED: bool = False
    FEATURE_ENABLE_ROLE_POSTING: bool = True
    FEATURE_REQUIRE_ROLE_APPROVAL: bool = False
    FEATURE_SHOW_EXPIRED_ROLES: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("ROLE_EXPIRATION_MONTHS")
    @classmethod
    def _positive_months(cls, value: int) -> int:
        if value < 1:
            raise ValueError("ROLE_EXPIRATION_MONTHS must be a positive integer")
        return value


settings = Settings()
