# settings.py
"""
Exercise Tracker API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import urlparse


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB - REQUIRED from environment
    MONGO_URI: str = Field(..., description="MongoDB connection string (required)")
    DATABASE_NAME: str = Field(
        default="exercise_tracker",
        description="Database used when MONGO_URI does not name one"
    )

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Environment
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "*"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def database_name(self) -> str:
        """Database named in the connection string path, else DATABASE_NAME."""
        path = urlparse(self.MONGO_URI).path.lstrip("/")
        return path or self.DATABASE_NAME

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
