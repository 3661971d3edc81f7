"""
Service layer configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service layer settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "Entity Services"
    VERSION: str = "0.1.0"

    # Storage
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite+aiosqlite:///./entity_services.db"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    SERVICE_TRACE_ENABLED: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
