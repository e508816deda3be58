"""
Application configuration settings
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os

from sales_engine.config import DATA_DIR as DEFAULT_DATA_DIR


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Record Store
    DATA_DIR: str = DEFAULT_DATA_DIR

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Monitoring and Logging
    LOG_LEVEL: str = "INFO"


# Create settings instance
settings = Settings()

# Validate required settings in production
if settings.ENVIRONMENT == "production" and not os.path.isdir(settings.DATA_DIR):
    raise ValueError(f"DATA_DIR does not exist: {settings.DATA_DIR}")
