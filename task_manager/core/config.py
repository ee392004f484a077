"""
Configuration settings for the Task Manager API.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Application settings"""

    # Service information
    service_name: str = os.getenv("SERVICE_NAME", "task_manager")
    service_version: str = "1.0.0"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database configuration
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./task_manager.db")

    # API configuration
    api_prefix: str = os.getenv("API_PREFIX", "")
    cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Security
    secret_key: str = os.getenv(
        "SECRET_KEY",
        "task-manager-secret-key-change-in-production"
    )
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
