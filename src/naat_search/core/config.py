"""
Naat Search Configuration

Environment-driven settings for the search service and API.
"""

import os
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT")
    if env_value is None:
        raise RuntimeError(
            "ENVIRONMENT is required. Set to 'production', 'development', or 'test'."
        )
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


class Settings:
    """Search service configuration"""

    # Project Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # Catalogue (JSON export of the naats collection)
    NAATS_FILE: str = os.getenv("NAATS_FILE", str(DATA_DIR / "naats.json"))

    # Search Settings
    MAX_QUERY_LEN: int = int(os.getenv("MAX_QUERY_LEN", "200"))
    MAX_PAGE: int = int(os.getenv("MAX_PAGE", "100"))
    MAX_PER_PAGE: int = int(os.getenv("MAX_PER_PAGE", "50"))
    RESULTS_LIMIT: int = int(os.getenv("RESULTS_LIMIT", "20"))
    DEFAULT_MIN_SCORE: int = int(os.getenv("DEFAULT_MIN_SCORE", "60"))
    SEARCH_IN_CHANNEL: bool = os.getenv("SEARCH_IN_CHANNEL", "True").lower() == "true"
    SEARCH_RATE_LIMIT: str = os.getenv("SEARCH_RATE_LIMIT", "100/minute")  # per client IP

    # Security
    ALLOWED_HOSTS: list[str] = os.getenv(
        "ALLOWED_HOSTS", "localhost,127.0.0.1,testclient,testserver"
    ).split(",")
    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Environment
    ENVIRONMENT: Environment = _get_environment()


settings = Settings()
