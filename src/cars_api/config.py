import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

SECRET_BACKENDS = ("aws", "env")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Secret store
    secret_backend: str = os.getenv("SECRET_BACKEND", "env").lower()
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    api_key_secret_name: str = os.getenv("API_KEY_SECRET_NAME", "Final-Secret-Key")
    connection_string_secret_name: str = os.getenv(
        "CONNECTION_STRING_SECRET_NAME", "SqlConnectionString"
    )

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.secret_backend not in SECRET_BACKENDS:
            raise ValueError(
                f"SECRET_BACKEND must be one of {list(SECRET_BACKENDS)}, got {self.secret_backend!r}"
            )

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
