"""
Environment configuration loader with validation for flightbook.
"""

import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///flights.db"


class AppConfig(BaseModel):
    """Configuration model for the booking store and template server."""

    # Database Configuration
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL, description="Database connection URL"
    )
    database_echo: bool = Field(default=False, description="Log SQL statements")

    # Template Server Configuration
    template_path: str = Field(
        default="template.html", description="HTML template rendered on /"
    )
    hidden_value: str = Field(
        default="some value", description="Value bound to HiddenValue in the template"
    )
    server_host: str = Field(default="0.0.0.0", description="Template server host")
    server_port: int = Field(
        default=8080, ge=1, le=65535, description="Template server port"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        AppConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    try:
        config_data: Dict[str, Any] = {
            "database_url": os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            "database_echo": os.getenv("DATABASE_ECHO", "false").lower()
            in ("true", "1", "yes", "on"),
            "template_path": os.getenv("TEMPLATE_PATH", "template.html"),
            "hidden_value": os.getenv("HIDDEN_VALUE", "some value"),
            "server_host": os.getenv("SERVER_HOST", "0.0.0.0"),
            "server_port": int(os.getenv("SERVER_PORT", "8080")),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        return AppConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        AppConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
