"""
Library configuration module.
Loads environment variables and provides the defaults used by calculator widgets.
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get project root (one level up from the package)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables or .env file.
    (Note: Environment variables take precedence over .env file)

    Every variable is read with the CALCKIT_ prefix, e.g. CALCKIT_DEFAULT_CURRENCY=EUR.
    """
    # Formatting
    DEFAULT_CURRENCY: str = "USD"  # ISO 4217 code, not validated
    DEFAULT_LOCALE: str = "en_US"  # Babel locale identifier (en_US or en-US)
    DEFAULT_DECIMALS: int = 2

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # No file logging unless set

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_prefix="CALCKIT_",
        case_sensitive=True,
        env_file_encoding='utf-8',
        extra="ignore",
        )


def get_settings() -> Settings:
    """
    Get settings instance.

    A fresh instance is built on every call so that environment changes
    (e.g. in tests) are picked up.

    Returns:
        Settings: Library settings
    """
    return Settings()
