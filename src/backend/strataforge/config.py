"""AppSettings -- StrataForge application configuration.

All environment variables are read via pydantic-settings. Every setting has
a default so the error-handling stack can start without a .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class AppSettings(BaseSettings):
    """StrataForge application settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "StrataForge"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # "text" or "json"
    ERROR_LOGGER_NAME: str = "strataforge.errors"

    # Error page templates (Jinja2)
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")


settings = AppSettings()
