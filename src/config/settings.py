"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables (or a .env file) with
sensible defaults. Using Pydantic's BaseSettings means we get:
- Type validation at startup
- Documentation of what can be configured
- Easy testing with different configurations
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.training.report import LABELS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables,
    e.g. REPORT_LOCALE=ru.
    """

    app_name: str = "Training Calculator"

    report_locale: str = Field(
        default="en",
        description="Language of the printed report and sample training names (en, ru)."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def report_locale_supported(self) -> bool:
        return self.report_locale.lower() in LABELS

    @property
    def log_level_known(self) -> bool:
        return isinstance(logging.getLevelName(self.log_level.upper()), int)

    def validate_fields(self) -> list[str]:
        """
        Check values that Pydantic's type validation can't.

        Returns a list of problems; empty means the configuration is usable.
        """
        problems = []

        if not self.report_locale_supported:
            problems.append(
                f"REPORT_LOCALE '{self.report_locale}' is not one of: {', '.join(sorted(LABELS))}"
            )

        if not self.log_level_known:
            problems.append(f"LOG_LEVEL '{self.log_level}' is not a logging level")

        return problems


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process. For tests, call
    get_settings.cache_clear() to reset.
    """
    return Settings()
