from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CPAN_URL, DEFAULT_PACKAGER, ENV_PREFIX, LOG_LEVELS
from .errors import ValidationError


class Settings(BaseSettings):
    """
    Runtime settings read from ``DISTARCH_*`` environment variables.

    ``DISTARCH_LOG_LEVEL`` picks the log level; ``DISTARCH_DEBUG`` switches to
    debug logging when no level is given.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True)

    packager: str = DEFAULT_PACKAGER
    debug: bool = False
    log_level: Optional[str] = None
    cpan_url: str = CPAN_URL

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        level = str(v).strip().lower()
        if level not in LOG_LEVELS:
            raise ValidationError(
                f"Invalid log level: '{v}'. Supported levels: {', '.join(LOG_LEVELS)}"
            )
        return level


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
