"""Settings for the knf command-line tool.

Values come from environment variables with the ``KNF_`` prefix:

    KNF_CONFIG=/etc/myapp.knf
    KNF_LOG_LEVEL=INFO
    KNF_DEBUG=true
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class KnfSettings(BaseSettings):
    """Tool settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix='KNF_',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    config: Optional[Path] = Field(
        default=None,
        description="Configuration file used when --config is not given"
    )

    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = Field(
        default='WARNING',
        description="Log level for the stderr sink"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator('log_level', mode='before')
    def normalize_log_level(cls, v):
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    @property
    def effective_log_level(self) -> str:
        return 'DEBUG' if self.debug else self.log_level


_settings_instance: Optional[KnfSettings] = None


def get_settings() -> KnfSettings:
    """Get the cached settings instance, loading it on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = KnfSettings()
    return _settings_instance


def reset_settings() -> None:
    """Reset the cached settings instance."""
    global _settings_instance
    _settings_instance = None
