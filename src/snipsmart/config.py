"""Environment-driven settings for snipsmart.

Settings are read from the process environment after loading a ``.env``
file, if one exists:

    SNIPSMART_FORMAT          Default extraction format (default: json)
    SNIPSMART_CASE_SENSITIVE  Compare tag names verbatim (default: false)
    SNIPSMART_LOG_LEVEL       CLI logging level (default: WARNING)
"""
import logging
import os
from collections.abc import Mapping

import dotenv
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger("snipsmart.config")

TRUTHY = {"1", "true", "yes", "on"}


def validate_log_level(value: str) -> str:
    """Return the upper-cased level name, or raise ValueError if logging does not know it."""
    value = value.upper()
    if not isinstance(logging.getLevelName(value), int):
        raise ValueError(f"Unknown log level: {value}")
    return value


class Settings(BaseModel):
    """Resolved configuration values.

    Attributes:
        format: Default format used when the CLI gets no --format flag.
        case_sensitive: Default tag case sensitivity.
        log_level: Name of the logging level the CLI configures.
    """

    model_config = ConfigDict(frozen=True)

    format: str = "json"
    case_sensitive: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return validate_log_level(value)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ. When omitted, a
            ``.env`` file found from the working directory upward is loaded
            first, without overriding existing variables.

    Returns:
        The resolved Settings.
    """
    if environ is None:
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        environ = os.environ
    settings = Settings(
        format=environ.get("SNIPSMART_FORMAT", "json"),
        case_sensitive=environ.get("SNIPSMART_CASE_SENSITIVE", "").strip().lower() in TRUTHY,
        log_level=environ.get("SNIPSMART_LOG_LEVEL", "WARNING"),
    )
    logger.debug(f"Settings loaded: {settings}")
    return settings
