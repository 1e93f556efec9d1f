"""
Configuration models for the locale data generator.

These models define the structure and validation for the optional
``mirage.json`` configuration file.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ..shared.exceptions import UnsupportedLocaleError
from ..shared.locale import DEFAULT_LOCALE, Locale

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MirageConfig(BaseModel):
    """Main configuration model for the locale data generator."""

    default_locale: str = Field(
        DEFAULT_LOCALE.code,
        description="Locale used when none (or an unsupported one) is requested",
    )
    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        description="Seed for the shared random service; unseeded when omitted",
    )
    data_path: str | None = Field(
        None,
        description="Directory holding <locale>/<category>.yaml documents",
    )
    use_packaged_data: bool = Field(
        True,
        description="Fall back to the data documents shipped with the package",
    )
    log_level: str = Field("INFO", description="Logging level for entry points")

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Normalize the locale code and reject unsupported ones."""
        try:
            return Locale.from_code(v).code
        except UnsupportedLocaleError as e:
            raise ValueError(str(e))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def locale(self) -> Locale:
        return Locale.from_code(self.default_locale)

    @classmethod
    def from_file(cls, file_path: str | Path) -> "MirageConfig":
        """
        Read a ``mirage.json`` document.

        Raises:
            FileNotFoundError: If ``file_path`` is not an existing file
            ValueError: If the file is malformed JSON or fails field validation
        """
        source = Path(file_path)
        if not source.is_file():
            raise FileNotFoundError(f"No configuration file at {source}")

        try:
            payload = json.loads(source.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {source.name}: {e}")

        logger.debug(f"Loaded configuration from {source}")
        return cls(**payload)
