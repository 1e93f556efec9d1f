"""
Layered configuration lookup.

A configuration comes from the first source that provides one: an explicit
JSON file, the ``MIRAGE_*`` environment variables, ``mirage.json`` in the
working directory (or its ``config/`` folder), and finally the built-in
defaults. Nothing is ever written back to disk.
"""

import logging
import os
from pathlib import Path

from .models import MirageConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "mirage.json"
CONFIG_FILE_ENV = "MIRAGE_CONFIG_FILE"

ENV_VARS = {
    "MIRAGE_LOCALE": "default_locale",
    "MIRAGE_SEED": "seed",
    "MIRAGE_DATA_PATH": "data_path",
    "MIRAGE_USE_PACKAGED_DATA": "use_packaged_data",
    "MIRAGE_LOG_LEVEL": "log_level",
}

_FALSE_VALUES = {"0", "false", "no", "off"}


def default_config_locations(config_name: str = DEFAULT_CONFIG_NAME) -> list[Path]:
    cwd = Path.cwd()
    return [cwd / config_name, cwd / "config" / config_name]


def load_config(
    config_path: str | Path | None = None, config_name: str = DEFAULT_CONFIG_NAME
) -> MirageConfig:
    """
    Load a JSON configuration file.

    Args:
        config_path: File, or directory holding ``config_name``; the default
            locations are searched when omitted
        config_name: File name looked up in directories

    Raises:
        FileNotFoundError: If no configuration file exists
        ValueError: If the file is not valid configuration JSON
    """
    if config_path is None:
        locations = default_config_locations(config_name)
        found = next((path for path in locations if path.is_file()), None)
        if found is None:
            searched = ", ".join(str(path) for path in locations)
            raise FileNotFoundError(f"No {config_name} found (searched: {searched})")
        return MirageConfig.from_file(found)

    path = Path(config_path)
    if path.is_dir():
        path = path / config_name
    return MirageConfig.from_file(path)


def _coerce_env_value(field_name: str, raw: str) -> object:
    if field_name == "seed":
        return int(raw)
    if field_name == "use_packaged_data":
        return raw.strip().lower() not in _FALSE_VALUES
    return raw


def get_config_from_env() -> MirageConfig | None:
    """
    Build a configuration from environment variables.

    ``MIRAGE_CONFIG_FILE`` names a JSON file and takes precedence over the
    individual variables.

    Returns:
        MirageConfig, or None when no relevant variable is set

    Raises:
        FileNotFoundError: If ``MIRAGE_CONFIG_FILE`` names a missing file
        ValueError: If a variable holds an invalid value
    """
    config_file = os.getenv(CONFIG_FILE_ENV)
    if config_file:
        return load_config(config_file)

    overrides = {
        field_name: os.environ[env_name]
        for env_name, field_name in ENV_VARS.items()
        if os.environ.get(env_name)
    }
    if not overrides:
        return None

    try:
        return MirageConfig(
            **{name: _coerce_env_value(name, raw) for name, raw in overrides.items()}
        )
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid MIRAGE_* environment configuration: {e}")


def load_config_with_fallback(config_path: str | Path | None = None) -> MirageConfig:
    """
    Resolve the configuration from the first source that provides one.

    Order: ``config_path``, environment variables, default file locations,
    built-in defaults. A missing explicit file or an invalid environment is
    logged and skipped.
    """
    if config_path:
        try:
            return load_config(config_path)
        except FileNotFoundError:
            logger.warning(f"Configuration file {config_path} not found, trying fallbacks")

    try:
        env_config = get_config_from_env()
    except (ValueError, FileNotFoundError) as e:
        logger.warning(f"Ignoring environment configuration: {e}")
        env_config = None
    if env_config is not None:
        return env_config

    try:
        return load_config()
    except FileNotFoundError:
        logger.debug("No configuration file found, using built-in defaults")
    return MirageConfig()
