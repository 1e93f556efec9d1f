"""Configuration models and loaders."""

from .models import MirageConfig
from .settings import get_config_from_env, load_config, load_config_with_fallback

__all__ = [
    "MirageConfig",
    "get_config_from_env",
    "load_config",
    "load_config_with_fallback",
]
