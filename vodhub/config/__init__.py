"""Configuration management for vodhub."""

from .loader import Config, load_config, save_config
from .models import CacheSettings, ConfigModel, HttpSettings, RelaySettings

__all__ = [
    "Config",
    "ConfigModel",
    "CacheSettings",
    "HttpSettings",
    "RelaySettings",
    "load_config",
    "save_config",
]
