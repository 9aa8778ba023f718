"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..ingestion.relay import RelayConfig, resolve_relay
from .models import ConfigModel


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = Path(
                os.environ.get("VODHUB_CONFIG", Path.home() / ".config" / "vodhub" / "config.yaml")
            )
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists yet."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def sources_path(self) -> Path:
        """Get the source registry path."""
        return self.config_path.parent / "sources.yaml"

    @property
    def cache_path(self) -> Path:
        """Get the cache file path."""
        return Path(self.config.cache.path).expanduser()

    def get_relay_config(self) -> RelayConfig:
        """Resolve the active relay."""
        relay = self.config.relay

        # Environment override wins over the selected preset
        if relay.url_env:
            override = os.environ.get(relay.url_env)
            if override:
                return RelayConfig(prefix=override.strip())

        return resolve_relay(relay.selected, relay.custom_url)

    def get_fetcher_settings(self) -> Dict[str, Any]:
        """Get keyword arguments for SourceFetcher."""
        return {
            "timeout": self.config.http.timeout,
            "user_agent": self.config.http.user_agent,
        }


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
