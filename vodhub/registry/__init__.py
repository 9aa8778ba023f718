"""Source registry and its YAML persistence."""

from .presets import PRESET_SOURCES, preset_sources
from .registry import SourceRegistry
from .store import load_registry, save_registry

__all__ = ["PRESET_SOURCES", "SourceRegistry", "load_registry", "preset_sources", "save_registry"]
