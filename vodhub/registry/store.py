"""Source registry persistence."""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError
from rich.console import Console

from ..models import Source, SourceStatus, infer_source_kind
from .presets import preset_sources
from .registry import SourceRegistry

console = Console(stderr=True)


def _restore_source(data: Dict[str, Any]) -> Source:
    data = dict(data)
    url = str(data.get("url", ""))
    # Older registries predate kind and status
    data.setdefault("id", url)
    data["kind"] = data.get("kind") or infer_source_kind(url)
    data["status"] = data.get("status") or SourceStatus.UNKNOWN
    return Source(**data)


def load_registry(sources_path: Path) -> SourceRegistry:
    """Load the registry from YAML, seeding presets when none is stored."""
    if not sources_path.exists():
        return SourceRegistry(preset_sources())

    try:
        with open(sources_path) as f:
            sources_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        console.print(f"[yellow]Invalid YAML in sources file, using presets: {e}[/yellow]")
        return SourceRegistry(preset_sources())

    if not isinstance(sources_data, dict) or not isinstance(sources_data.get("sources"), list):
        return SourceRegistry(preset_sources())

    sources = []
    for source_data in sources_data["sources"]:
        if not isinstance(source_data, dict):
            continue
        try:
            sources.append(_restore_source(source_data))
        except ValidationError as e:
            console.print(f"Skipping invalid source {source_data.get('name', 'unknown')}: {e}")

    return SourceRegistry(sources)


def save_registry(registry: SourceRegistry, sources_path: Path) -> None:
    """Save the registry to YAML, preserving order."""
    sources_path.parent.mkdir(parents=True, exist_ok=True)

    sources_data = {
        "sources": [
            source.model_dump(mode="json", include={"id", "name", "url", "kind", "status"})
            for source in registry
        ]
    }

    with open(sources_path, "w") as f:
        yaml.dump(sources_data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
