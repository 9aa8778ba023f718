"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import Config, ConfigModel, save_config
from ..ingestion import PRESET_RELAYS
from ..registry import SourceRegistry, preset_sources, save_registry

console = Console()


def init_command(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Configuration directory (default: VODHUB_CONFIG location or ~/.config/vodhub)",
    ),
    relay: str = typer.Option("cors-eu-org", "--relay", "-r", help="Preset relay id"),
    seed_sources: bool = typer.Option(
        True,
        "--seed-sources/--no-seed-sources",
        help="Seed the curated catalog sources",
    ),
) -> None:
    """Initialize vodhub configuration and source registry."""
    console.print(Panel.fit("📺 vodhub - Initialization", style="bold blue"))

    if relay not in {preset.id for preset in PRESET_RELAYS}:
        console.print(f"[red]Unknown relay '{relay}'.[/red]")
        raise typer.Exit(1)

    config_path = Config().config_path if config_dir is None else config_dir / "config.yaml"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    sources_path = config_path.parent / "sources.yaml"

    config = ConfigModel(relay={"selected": relay})
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    registry = SourceRegistry(preset_sources() if seed_sources else [])
    save_registry(registry, sources_path)
    if seed_sources:
        console.print(f"✅ Created sources: {sources_path} (seeded with {len(registry)} sources)")
    else:
        console.print(f"✅ Created sources: {sources_path} (empty)")

    console.print(
        Panel(
            f"[green]✅ vodhub initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Sources: {sources_path}\n\n"
            f"Next steps:\n"
            f"1. Check sources: [bold]vodhub sources test[/bold]\n"
            f"2. Search: [bold]vodhub search <title>[/bold]",
            style="green",
        )
    )
