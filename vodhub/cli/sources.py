"""Sources management commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..errors import RegistryError
from ..models import SourceKind, SourceStatus
from ..pipeline import HealthProber
from ..registry import PRESET_SOURCES, load_registry, save_registry
from .common import build_fetcher

console = Console()
sources_app = typer.Typer(help="Manage catalog sources")

STATUS_STYLES = {
    SourceStatus.UNKNOWN: "dim",
    SourceStatus.TESTING: "yellow",
    SourceStatus.AVAILABLE: "green",
    SourceStatus.UNAVAILABLE: "red",
}


@sources_app.command("list")
def sources_list() -> None:
    """List all registered sources."""
    config = Config()
    registry = load_registry(config.sources_path)

    if not len(registry):
        console.print("[yellow]No sources registered.[/yellow]")
        return

    table = Table(title="Registered Sources")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Status")
    table.add_column("URL", style="blue")

    for source in registry:
        style = STATUS_STYLES[source.status]
        table.add_row(
            source.id,
            source.name,
            source.kind.value,
            f"[{style}]{source.status.value}[/{style}]",
            source.url,
        )

    console.print(table)


@sources_app.command("add")
def sources_add(
    url: str = typer.Argument(..., help="CMS api url or .m3u8 playlist url"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name (default: url host)"),
    kind: Optional[SourceKind] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Source kind (default: inferred from the url)",
    ),
) -> None:
    """Add a new source."""
    config = Config()
    registry = load_registry(config.sources_path)

    try:
        source = registry.add(url, name=name, kind=kind)
    except RegistryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    save_registry(registry, config.sources_path)
    console.print(f"[green]✅ Added source: {source.name} ({source.kind.value})[/green]")


@sources_app.command("presets")
def sources_presets() -> None:
    """List curated sources."""
    config = Config()
    registry = load_registry(config.sources_path)

    table = Table(title="Curated Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Added", style="yellow")
    table.add_column("URL", style="blue")

    for preset in PRESET_SOURCES:
        added = registry.find_by_url(preset["url"]) is not None
        table.add_row(preset["name"], "✓" if added else "✗", preset["url"])

    console.print(table)


@sources_app.command("add-preset")
def sources_add_preset(
    name: str = typer.Argument(..., help="Curated source name"),
) -> None:
    """Add a curated source."""
    preset = next((p for p in PRESET_SOURCES if p["name"] == name), None)
    if preset is None:
        console.print(f"[red]Curated source '{name}' not found.[/red]")
        raise typer.Exit(1)

    config = Config()
    registry = load_registry(config.sources_path)

    try:
        registry.add(preset["url"], name=preset["name"], kind=SourceKind(preset["kind"]))
    except RegistryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    save_registry(registry, config.sources_path)
    console.print(f"[green]✅ Added source: {name}[/green]")


@sources_app.command("remove")
def sources_remove(
    source_id: str = typer.Argument(..., help="Source id to remove"),
) -> None:
    """Remove a source."""
    config = Config()
    registry = load_registry(config.sources_path)

    try:
        source = registry.remove(source_id)
    except RegistryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    save_registry(registry, config.sources_path)
    console.print(f"[green]✅ Removed source: {source.name}[/green]")


@sources_app.command("test")
def sources_test(
    source_id: Optional[str] = typer.Argument(None, help="Source id to test (or test all)"),
) -> None:
    """Probe source availability and latency."""
    config = Config()
    registry = load_registry(config.sources_path)

    sources = registry.list()
    if source_id:
        sources = [s for s in sources if s.id == source_id]
        if not sources:
            console.print(f"[red]Source '{source_id}' not found.[/red]")
            raise typer.Exit(1)

    registry.mark_testing([s.id for s in sources])
    prober = HealthProber(build_fetcher(config))
    results = prober.probe_all_sync(sources, config.get_relay_config())
    registry.apply_probe_results(results)
    save_registry(registry, config.sources_path)

    for source in sources:
        result = results[source.id]
        if result.status == SourceStatus.AVAILABLE:
            console.print(f"[green]✅ {source.name}: OK ({result.latency_ms} ms)[/green]")
        else:
            console.print(f"[red]❌ {source.name}: {result.error}[/red]")
