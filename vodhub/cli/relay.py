"""Relay selection commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, ConfigModel, save_config
from ..ingestion import PRESET_RELAYS

console = Console()
relay_app = typer.Typer(help="Select the relay used for outbound requests")


@relay_app.command("list")
def relay_list() -> None:
    """List preset relays and the active one."""
    config = Config()
    selected = config.config.relay.selected

    table = Table(title="Relays")
    table.add_column("", style="green")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Prefix", style="blue")

    for preset in PRESET_RELAYS:
        prefix = config.config.relay.custom_url if preset.id == "custom" else preset.url
        table.add_row("●" if preset.id == selected else "", preset.id, preset.name, prefix or "-")

    console.print(table)
    console.print(f"Active prefix: [bold]{config.get_relay_config().prefix or '(direct)'}[/bold]")


@relay_app.command("set")
def relay_set(
    relay_id: str = typer.Argument(..., help="Preset relay id"),
    custom_url: Optional[str] = typer.Option(None, "--url", "-u", help="Prefix for the custom relay"),
) -> None:
    """Select a relay."""
    if relay_id not in {preset.id for preset in PRESET_RELAYS}:
        console.print(f"[red]Unknown relay '{relay_id}'.[/red]")
        raise typer.Exit(1)

    if relay_id == "custom" and not (custom_url or "").strip():
        console.print("[red]The custom relay needs --url.[/red]")
        raise typer.Exit(1)

    config = Config()
    model: ConfigModel = config.config
    model.relay.selected = relay_id
    if custom_url is not None:
        model.relay.custom_url = custom_url.strip()

    save_config(model, config.config_path)
    console.print(f"[green]✅ Relay set to {relay_id}[/green]")
