"""Cache management commands."""

import typer
from rich.console import Console

from ..cache import JsonFileStore, ResponseCache
from ..config import Config

console = Console()
cache_app = typer.Typer(help="Inspect or clear the response cache")


def _format_size(size_bytes: int) -> str:
    size_kb = size_bytes / 1024
    if size_kb > 1024:
        return f"{size_kb / 1024:.2f} MB"
    return f"{size_kb:.2f} KB"


@cache_app.command("info")
def cache_info() -> None:
    """Show cache location and size."""
    config = Config()
    cache = ResponseCache(JsonFileStore(config.cache_path))

    console.print(f"Cache file: {config.cache_path}")
    console.print(f"Enabled: {'yes' if config.config.cache.enabled else 'no'}")
    console.print(f"Size: {_format_size(cache.size_bytes())}")


@cache_app.command("clear")
def cache_clear() -> None:
    """Remove all cached responses."""
    config = Config()
    cache = ResponseCache(JsonFileStore(config.cache_path))

    removed = cache.clear()
    console.print(f"[green]✅ Cleared {removed} cached responses[/green]")
