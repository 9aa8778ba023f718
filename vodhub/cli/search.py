"""Search and browse commands."""

import typer
from rich.console import Console

from ..config import Config
from ..errors import VodHubError
from ..pipeline import CATEGORIES, Aggregator
from ..registry import load_registry
from .common import build_fetcher, print_videos

console = Console()


def search_command(
    query: str = typer.Argument(..., help="Title to search for"),
    show_episodes: bool = typer.Option(False, "--episodes", "-e", help="List episode urls"),
) -> None:
    """Search all available sources at once."""
    config = Config()
    registry = load_registry(config.sources_path)
    aggregator = Aggregator(build_fetcher(config))

    try:
        result = aggregator.search_sync(registry.list(), config.get_relay_config(), query)
    except VodHubError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if result.videos:
        print_videos(result.videos, show_episodes=show_episodes)
    else:
        console.print(f"[yellow]No results for '{query}'.[/yellow]")

    if result.errors:
        console.print("\n[bold red]One or more sources failed:[/bold red]")
        for message in result.errors:
            console.print(f"  - {message}")


def browse_command(
    category: str = typer.Argument(
        "home",
        help=f"Category to browse ({', '.join(CATEGORIES)})",
    ),
    show_episodes: bool = typer.Option(False, "--episodes", "-e", help="List episode urls"),
) -> None:
    """Browse a category on the best available CMS source."""
    if category not in CATEGORIES:
        console.print(f"[red]Unknown category '{category}'. Choose from: {', '.join(CATEGORIES)}[/red]")
        raise typer.Exit(1)

    config = Config()
    registry = load_registry(config.sources_path)
    aggregator = Aggregator(build_fetcher(config))

    try:
        videos = aggregator.browse_category_sync(
            registry.list(), config.get_relay_config(), CATEGORIES[category]
        )
    except VodHubError as e:
        console.print(f"[red]Failed to load '{category}': {e}[/red]")
        raise typer.Exit(1)

    if not videos:
        console.print("[yellow]Nothing found.[/yellow]")
        return

    print_videos(videos, show_episodes=show_episodes)
