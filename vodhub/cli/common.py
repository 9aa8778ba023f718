"""Helpers shared by CLI commands."""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..cache import JsonFileStore, ResponseCache
from ..config import Config
from ..ingestion import SourceFetcher
from ..models import Video
from ..pipeline import group_by_source_name

console = Console()


def build_cache(config: Config) -> Optional[ResponseCache]:
    """Response cache backed by the configured file, or None when disabled."""
    if not config.config.cache.enabled:
        return None
    return ResponseCache(JsonFileStore(config.cache_path))


def build_fetcher(config: Config) -> SourceFetcher:
    """Source fetcher wired to the configured cache and HTTP settings."""
    return SourceFetcher(cache=build_cache(config), **config.get_fetcher_settings())


def print_videos(videos: Sequence[Video], show_episodes: bool = False) -> None:
    """Print videos as one table per source."""
    for source_name, group in group_by_source_name(videos).items():
        table = Table(title=f"{source_name} ({len(group)})")
        table.add_column("Title", style="cyan")
        table.add_column("Remarks", style="magenta")
        table.add_column("Episodes", style="green", justify="right")
        table.add_column("ID", style="dim")

        for video in group:
            table.add_row(video.title, video.remarks, str(len(video.episodes)), video.id)

        console.print(table)

        if show_episodes:
            for video in group:
                console.print(f"[bold]{video.title}[/bold]")
                for episode in video.episodes:
                    console.print(f"  {episode.name}: [blue]{episode.url}[/blue]")
