"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .cache import cache_app
from .init import init_command
from .relay import relay_app
from .search import browse_command, search_command
from .sources import sources_app

app = typer.Typer(
    name="vodhub",
    help="vodhub - search many video catalogs as one",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("search")(search_command)
app.command("browse")(browse_command)
app.add_typer(sources_app, name="sources", help="Manage catalog sources")
app.add_typer(relay_app, name="relay", help="Select the relay")
app.add_typer(cache_app, name="cache", help="Manage the response cache")


if __name__ == "__main__":
    app()
