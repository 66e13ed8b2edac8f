"""Main CLI application module."""

from enum import Enum
from pathlib import Path

import typer

from book_catalog.core.errors import EntityCategory
from book_catalog.runtime.context import get_config, load_config, set_config
from book_catalog.runtime.init_db import init_db
from book_catalog.runtime.logging_setup import configure_logging

from .author_commands import author_app
from .book_commands import book_app
from .publisher_commands import publisher_app
from .shell import CatalogShell
from .utils import catalog_errors, console, get_service

# Create the main CLI application
app = typer.Typer(
    help="📖 Book Catalog - manage books, publishers and authoring entities",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(publisher_app, name="publisher")
app.add_typer(author_app, name="author")
app.add_typer(book_app, name="book")


class LogLevel(str, Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class KeyListing(str, Enum):
    publishers = "publishers"
    books = "books"
    authors = "authors"

    @property
    def category(self) -> EntityCategory:
        return {
            KeyListing.publishers: EntityCategory.PUBLISHER,
            KeyListing.books: EntityCategory.BOOK,
            KeyListing.authors: EntityCategory.AUTHORING_ENTITY,
        }[self]


@app.callback()
def configure(
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="Path to config.yaml"
    ),
    database_url: str | None = typer.Option(
        None, "--database-url", help="Override the configured database URL"
    ),
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", case_sensitive=False, help="Logging level"
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ Failed to load configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    if database_url:
        config.database.url = database_url
    if log_level:
        config.logging.level = log_level.value
    set_config(config)
    try:
        configure_logging(config)
    except ValueError as e:
        console.print(f"[red]❌ Invalid logging configuration: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command("init-db")
def init_database() -> None:
    """Create the catalog tables."""
    session_service = init_db(get_config().database)
    if not session_service.health_check():
        console.print("[red]❌ Database is not reachable[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Database ready at {get_config().database.safe_url}[/green]")


@app.command("keys")
def list_keys(
    listing: KeyListing = typer.Argument(..., help="Which records to list"),
) -> None:
    """List the primary keys of publishers, books or authoring entities."""
    with catalog_errors():
        keys = get_service().primary_keys(listing.category)

    if not keys:
        console.print(f"[yellow]No {listing.value} found[/yellow]")
        return
    for key in keys:
        console.print(key, markup=False, highlight=False)


@app.command("shell")
def shell() -> None:
    """Start the interactive catalog menu."""
    CatalogShell(get_service(), console).run()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
