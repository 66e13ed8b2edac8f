"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from loguru import logger
from rich.console import Console

from book_catalog.core.errors import (
    ConstraintViolation,
    IntegrityError,
    NotFoundError,
    ValidationError,
)
from book_catalog.core.services.catalog_service import CatalogService
from book_catalog.runtime.context import get_config
from book_catalog.runtime.init_db import init_db

# Initialize Rich console for colored output
console = Console()


def get_service() -> CatalogService:
    """Build a catalog service on the configured database, creating tables if needed."""
    session_service = init_db(get_config().database)
    return CatalogService(session_service.create_store())


@contextmanager
def catalog_errors() -> Iterator[None]:
    """Report catalog errors and exit with a non-zero status.

    Integrity errors mean the stored data is corrupt; they are logged with
    their traceback and exit with status 2.
    """
    try:
        yield
    except ValidationError as e:
        console.print(f"[red]❌ Invalid {e.field}: {e.message}[/red]")
        raise typer.Exit(code=1) from e
    except NotFoundError as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(code=1) from e
    except ConstraintViolation as e:
        console.print(f"[red]❌ Error: {e.message}[/red]")
        raise typer.Exit(code=1) from e
    except IntegrityError as e:
        logger.exception("Catalog data is inconsistent")
        console.print(f"[red]❌ Data integrity error: {e}[/red]")
        raise typer.Exit(code=2) from e
