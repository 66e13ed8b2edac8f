"""Publisher CLI commands."""

import typer

from .render import publisher_panel, publishers_table
from .utils import catalog_errors, console, get_service

publisher_app = typer.Typer(help="🏢 Publisher commands", no_args_is_help=True)


@publisher_app.command("add")
def add_publisher(
    name: str = typer.Argument(..., help="Publisher name (unique)"),
    email: str = typer.Option(..., "--email", "-e", help="Contact email (unique)"),
    phone: str = typer.Option(..., "--phone", "-p", help="Contact phone (unique)"),
) -> None:
    """Add a new publisher."""
    with catalog_errors():
        publisher = get_service().create_publisher(name, email, phone)
    console.print(f"[green]✅ Added publisher '{publisher.name}'[/green]")


@publisher_app.command("list")
def list_publishers() -> None:
    """List all publishers."""
    with catalog_errors():
        publishers = get_service().list_publishers()

    if not publishers:
        console.print("[yellow]No publishers found[/yellow]")
        return
    console.print(publishers_table(publishers))


@publisher_app.command("show")
def show_publisher(name: str = typer.Argument(..., help="Publisher name")) -> None:
    """Show one publisher."""
    with catalog_errors():
        publisher = get_service().get_publisher(name)
    console.print(publisher_panel(publisher))
