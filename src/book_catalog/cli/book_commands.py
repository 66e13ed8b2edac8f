"""Book CLI commands."""

import typer
from rich.prompt import Confirm

from .render import book_panel, books_table
from .utils import catalog_errors, console, get_service

book_app = typer.Typer(help="📚 Book commands", no_args_is_help=True)


@book_app.command("add")
def add_book(
    isbn: str = typer.Argument(..., help="ISBN (unique)"),
    title: str = typer.Option(..., "--title", "-t", help="Book title"),
    year: str = typer.Option(..., "--year", "-y", help="Publication year"),
    author: str = typer.Option(..., "--author", "-a", help="Authoring entity email"),
    publisher: str = typer.Option(..., "--publisher", "-p", help="Publisher name"),
) -> None:
    """Add a new book."""
    with catalog_errors():
        book = get_service().create_book(isbn, title, year, author, publisher)
    console.print(f"[green]✅ Added book '{book.title}' (ISBN: {book.isbn})[/green]")


@book_app.command("delete")
def delete_book(
    isbn: str = typer.Argument(..., help="ISBN of the book to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete a book."""
    service = get_service()
    with catalog_errors():
        if not force:
            book = service.get_book(isbn)
            if not Confirm.ask(f"Are you sure you want to delete '{book.title}'?"):
                console.print("[yellow]Deletion cancelled[/yellow]")
                return
        deleted = service.delete_book(isbn)
    console.print(f"[green]{deleted.title} has been deleted (ISBN: {deleted.isbn})[/green]")


@book_app.command("show")
def show_book(isbn: str = typer.Argument(..., help="ISBN")) -> None:
    """Show a book with its author and publisher."""
    with catalog_errors():
        details = get_service().describe_book(isbn)
    console.print(book_panel(details))


@book_app.command("list")
def list_books() -> None:
    """List all books."""
    with catalog_errors():
        books = get_service().list_books()

    if not books:
        console.print("[yellow]No books found[/yellow]")
        return
    console.print(books_table(books))
