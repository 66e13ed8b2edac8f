"""Rich renderables for catalog records."""

from rich.panel import Panel
from rich.table import Table

from book_catalog.entities import (
    AuthoringEntity,
    Book,
    BookDetails,
    IndividualAuthor,
    Publisher,
    WritingGroup,
)


def _info_panel(title: str, rows: list[tuple[str, object]]) -> Panel:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="cyan")
    grid.add_column()
    for label, value in rows:
        grid.add_row(label, str(value))
    return Panel(grid, title=title, expand=False)


def publisher_panel(publisher: Publisher) -> Panel:
    return _info_panel(
        "Publisher Info",
        [
            ("Publisher Name", publisher.name),
            ("Publisher Email", publisher.email),
            ("Publisher Phone", publisher.phone),
        ],
    )


def book_panel(details: BookDetails) -> Panel:
    return _info_panel(
        "Book Info",
        [
            ("Book Title", details.book.title),
            ("Book Author", details.author.name),
            ("Book Year", details.book.year_published),
            ("Book Publisher", details.publisher.name),
            ("Book ISBN", details.book.isbn),
        ],
    )


def authoring_entity_panel(entity: AuthoringEntity) -> Panel:
    rows: list[tuple[str, object]] = [
        ("Name", entity.name),
        ("Email", entity.email),
        ("Type", entity.kind.label),
    ]
    if isinstance(entity, WritingGroup):
        rows += [("Head Writer", entity.head_writer), ("Year Formed", entity.year_formed)]
    return _info_panel(f"{entity.kind.label} Info", rows)


def publishers_table(publishers: list[Publisher]) -> Table:
    table = Table(title="Available Publishers")
    table.add_column("#", style="dim")
    table.add_column("Name", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Phone", style="magenta")
    for index, publisher in enumerate(publishers, start=1):
        table.add_row(str(index), publisher.name, publisher.email, publisher.phone)
    return table


def books_table(books: list[Book]) -> Table:
    table = Table(title="Available Books")
    table.add_column("#", style="dim")
    table.add_column("ISBN", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Year", style="yellow")
    for index, book in enumerate(books, start=1):
        table.add_row(str(index), book.isbn, book.title, str(book.year_published))
    return table


def authoring_entities_table(
    entities: list[AuthoringEntity], title: str = "Available Authors"
) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Email", style="blue")
    table.add_column("Name", style="green")
    table.add_column("Type", style="magenta")
    for index, entity in enumerate(entities, start=1):
        table.add_row(str(index), entity.email, entity.name, entity.kind.label)
    return table


def members_table(team_email: str, members: list[IndividualAuthor]) -> Table:
    return authoring_entities_table(members, title=f"Members of {team_email}")
