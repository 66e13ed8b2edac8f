"""Interactive menu shell over the catalog service.

Each menu action is one transaction: the service commits it when the action
completes, and nothing is written when the user cancels with Q.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from book_catalog.core.errors import (
    ConstraintViolation,
    IntegrityError,
    NotFoundError,
    ValidationError,
)
from book_catalog.core.services.catalog_service import CatalogService

from .render import (
    authoring_entities_table,
    authoring_entity_panel,
    book_panel,
    books_table,
    members_table,
    publisher_panel,
    publishers_table,
)

T = TypeVar("T")

MAIN_MENU = [
    "Add a new object",
    "List object information",
    "Delete a book",
    "List primary keys",
]
ADD_MENU = [
    "Add new Authoring Entity",
    "Add new Publisher",
    "Add new Book",
]
AUTHOR_TYPES_MENU = ["Writing Group", "Individual Author", "Ad Hoc Team"]
AD_HOC_TEAM_MENU = [
    "Add an Ad Hoc Team",
    "Add an Individual Author to an Ad Hoc Team",
]
INFO_MENU = [
    "Get Publisher Info",
    "Get Book Info",
    "Get Writing Group Info",
    "Get Ad Hoc Team Info",
]
KEYS_MENU = ["Publishers", "Books", "Authoring Entities"]


class Cancelled(Exception):
    """The user entered Q at a prompt."""


class CatalogShell:
    def __init__(self, service: CatalogService, console: Console) -> None:
        self._service = service
        self._console = console

    def run(self) -> None:
        """Loop over the main menu until the user quits."""
        actions: dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._info,
            3: self._delete_book,
            4: self._list_keys,
        }
        while True:
            try:
                choice = self._choose("MAIN MENU", MAIN_MENU, cancel_hint="Q to quit")
            except Cancelled:
                self._console.print("\nExiting application.\n")
                return

            try:
                actions[choice]()
            except Cancelled:
                self._console.print("\n[yellow]Transaction cancelled.[/yellow]\n")
            except (ValidationError, NotFoundError) as e:
                self._console.print(f"\n[red]Error: {e}[/red]\n")
            except ConstraintViolation as e:
                self._console.print(f"\n[red]Error: {e.message}[/red]\n")
            except IntegrityError as e:
                logger.exception("Catalog data is inconsistent")
                self._console.print(f"\n[red]Data integrity error: {e}[/red]\n")
            else:
                self._console.print("\n[green]Successful transaction.[/green]\n")

    # Prompt helpers

    def _ask(self, prompt: str) -> str:
        response = Prompt.ask(f"{prompt}, or Q to cancel", console=self._console)
        if response.strip().lower() == "q":
            raise Cancelled
        return response

    def _choose(self, title: str, options: Sequence[str], cancel_hint: str = "Q to cancel") -> int:
        while True:
            self._console.print(f"\n[bold]******** {title} ********[/bold]")
            for number, option in enumerate(options, start=1):
                self._console.print(f"{number}. {option}")
            response = Prompt.ask(
                f"\nChoose an option (#), or {cancel_hint}", console=self._console
            )
            if response.strip().lower() == "q":
                raise Cancelled
            try:
                choice = int(response)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(options):
                return choice
            self._console.print(
                f"[red]Error: Please enter a number 1-{len(options)}; Please try again.[/red]"
            )

    def _pick(self, items: Sequence[T], show: Callable[[Sequence[T]], object], what: str) -> T:
        """Display ``items`` and let the user choose one by number."""
        if not items:
            self._console.print("\n[red]Error: missing required database information.[/red]")
            self._console.print(
                f"Please ensure at least one {what} exists before requesting {what} info."
            )
            raise Cancelled
        self._console.print(show(items))
        while True:
            response = self._ask(f"Choose a {what} (#)")
            try:
                index = int(response)
            except ValueError:
                index = 0
            if 1 <= index <= len(items):
                return items[index - 1]
            self._console.print(
                f"[red]Error: Please enter a number 1-{len(items)}; Please try again.[/red]"
            )

    def _retry(self, action: Callable[[], T]) -> T:
        """Re-run a prompting action until it passes validation."""
        while True:
            try:
                return action()
            except (ValidationError, NotFoundError) as e:
                self._console.print(f"[red]Error: {e}; Please try again.[/red]")

    # Add

    def _add(self) -> None:
        choice = self._choose("ADD MENU", ADD_MENU)
        if choice == 1:
            self._add_authoring_entity()
        elif choice == 2:
            self._retry(self._add_publisher)
        else:
            self._add_book()

    def _add_authoring_entity(self) -> None:
        choice = self._choose("AUTHORING ENTITY TYPES", AUTHOR_TYPES_MENU)
        if choice == 1:
            self._retry(self._add_writing_group)
        elif choice == 2:
            self._retry(self._add_individual_author)
        elif self._choose("AD HOC TEAM ADD", AD_HOC_TEAM_MENU) == 1:
            self._retry(self._add_ad_hoc_team)
        else:
            self._add_team_members()

    def _add_writing_group(self) -> None:
        self._console.print("\n******** ADDING WRITING GROUP ********")
        name = self._ask("Enter the Writing Group name")
        email = self._ask("Enter the Writing Group email")
        head_writer = self._ask("Enter the Head Writer name")
        year_formed = self._ask("Enter the year formed")
        self._service.create_writing_group(name, email, head_writer, year_formed)

    def _add_individual_author(self) -> None:
        self._console.print("\n******** ADDING INDIVIDUAL AUTHOR ********")
        name = self._ask("Enter the Individual Author name")
        email = self._ask("Enter the Individual Author email")
        self._service.create_individual_author(name, email)

    def _add_ad_hoc_team(self) -> None:
        self._console.print("\n******** ADDING AD HOC TEAMS ********")
        name = self._ask("Enter the Ad Hoc Team name")
        email = self._ask("Enter the Ad Hoc Team email")
        self._service.create_ad_hoc_team(name, email)

    def _add_team_members(self) -> None:
        team = self._pick(
            self._service.list_ad_hoc_teams(),
            lambda teams: authoring_entities_table(list(teams), title="Available Ad Hoc Teams"),
            "ad hoc team",
        )
        authors = self._service.list_individual_authors()
        chosen: list[str] = []
        while True:
            try:
                author = self._pick(
                    authors,
                    lambda items: authoring_entities_table(
                        list(items), title="Available Individual Authors"
                    ),
                    "individual author",
                )
            except Cancelled:
                break
            chosen.append(author.email)

        if not chosen:
            raise Cancelled
        self._service.add_members(team.email, chosen)

    def _add_publisher(self) -> None:
        self._console.print("\n******** ADDING PUBLISHER ********")
        name = self._ask("Enter the publisher's name")
        email = self._ask("Enter the publisher's email")
        phone = self._ask("Enter the publisher's phone number")
        self._service.create_publisher(name, email, phone)

    def _add_book(self) -> None:
        publishers = self._service.list_publishers()
        authors = self._service.list_authoring_entities()
        if not publishers or not authors:
            self._console.print(
                "[red]Error: missing required database information to add a book.[/red]"
            )
            self._console.print(
                "Please ensure at least one publisher and one author exist "
                "before attempting to add a book.\n"
            )
            raise Cancelled

        self._console.print("\n******** ADDING BOOK ********")
        publisher = self._pick(publishers, lambda items: publishers_table(list(items)), "publisher")
        author = self._pick(authors, lambda items: authoring_entities_table(list(items)), "author")

        def create() -> None:
            isbn = self._ask("Enter the book's ISBN")
            year = self._ask("Enter the book's publication year")
            title = self._ask("Enter the book's title")
            self._service.create_book(isbn, title, year, author.email, publisher.name)

        self._retry(create)

    # Info

    def _info(self) -> None:
        choice = self._choose("INFO MENU", INFO_MENU)
        if choice == 1:
            publisher = self._pick(
                self._service.list_publishers(),
                lambda items: publishers_table(list(items)),
                "publisher",
            )
            self._console.print(publisher_panel(publisher))
        elif choice == 2:
            book = self._pick(
                self._service.list_books(), lambda items: books_table(list(items)), "book"
            )
            self._console.print(book_panel(self._service.describe_book(book.isbn)))
        elif choice == 3:
            group = self._pick(
                self._service.list_writing_groups(),
                lambda items: authoring_entities_table(
                    list(items), title="Available Writing Groups"
                ),
                "writing group",
            )
            self._console.print(authoring_entity_panel(group))
        else:
            team = self._pick(
                self._service.list_ad_hoc_teams(),
                lambda items: authoring_entities_table(
                    list(items), title="Available Ad Hoc Teams"
                ),
                "ad hoc team",
            )
            self._console.print(authoring_entity_panel(team))
            self._console.print(members_table(team.email, self._service.members(team.email)))

    # Delete

    def _delete_book(self) -> None:
        book = self._pick(
            self._service.list_books(), lambda items: books_table(list(items)), "book"
        )
        deleted = self._service.delete_book(book.isbn)
        self._console.print(f"{deleted.title} has been deleted (ISBN: {deleted.isbn})")

    # Keys

    def _list_keys(self) -> None:
        choice = self._choose("ENTITY TYPES", KEYS_MENU)
        if choice == 1:
            self._console.print(publishers_table(self._service.list_publishers()))
        elif choice == 2:
            self._console.print(books_table(self._service.list_books()))
        else:
            self._console.print(
                authoring_entities_table(self._service.list_authoring_entities())
            )

