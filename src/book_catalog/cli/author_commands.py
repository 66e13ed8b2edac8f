"""Authoring entity CLI commands."""

import typer

from book_catalog.entities import AdHocTeam, AuthoringEntityKind, IndividualAuthor

from .render import authoring_entities_table, authoring_entity_panel, books_table, members_table
from .utils import catalog_errors, console, get_service

author_app = typer.Typer(help="✍️  Authoring entity commands", no_args_is_help=True)


@author_app.command("add-individual")
def add_individual_author(
    name: str = typer.Argument(..., help="Author name"),
    email: str = typer.Argument(..., help="Author email (unique)"),
) -> None:
    """Add a new individual author."""
    with catalog_errors():
        author = get_service().create_individual_author(name, email)
    console.print(f"[green]✅ Added individual author '{author.email}'[/green]")


@author_app.command("add-group")
def add_writing_group(
    name: str = typer.Argument(..., help="Writing group name"),
    email: str = typer.Argument(..., help="Writing group email (unique)"),
    head_writer: str = typer.Option(..., "--head-writer", "-w", help="Head writer name"),
    year_formed: str = typer.Option(..., "--year-formed", "-y", help="Year the group formed"),
) -> None:
    """Add a new writing group."""
    with catalog_errors():
        group = get_service().create_writing_group(name, email, head_writer, year_formed)
    console.print(f"[green]✅ Added writing group '{group.email}'[/green]")


@author_app.command("add-team")
def add_ad_hoc_team(
    name: str = typer.Argument(..., help="Team name"),
    email: str = typer.Argument(..., help="Team email (unique)"),
) -> None:
    """Add a new ad hoc team."""
    with catalog_errors():
        team = get_service().create_ad_hoc_team(name, email)
    console.print(f"[green]✅ Added ad hoc team '{team.email}'[/green]")


@author_app.command("add-member")
def add_team_members(
    team_email: str = typer.Argument(..., help="Ad hoc team email"),
    author_emails: list[str] = typer.Argument(..., help="Individual author emails"),
) -> None:
    """Add individual authors to an ad hoc team."""
    with catalog_errors():
        added = get_service().add_members(team_email, author_emails)
    skipped = len(set(author_emails)) - added
    console.print(f"[green]✅ Added {added} member(s) to '{team_email}'[/green]")
    if skipped:
        console.print(f"[yellow]{skipped} author(s) were already members[/yellow]")


@author_app.command("list")
def list_authoring_entities(
    kind: AuthoringEntityKind | None = typer.Option(
        None, "--kind", "-k", help="Only list one kind of authoring entity"
    ),
) -> None:
    """List authoring entities."""
    with catalog_errors():
        entities = get_service().list_authoring_entities(kind)

    if not entities:
        console.print("[yellow]No authoring entities found[/yellow]")
        return
    console.print(authoring_entities_table(entities))


@author_app.command("show")
def show_authoring_entity(
    email: str = typer.Argument(..., help="Authoring entity email"),
) -> None:
    """Show an authoring entity with its works and team relations."""
    service = get_service()
    with catalog_errors():
        entity = service.get_authoring_entity(email)
        works = service.works(email)
        if isinstance(entity, AdHocTeam):
            console.print(authoring_entity_panel(entity))
            console.print(members_table(email, service.members(email)))
        elif isinstance(entity, IndividualAuthor):
            console.print(authoring_entity_panel(entity))
            teams = service.memberships(email)
            if teams:
                console.print(authoring_entities_table(teams, title="Ad Hoc Teams"))
        else:
            console.print(authoring_entity_panel(entity))

    if works:
        console.print(books_table(works))
    else:
        console.print("[yellow]No books credited[/yellow]")
