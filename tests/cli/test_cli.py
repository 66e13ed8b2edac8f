"""Tests for the book-catalog command line interface."""

import logging
from collections.abc import Callable, Generator

import pytest
from loguru import logger
from typer.testing import CliRunner, Result

from book_catalog.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None]:
    yield
    logger.remove()
    logging.basicConfig(handlers=[], force=True)


@pytest.fixture
def invoke(tmp_path) -> Callable[..., Result]:
    """Run the CLI against a database file private to the test."""
    database_url = f"sqlite:///{tmp_path / 'catalog.db'}"

    def _invoke(*args: str, input: str | None = None) -> Result:
        options = ["--database-url", database_url, "--log-level", "ERROR"]
        return runner.invoke(app, [*options, *args], input=input)

    return _invoke


@pytest.fixture
def seeded(invoke) -> Callable[..., Result]:
    for args in [
        ["publisher", "add", "Acme", "--email", "acme@x.com", "--phone", "555-0100"],
        ["author", "add-individual", "Jane Doe", "jane@x.com"],
        ["author", "add-team", "Team One", "team1@x.com"],
        [
            "author", "add-group", "The Inklings", "inklings@x.com",
            "--head-writer", "C. S. Lewis", "--year-formed", "1933",
        ],
        [
            "book", "add", "000-0000000001", "--title", "Title X", "--year", "2020",
            "--author", "jane@x.com", "--publisher", "Acme",
        ],
    ]:
        result = invoke(*args)
        assert result.exit_code == 0, result.output
    return invoke


class TestCommands:
    """Test the one-shot commands."""

    def test_init_db(self, invoke):
        result = invoke("init-db")

        assert result.exit_code == 0
        assert "Database ready" in result.output

    def test_keys_on_empty_catalog(self, invoke):
        result = invoke("keys", "books")

        assert result.exit_code == 0
        assert "No books found" in result.output

    def test_keys_lists_primary_keys(self, seeded):
        publishers = seeded("keys", "publishers")
        authors = seeded("keys", "authors")

        assert publishers.output.split() == ["Acme"]
        assert "jane@x.com" in authors.output
        assert "team1@x.com" in authors.output

    def test_duplicate_publisher_exits_with_error(self, seeded):
        result = seeded(
            "publisher", "add", "Acme", "--email", "new@x.com", "--phone", "555-0199"
        )

        assert result.exit_code == 1
        assert "a publisher already exists with the given information." in result.output

    def test_invalid_isbn_exits_with_error(self, seeded):
        result = seeded(
            "book", "add", "1" * 18, "--title", "Too Long", "--year", "2020",
            "--author", "jane@x.com", "--publisher", "Acme",
        )

        assert result.exit_code == 1
        assert "Invalid isbn" in result.output

    def test_show_book(self, seeded):
        result = seeded("book", "show", "000-0000000001")

        assert result.exit_code == 0
        assert "Title X" in result.output
        assert "Jane Doe" in result.output

    def test_show_missing_publisher(self, seeded):
        result = seeded("publisher", "show", "Nobody")

        assert result.exit_code == 1
        assert "no publisher found for 'Nobody'" in result.output

    def test_add_member_and_show_team(self, seeded):
        added = seeded("author", "add-member", "team1@x.com", "jane@x.com")
        again = seeded("author", "add-member", "team1@x.com", "jane@x.com")
        shown = seeded("author", "show", "team1@x.com")

        assert added.exit_code == 0
        assert "Added 1 member(s)" in added.output
        assert "1 author(s) were already members" in again.output
        assert "jane@x.com" in shown.output

    def test_add_member_rejects_wrong_variant(self, seeded):
        result = seeded("author", "add-member", "inklings@x.com", "jane@x.com")

        assert result.exit_code == 1
        assert "Invalid team_email" in result.output

    def test_list_authors_by_kind(self, seeded):
        result = seeded("author", "list", "--kind", "WritingGroup")

        assert result.exit_code == 0
        assert "inklings@x.com" in result.output
        assert "jane@x.com" not in result.output

    def test_delete_book_with_confirmation(self, seeded):
        result = seeded("book", "delete", "000-0000000001", input="y\n")

        assert result.exit_code == 0
        assert "Title X has been deleted (ISBN: 000-0000000001)" in result.output
        assert "No books found" in seeded("book", "list").output
        assert seeded("keys", "publishers").output.split() == ["Acme"]

    def test_delete_book_declined(self, seeded):
        result = seeded("book", "delete", "000-0000000001", input="n\n")

        assert "Deletion cancelled" in result.output
        assert "000-0000000001" in seeded("keys", "books").output

    def test_delete_missing_book(self, invoke):
        result = invoke("book", "delete", "000-0000000009", "--force")

        assert result.exit_code == 1


class TestShell:
    """Test the interactive menu shell."""

    def test_quit(self, invoke):
        result = invoke("shell", input="q\n")

        assert result.exit_code == 0
        assert "MAIN MENU" in result.output
        assert "Exiting application." in result.output

    def test_add_publisher(self, invoke):
        result = invoke("shell", input="1\n2\nAcme\nacme@x.com\n555-0100\nq\n")

        assert "Successful transaction." in result.output
        assert invoke("keys", "publishers").output.split() == ["Acme"]

    def test_invalid_field_reprompts(self, invoke):
        too_long_phone = "5" * 25
        result = invoke(
            "shell",
            input=f"1\n2\nAcme\nacme@x.com\n{too_long_phone}\nAcme\nacme@x.com\n555-0100\nq\n",
        )

        assert "Please try again." in result.output
        assert "Successful transaction." in result.output

    def test_cancel_discards_action(self, invoke):
        result = invoke("shell", input="1\n2\nAcme\nq\nq\n")

        assert "Transaction cancelled." in result.output
        assert "No publishers found" in invoke("keys", "publishers").output

    def test_invalid_menu_choice(self, invoke):
        result = invoke("shell", input="7\nq\n")

        assert "Please enter a number 1-4" in result.output

    def test_add_book_without_publishers(self, invoke):
        result = invoke("shell", input="1\n3\nq\n")

        assert "missing required database information to add a book." in result.output
        assert "Transaction cancelled." in result.output

    def test_add_book(self, seeded):
        # Publisher 1 (Acme), author 2 (jane@x.com, sorted by email)
        result = seeded("shell", input="1\n3\n1\n2\n000-0000000002\n2021\nTitle Y\nq\n")

        assert "Successful transaction." in result.output
        assert "000-0000000002" in seeded("keys", "books").output

    def test_duplicate_constraint_message(self, seeded):
        result = seeded("shell", input="1\n1\n2\nJane Again\njane@x.com\nq\n")

        assert "an authoring entity already exists with the given information." in result.output

    def test_book_info(self, seeded):
        result = seeded("shell", input="2\n2\n1\nq\n")

        assert "Book Info" in result.output
        assert "Title X" in result.output

    def test_delete_book(self, seeded):
        result = seeded("shell", input="3\n1\nq\n")

        assert "Title X has been deleted (ISBN: 000-0000000001)" in result.output

    def test_add_team_members(self, seeded):
        # Team 1 (team1@x.com), then author 1 (jane@x.com) until Q
        result = seeded("shell", input="1\n1\n3\n2\n1\n1\nq\nq\n")

        assert "Successful transaction." in result.output
        assert "jane@x.com" in seeded("author", "show", "team1@x.com").output

    def test_add_team_members_without_teams(self, invoke):
        result = invoke("shell", input="1\n1\n3\n2\nq\n")

        assert "Please ensure at least one ad hoc team exists" in result.output
        assert "Transaction cancelled." in result.output

    def test_add_team_members_with_no_author_chosen(self, seeded):
        result = seeded("shell", input="1\n1\n3\n2\n1\nq\nq\n")

        assert "Transaction cancelled." in result.output
        assert "jane@x.com" not in seeded("author", "show", "team1@x.com").output

    def test_ad_hoc_team_info(self, seeded):
        seeded("author", "add-member", "team1@x.com", "jane@x.com")

        result = seeded("shell", input="2\n4\n1\nq\n")

        assert "Ad Hoc Team Info" in result.output
        assert "Members of team1@x.com" in result.output
        assert "jane@x.com" in result.output


class TestGlobalOptions:
    """Test options handled by the application callback."""

    def test_unknown_log_level_is_a_usage_error(self, tmp_path):
        database_url = f"sqlite:///{tmp_path / 'catalog.db'}"

        result = runner.invoke(
            app, ["--database-url", database_url, "--log-level", "loud", "keys", "books"]
        )

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_log_level_is_case_insensitive(self, tmp_path):
        database_url = f"sqlite:///{tmp_path / 'catalog.db'}"

        result = runner.invoke(
            app, ["--database-url", database_url, "--log-level", "error", "keys", "books"]
        )

        assert result.exit_code == 0
        assert "No books found" in result.output

    def test_invalid_level_in_config_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  logging:\n    level: LOUD\n")
        database_url = f"sqlite:///{tmp_path / 'catalog.db'}"

        result = runner.invoke(
            app, ["--config", str(config_file), "--database-url", database_url, "keys", "books"]
        )

        assert result.exit_code == 1
        assert "Invalid logging configuration" in result.output
