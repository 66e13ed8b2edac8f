"""Unit tests for the catalog domain entities."""

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from book_catalog.core.errors import IntegrityError, ValidationError
from book_catalog.entities import (
    AdHocTeam,
    AuthoringEntity,
    AuthoringEntityKind,
    AuthoringEntityTable,
    Book,
    IndividualAuthor,
    Publisher,
    TeamMembership,
    WritingGroup,
    classify,
)
from book_catalog.entities.authoring_entity import to_entity, to_row


class TestPublisherEntity:
    """Test the Publisher domain entity."""

    def test_create_valid_publisher(self):
        publisher = Publisher.build(name="Acme", email="acme@x.com", phone="555-0100")

        assert publisher.name == "Acme"
        assert publisher.email == "acme@x.com"
        assert publisher.phone == "555-0100"

    def test_publisher_is_immutable(self):
        publisher = Publisher.build(name="Acme", email="acme@x.com", phone="555-0100")

        with pytest.raises(PydanticValidationError):
            publisher.name = "Other"

    def test_name_at_length_limit_is_accepted(self):
        publisher = Publisher.build(name="N" * 80, email="acme@x.com", phone="555-0100")
        assert len(publisher.name) == 80

    def test_name_over_length_limit_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Publisher.build(name="N" * 81, email="acme@x.com", phone="555-0100")

        assert exc_info.value.field == "name"

    def test_phone_over_length_limit_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Publisher.build(name="Acme", email="acme@x.com", phone="5" * 25)

        assert exc_info.value.field == "phone"

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_email_is_rejected(self, blank):
        with pytest.raises(ValidationError) as exc_info:
            Publisher.build(name="Acme", email=blank, phone="555-0100")

        assert exc_info.value.field == "email"
        assert exc_info.value.message == "cannot be empty"


class TestAuthoringEntities:
    """Test the authoring entity variants and their discriminator."""

    def test_individual_author_kind(self):
        author = IndividualAuthor.build(name="Jane Doe", email="jane@x.com")

        assert author.kind is AuthoringEntityKind.INDIVIDUAL_AUTHOR
        assert author.kind.label == "Individual Author"

    def test_writing_group_parses_year_from_text(self):
        group = WritingGroup.build(
            name="The Inklings",
            email="inklings@x.com",
            head_writer="C. S. Lewis",
            year_formed="1933",
        )

        assert group.year_formed == 1933

    def test_writing_group_rejects_non_numeric_year(self):
        with pytest.raises(ValidationError) as exc_info:
            WritingGroup.build(
                name="The Inklings",
                email="inklings@x.com",
                head_writer="C. S. Lewis",
                year_formed="nineteen",
            )

        assert exc_info.value.field == "year_formed"

    def test_author_email_over_thirty_characters_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            AdHocTeam.build(name="Team", email="t" * 31)

        assert exc_info.value.field == "email"

    def test_union_dispatches_on_kind(self):
        adapter = TypeAdapter(AuthoringEntity)

        entity = adapter.validate_python(
            {"kind": "AdHocTeam", "name": "Team One", "email": "team1@x.com"}
        )

        assert isinstance(entity, AdHocTeam)

    def test_union_rejects_unknown_kind(self):
        adapter = TypeAdapter(AuthoringEntity)

        with pytest.raises(PydanticValidationError):
            adapter.validate_python({"kind": "Robot", "name": "R", "email": "r@x.com"})


class TestAuthoringEntityConversion:
    """Test conversion between authoring entity variants and their table rows."""

    def test_writing_group_row_round_trip(self):
        group = WritingGroup.build(
            name="The Inklings",
            email="inklings@x.com",
            head_writer="C. S. Lewis",
            year_formed=1933,
        )

        row = to_row(group)

        assert row.authoring_entity_type == "WritingGroup"
        assert row.head_writer == "C. S. Lewis"
        assert to_entity(row) == group

    def test_individual_author_row_has_no_group_columns(self):
        row = to_row(IndividualAuthor.build(name="Jane Doe", email="jane@x.com"))

        assert row.authoring_entity_type == "IndividualAuthor"
        assert row.head_writer is None
        assert row.year_formed is None

    def test_classify_unknown_tag_raises_integrity_error(self):
        row = AuthoringEntityTable(
            email="r@x.com", name="Robot", authoring_entity_type="Robot"
        )

        with pytest.raises(IntegrityError, match="unknown type tag"):
            classify(row)

    def test_writing_group_row_missing_year_raises_integrity_error(self):
        row = AuthoringEntityTable(
            email="g@x.com", name="Group", authoring_entity_type="WritingGroup"
        )

        with pytest.raises(IntegrityError):
            to_entity(row)


class TestBookEntity:
    """Test the Book domain entity."""

    def test_create_valid_book(self):
        book = Book.build(
            isbn="000-0000000001",
            title="Title X",
            year_published="2020",
            author_email="jane@x.com",
            publisher_name="Acme",
        )

        assert book.year_published == 2020

    def test_isbn_of_eighteen_characters_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Book.build(
                isbn="1" * 18,
                title="Title X",
                year_published=2020,
                author_email="jane@x.com",
                publisher_name="Acme",
            )

        assert exc_info.value.field == "isbn"

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Book.build(
                isbn="000-0000000001",
                title=" ",
                year_published=2020,
                author_email="jane@x.com",
                publisher_name="Acme",
            )

        assert str(exc_info.value) == "title: cannot be empty"


class TestTeamMembershipEntity:
    def test_membership_equality_is_by_endpoints(self):
        first = TeamMembership.build(team_email="team1@x.com", author_email="jane@x.com")
        second = TeamMembership.build(team_email="team1@x.com", author_email="jane@x.com")

        assert first == second
