"""Catalog operations, each run as one transaction against the store."""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from loguru import logger

from book_catalog.core.errors import (
    ConstraintViolation,
    EntityCategory,
    IntegrityError,
    NotFoundError,
    ValidationError,
)
from book_catalog.core.services.database.store import CatalogStore
from book_catalog.entities import (
    AdHocTeam,
    AuthoringEntity,
    AuthoringEntityBase,
    AuthoringEntityKind,
    AuthoringEntityRepository,
    Book,
    BookDetails,
    BookRepository,
    IndividualAuthor,
    Publisher,
    PublisherRepository,
    TeamMembership,
    TeamMembershipRepository,
    WritingGroup,
)

VariantT = TypeVar("VariantT", bound=AuthoringEntityBase)


class CatalogService:
    """Create, read and delete catalog records.

    Every public method is one unit of work: it either commits everything it
    wrote or leaves the store exactly as it found it. Field validation
    happens before the store is touched.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self._publishers = PublisherRepository(store)
        self._authoring_entities = AuthoringEntityRepository(store)
        self._books = BookRepository(store)
        self._memberships = TeamMembershipRepository(store)

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        try:
            with self._store.transaction():
                yield
        except ConstraintViolation as exc:
            logger.warning("{} rolled back: {}", name, exc.message)
            raise
        except IntegrityError as exc:
            logger.error("{} aborted, stored data is inconsistent: {}", name, exc)
            raise

    # Publishers

    def create_publisher(self, name: str, email: str, phone: str) -> Publisher:
        publisher = Publisher.build(name=name, email=email, phone=phone)
        with self._operation("create publisher"):
            self._publishers.add(publisher)
        logger.info("Created publisher {}", publisher.name)
        return publisher

    def get_publisher(self, name: str) -> Publisher:
        with self._operation("get publisher"):
            return self._require_publisher(name)

    def list_publishers(self) -> list[Publisher]:
        with self._operation("list publishers"):
            return self._publishers.list_all()

    # Authoring entities

    def create_individual_author(self, name: str, email: str) -> IndividualAuthor:
        return self._create_authoring_entity(IndividualAuthor.build(name=name, email=email))

    def create_writing_group(
        self, name: str, email: str, head_writer: str, year_formed: int | str
    ) -> WritingGroup:
        return self._create_authoring_entity(
            WritingGroup.build(
                name=name, email=email, head_writer=head_writer, year_formed=year_formed
            )
        )

    def create_ad_hoc_team(self, name: str, email: str) -> AdHocTeam:
        return self._create_authoring_entity(AdHocTeam.build(name=name, email=email))

    def _create_authoring_entity(self, entity: VariantT) -> VariantT:
        with self._operation(f"create {entity.kind.label.lower()}"):
            self._authoring_entities.add(entity)
        logger.info("Created {} {}", entity.kind.value, entity.email)
        return entity

    def get_authoring_entity(self, email: str) -> AuthoringEntity:
        with self._operation("get authoring entity"):
            return self._require_authoring_entity(email)

    def list_authoring_entities(
        self, kind: AuthoringEntityKind | None = None
    ) -> list[AuthoringEntity]:
        with self._operation("list authoring entities"):
            return self._authoring_entities.list_all(kind)

    def list_writing_groups(self) -> list[WritingGroup]:
        return self.list_authoring_entities(AuthoringEntityKind.WRITING_GROUP)

    def list_individual_authors(self) -> list[IndividualAuthor]:
        return self.list_authoring_entities(AuthoringEntityKind.INDIVIDUAL_AUTHOR)

    def list_ad_hoc_teams(self) -> list[AdHocTeam]:
        return self.list_authoring_entities(AuthoringEntityKind.AD_HOC_TEAM)

    # Ad-hoc team membership

    def add_member(self, team_email: str, author_email: str) -> bool:
        """Add an individual author to an ad-hoc team.

        Returns ``False`` when the author was already a member; the edge set
        is left unchanged in that case.
        """
        with self._operation("add team member"):
            return self._add_member(team_email, author_email)

    def add_members(self, team_email: str, author_emails: Iterable[str]) -> int:
        """Add several authors to a team in one transaction.

        Returns the number of new memberships.
        """
        with self._operation("add team members"):
            return sum(
                self._add_member(team_email, author_email)
                for author_email in author_emails
            )

    def _add_member(self, team_email: str, author_email: str) -> bool:
        edge = TeamMembership.build(team_email=team_email, author_email=author_email)
        team = self._require_authoring_entity(edge.team_email)
        if not isinstance(team, AdHocTeam):
            raise ValidationError(
                "team_email", f"'{team_email}' is a {team.kind.label}, not an ad hoc team"
            )
        author = self._require_authoring_entity(edge.author_email)
        if not isinstance(author, IndividualAuthor):
            raise ValidationError(
                "author_email",
                f"'{author_email}' is a {author.kind.label}, not an individual author",
            )

        added = self._memberships.add_edge(edge)
        if added:
            logger.info("Added {} to ad hoc team {}", author_email, team_email)
        else:
            logger.debug("{} is already a member of {}", author_email, team_email)
        return added

    def members(self, team_email: str) -> list[IndividualAuthor]:
        with self._operation("list team members"):
            team = self._require_authoring_entity(team_email)
            if not isinstance(team, AdHocTeam):
                raise ValidationError(
                    "team_email", f"'{team_email}' is not an ad hoc team"
                )
            return self._memberships.members(team_email)

    def memberships(self, author_email: str) -> list[AdHocTeam]:
        with self._operation("list team memberships"):
            author = self._require_authoring_entity(author_email)
            if not isinstance(author, IndividualAuthor):
                raise ValidationError(
                    "author_email", f"'{author_email}' is not an individual author"
                )
            return self._memberships.memberships(author_email)

    # Books

    def create_book(
        self,
        isbn: str,
        title: str,
        year_published: int | str,
        author_email: str,
        publisher_name: str,
    ) -> Book:
        book = Book.build(
            isbn=isbn,
            title=title,
            year_published=year_published,
            author_email=author_email,
            publisher_name=publisher_name,
        )
        with self._operation("create book"):
            self._require_authoring_entity(book.author_email)
            self._require_publisher(book.publisher_name)
            self._books.add(book)
        logger.info("Created book {} ({})", book.isbn, book.title)
        return book

    def get_book(self, isbn: str) -> Book:
        with self._operation("get book"):
            return self._require_book(isbn)

    def describe_book(self, isbn: str) -> BookDetails:
        """Return a book with its author and publisher resolved.

        Raises:
            IntegrityError: if the book points at a record that is gone.
        """
        with self._operation("describe book"):
            book = self._require_book(isbn)
            author = self._authoring_entities.get(book.author_email)
            if author is None:
                raise IntegrityError(
                    f"book {isbn} references missing author '{book.author_email}'"
                )
            publisher = self._publishers.get(book.publisher_name)
            if publisher is None:
                raise IntegrityError(
                    f"book {isbn} references missing publisher '{book.publisher_name}'"
                )
            return BookDetails(book=book, author=author, publisher=publisher)

    def list_books(self) -> list[Book]:
        with self._operation("list books"):
            return self._books.list_all()

    def works(self, author_email: str) -> list[Book]:
        """Books credited to an authoring entity."""
        with self._operation("list works"):
            self._require_authoring_entity(author_email)
            return self._books.by_author(author_email)

    def delete_book(self, isbn: str) -> Book:
        with self._operation("delete book"):
            book = self._books.delete(isbn)
            if book is None:
                raise NotFoundError(EntityCategory.BOOK, isbn)
        logger.info("Deleted book {} ({})", book.isbn, book.title)
        return book

    # Keys

    def primary_keys(self, category: EntityCategory) -> list[str]:
        """List the identifying keys of every record of one category."""
        if category is EntityCategory.PUBLISHER:
            return [publisher.name for publisher in self.list_publishers()]
        if category is EntityCategory.BOOK:
            return [book.isbn for book in self.list_books()]
        if category is EntityCategory.AUTHORING_ENTITY:
            return [entity.email for entity in self.list_authoring_entities()]
        raise ValueError(f"No key listing for {category.value} records")

    def _require_publisher(self, name: str) -> Publisher:
        publisher = self._publishers.get(name)
        if publisher is None:
            raise NotFoundError(EntityCategory.PUBLISHER, name)
        return publisher

    def _require_authoring_entity(self, email: str) -> AuthoringEntity:
        entity = self._authoring_entities.get(email)
        if entity is None:
            raise NotFoundError(EntityCategory.AUTHORING_ENTITY, email)
        return entity

    def _require_book(self, isbn: str) -> Book:
        book = self._books.get(isbn)
        if book is None:
            raise NotFoundError(EntityCategory.BOOK, isbn)
        return book
