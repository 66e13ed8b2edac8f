"""Entity package: Book."""

from .entity import Book, BookDetails
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookDetails", "BookRepository", "BookTable"]
