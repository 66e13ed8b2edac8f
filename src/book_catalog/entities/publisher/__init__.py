"""Entity package: Publisher."""

from .entity import Publisher
from .repository import PublisherRepository
from .table import PublisherTable

__all__ = ["Publisher", "PublisherRepository", "PublisherTable"]
