"""Book Catalog.

Console catalog manager for books, publishers and authoring entities
(individual authors, writing groups and ad-hoc teams) over a relational store.
"""

__version__ = "0.1.0"
