"""
Application common module.

Contains base classes for the application layer:
- Command: Base class for write operations
- Query: Base class for read operations
- Pagination / Page: Page requests and transport-neutral page results
"""

from .command import Command
from .pagination import MAX_PAGE_SIZE, Page, Pagination
from .query import Query

__all__ = [
    "MAX_PAGE_SIZE",
    "Command",
    "Page",
    "Pagination",
    "Query",
]
