"""Common response wrapper schemas for API responses."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tcg_catalog.application.common.pagination import Page

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    """Generic success response wrapper."""

    title: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ErrorResponse(CamelModel):
    """Standardized error body returned by every error handler."""

    error: str
    message: str
    status: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    details: list[str] = Field(default_factory=list)


class PageResponse(CamelModel, Generic[T]):
    """Generic pagination wrapper."""

    content: list[T]
    page: int
    page_size: int
    total_elements: int
    total_pages: int
    last: bool

    @classmethod
    def from_page(cls, page: Page[Any], convert: Callable[[Any], T]) -> "PageResponse[T]":
        """Build the response from a domain page, converting each item."""
        return cls(
            content=[convert(item) for item in page.content],
            page=page.page,
            page_size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            last=page.last,
        )
