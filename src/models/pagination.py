"""
Pagination models for list endpoints.
"""

from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

from core.constants import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_OFFSET, MAX_PAGE_LIMIT

T = TypeVar("T")


class PaginationParams(BaseModel):
    """Standard pagination parameters for list endpoints."""

    limit: int = Field(
        default=DEFAULT_PAGE_LIMIT,
        ge=1,
        le=MAX_PAGE_LIMIT,
        description=f"Maximum number of items to return (1-{MAX_PAGE_LIMIT})"
    )
    offset: int = Field(
        default=DEFAULT_PAGE_OFFSET,
        ge=0,
        description="Number of items to skip"
    )


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response wrapper."""

    items: List[T] = Field(description="List of items in current page")
    total: int = Field(description="Total number of items available")
    limit: int = Field(description="Maximum items per page")
    offset: int = Field(description="Number of items skipped")
    has_next: bool = Field(description="Whether more items are available")
    has_previous: bool = Field(description="Whether previous items are available")

    @classmethod
    def from_page(
        cls, items: List[T], total: int, params: PaginationParams
    ) -> "PaginatedResponse[T]":
        """Build a response for one page of a larger result."""
        return cls(
            items=items,
            total=total,
            limit=params.limit,
            offset=params.offset,
            has_next=params.offset + params.limit < total,
            has_previous=params.offset > 0,
        )

    @property
    def next_offset(self) -> Optional[int]:
        if self.has_next:
            return self.offset + self.limit
        return None

    @property
    def previous_offset(self) -> Optional[int]:
        if self.has_previous:
            return max(0, self.offset - self.limit)
        return None
