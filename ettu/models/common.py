"""Generic response envelopes and pagination helpers shared by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SORT = "created_at"
DEFAULT_ORDER = "desc"


@dataclass
class ApiResponse(Generic[T]):
    """Uniform envelope around an API payload or an error message."""

    success: bool
    data: T | None = None
    message: str | None = None
    error: str | None = None

    @classmethod
    def from_data(cls, data: T) -> ApiResponse[T]:
        """A successful response carrying ``data``."""
        return cls(success=True, data=data)

    @classmethod
    def from_data_with_message(cls, data: T, message: str) -> ApiResponse[T]:
        """A successful response carrying ``data`` and a message."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def from_error(cls, error: str) -> ApiResponse[T]:
        """A failed response carrying an error description."""
        return cls(success=False, error=error)


@dataclass
class PaginationParams:
    """Query parameters controlling paging and sorting of list endpoints."""

    page: int | None = None
    limit: int | None = None
    sort: str | None = None
    order: str | None = None

    @classmethod
    def default(cls) -> PaginationParams:
        """Parameters for the first page, newest first."""
        return cls(page=DEFAULT_PAGE, limit=DEFAULT_LIMIT, sort=None, order=DEFAULT_ORDER)

    def current_page(self) -> int:
        """The requested page number, 1 when not given."""
        return DEFAULT_PAGE if self.page is None else self.page

    def page_size(self) -> int:
        """Items per page, 20 when not given and never more than 100."""
        limit = DEFAULT_LIMIT if self.limit is None else self.limit
        return min(limit, MAX_LIMIT)

    def offset(self) -> int:
        """Number of items to skip before the requested page."""
        page = self.current_page()
        if page < 1:
            raise ValueError("page must be at least 1")
        return (page - 1) * self.page_size()

    def sort_field(self) -> str:
        """Column to sort by, ``created_at`` when not given."""
        return DEFAULT_SORT if self.sort is None else self.sort

    def sort_order(self) -> str:
        """Sort direction, ``desc`` when not given."""
        return DEFAULT_ORDER if self.order is None else self.order


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of items together with the paging totals."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_pages: int = 0

    @classmethod
    def create(cls, items: list[T], total: int, page: int, limit: int) -> PaginatedResponse[T]:
        """Build a page, deriving the number of pages from ``total`` and ``limit``."""
        if limit <= 0:
            raise ValueError("limit must be positive")
        total_pages = -(-total // limit)
        return cls(items=list(items), total=total, page=page, limit=limit, total_pages=total_pages)