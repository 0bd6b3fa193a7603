"""Page-number pagination with clamped page sizes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass
class Page(Generic[T]):
    """One page of results together with the total count."""

    page: int
    page_size: int
    total: int
    items: list[T] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape of the page."""
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "total": self.total,
            "items": list(self.items),
        }


def normalize_page(page: int, page_size: int) -> tuple[int, int]:
    """Clamp the page to at least 1 and the size to 1..100, defaulting to 10."""
    if page <= 0:
        page = 1
    if page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    elif page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    return page, page_size


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Return (offset, limit) for a page."""
    return (page - 1) * page_size, page_size


def paginate(
    items: Iterable[T],
    page: int,
    page_size: int,
    key: Optional[Callable[[T], Any]] = None,
) -> Page[T]:
    """Order items by key if given and return the requested page."""
    page, page_size = normalize_page(page, page_size)
    ordered = sorted(items, key=key) if key is not None else list(items)
    offset, limit = page_bounds(page, page_size)
    return Page(page, page_size, len(ordered), ordered[offset:offset + limit])