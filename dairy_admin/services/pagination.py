"""Page selection for tables that can be fed by two sources.

A table is either showing the page the server returned (``ServerPage``) or a
slice of a locally held, locally filtered list (``ClientFilteredPage``).
``paginate`` is the only place that turns a source into rows, so a single
render never mixes the two.
"""
import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar, Union

from dairy_admin.core.config import settings

T = TypeVar("T")

ELLIPSIS = "..."


@dataclass
class ServerPage(Generic[T]):
    items: List[T]
    page: int = 1
    total_pages: int = 1
    total: int = 0


@dataclass
class ClientFilteredPage(Generic[T]):
    all_items: List[T]
    page: int = 1
    page_size: int = field(default_factory=lambda: settings.PAGE_SIZE)


PageSource = Union[ServerPage, ClientFilteredPage]


@dataclass
class PageView(Generic[T]):
    rows: List[T]
    page: int
    total_pages: int
    total: int
    source: str


def paginate(source: PageSource) -> PageView:
    if isinstance(source, ServerPage):
        return PageView(
            rows=list(source.items),
            page=source.page,
            total_pages=max(1, source.total_pages),
            total=source.total,
            source="server",
        )
    if isinstance(source, ClientFilteredPage):
        start = (source.page - 1) * source.page_size
        return PageView(
            rows=list(source.all_items[start:start + source.page_size]),
            page=source.page,
            total_pages=max(1, math.ceil(len(source.all_items) / source.page_size)),
            total=len(source.all_items),
            source="client",
        )
    raise TypeError(f"Unknown page source: {type(source).__name__}")


def page_numbers(current_page: int, total_pages: int, show: int = 5) -> List[Union[int, str]]:
    """Windowed page links with first/last pages and ellipses, e.g. [1, '...', 3, 4, 5, 6, 7, '...', 10]."""
    half = show // 2

    start = max(1, current_page - half)
    end = min(total_pages, current_page + half)

    if current_page <= half:
        end = min(total_pages, show)
    if current_page > total_pages - half:
        start = max(1, total_pages - show + 1)

    pages: List[Union[int, str]] = []
    if start > 1:
        pages.append(1)
        if start > 2:
            pages.append(ELLIPSIS)

    pages.extend(range(start, end + 1))

    if end < total_pages:
        if end < total_pages - 1:
            pages.append(ELLIPSIS)
        pages.append(total_pages)

    return pages
