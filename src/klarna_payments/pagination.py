"""
Pagination utilities for the Klarna Payments SDK.

The provider paginates list endpoints with an opaque continuation token.
These helpers wrap a single-page fetch function and keep following the token
until the provider stops returning one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    TypeVar,
)

# Type variable for paginated items
T = TypeVar("T")


@dataclass
class PageInfo:
    """Information about a page of results.

    Attributes:
        next_cursor: Continuation token for the next page, if any
        page_number: Position of this page in the iteration (1-indexed)
    """

    next_cursor: Optional[str] = None
    page_number: int = 1

    @property
    def has_next(self) -> bool:
        return bool(self.next_cursor)


@dataclass
class Page(Generic[T]):
    """A single page of results.

    Attributes:
        items: List of items on this page
        page_info: Pagination metadata
    """

    items: List[T]
    page_info: PageInfo

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def has_next(self) -> bool:
        """Check if there are more pages."""
        return self.page_info.has_next

    @property
    def is_empty(self) -> bool:
        """Check if the page is empty."""
        return len(self.items) == 0


class AsyncPaginator(Generic[T]):
    """Async paginator for iterating through paginated results.

    Example:
        ```python
        paginator = client.disputes.list_all()

        async for dispute in paginator:
            print(dispute.dispute_id)

        # Or fetch all at once
        all_disputes = await paginator.all()

        # Or fetch pages one at a time
        async for page in paginator.pages():
            print(f"Page {page.page_info.page_number}: {len(page)} items")
        ```
    """

    def __init__(
        self,
        fetch_page: Callable[..., Awaitable[Page[T]]],
        initial_params: Optional[Dict[str, Any]] = None,
        cursor_param: str = "cursor",
        max_items: Optional[int] = None,
        max_pages: Optional[int] = None,
    ):
        """Initialize the paginator.

        Args:
            fetch_page: Async function that fetches a page of results
            initial_params: Keyword arguments for the first request
            cursor_param: Keyword under which the continuation token is passed
            max_items: Maximum number of items to fetch (None for unlimited)
            max_pages: Maximum number of pages to fetch (None for unlimited)
        """
        self._fetch_page = fetch_page
        self._initial_params = initial_params or {}
        self._cursor_param = cursor_param
        self._max_items = max_items
        self._max_pages = max_pages

    async def __aiter__(self) -> AsyncIterator[T]:
        """Async iterator over all items across all pages."""
        items_fetched = 0
        async for page in self.pages():
            for item in page.items:
                if self._max_items is not None and items_fetched >= self._max_items:
                    return
                yield item
                items_fetched += 1

    async def pages(self) -> AsyncIterator[Page[T]]:
        """Async iterator over pages."""
        params = self._initial_params.copy()
        pages_fetched = 0

        while True:
            if self._max_pages is not None and pages_fetched >= self._max_pages:
                break

            page = await self._fetch_page(**params)
            pages_fetched += 1
            page.page_info.page_number = pages_fetched

            yield page

            if not page.has_next or page.is_empty:
                break
            params[self._cursor_param] = page.page_info.next_cursor

    async def first_page(self) -> Page[T]:
        """Fetch only the first page."""
        async for page in self.pages():
            return page
        return Page(items=[], page_info=PageInfo())

    async def all(self) -> List[T]:
        """Fetch all items across all pages.

        Warning:
            This walks every page. Prefer the async iterator or ``max_items``
            for large result sets.
        """
        return [item async for item in self]

    async def take(self, n: int) -> List[T]:
        """Fetch up to n items."""
        items: List[T] = []
        if n <= 0:
            return items
        async for item in self:
            items.append(item)
            if len(items) >= n:
                break
        return items
