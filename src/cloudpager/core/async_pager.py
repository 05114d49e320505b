"""Async pager for fetchers backed by an async transport."""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable

from .errors import PaginationLimitError
from .pager import CountPage
from .pages import Page, resolve_next_url

AsyncFetchNextPage = Callable[[str], Awaitable[Page]]
AsyncPageHandler = Callable[[Page], bool | Awaitable[bool]]


class AsyncPager:
    """Async counterpart of :class:`~cloudpager.core.pager.Pager`."""

    def __init__(
        self,
        initial_url: str,
        fetch_next_page: AsyncFetchNextPage,
        count_page: CountPage,
        *,
        max_pages: int | None = None,
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        self._initial_url = initial_url
        self._fetch_next_page = fetch_next_page
        self._count_page = count_page
        self._max_pages = max_pages

    @property
    def initial_url(self) -> str:
        return self._initial_url

    async def iter_pages(self) -> AsyncIterator[Page]:
        current_url = self._initial_url
        fetched = 0
        while True:
            if self._max_pages is not None and fetched >= self._max_pages:
                raise PaginationLimitError(
                    "Exceeded pagination guardrail (max_pages)",
                    url=current_url,
                )
            page = await self._fetch_next_page(current_url)
            fetched += 1

            if self._count_page(page) == 0:
                return

            yield page

            current_url = resolve_next_url(page)
            if not current_url:
                return

    async def each_page(self, handler: AsyncPageHandler) -> None:
        """Call ``handler`` (sync or async) with each page until it returns falsy."""

        pages = self.iter_pages()
        try:
            async for page in pages:
                proceed = handler(page)
                if inspect.isawaitable(proceed):
                    proceed = await proceed
                if not proceed:
                    return
        finally:
            await pages.aclose()

    async def all_pages(self) -> list[Page]:
        return [page async for page in self.iter_pages()]


__all__ = [
    "AsyncFetchNextPage",
    "AsyncPageHandler",
    "AsyncPager",
]
