"""Pager: walks a resource collection one page at a time."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .errors import PaginationLimitError
from .pages import Page, resolve_next_url

FetchNextPage = Callable[[str], Page]
CountPage = Callable[[Page], int]
PageHandler = Callable[[Page], bool]


class Pager:
    """Knows how to advance through a specific resource collection.

    ``fetch_next_page`` requests the page at a URL, ``count_page`` reports how
    many elements a page holds. A zero count ends the traversal before the
    page reaches the caller. There is no iteration bound unless ``max_pages``
    is set. A relative next URL is resolved against the URL of the page that
    carried it.
    """

    def __init__(
        self,
        initial_url: str,
        fetch_next_page: FetchNextPage,
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

    @property
    def max_pages(self) -> int | None:
        return self._max_pages

    def iter_pages(self) -> Iterator[Page]:
        """Yield each non-empty page; the next URL is computed on resume."""

        current_url = self._initial_url
        fetched = 0
        while True:
            if self._max_pages is not None and fetched >= self._max_pages:
                raise PaginationLimitError(
                    "Exceeded pagination guardrail (max_pages)",
                    url=current_url,
                )
            page = self._fetch_next_page(current_url)
            fetched += 1

            if self._count_page(page) == 0:
                return

            yield page

            current_url = resolve_next_url(page)
            if not current_url:
                return

    def each_page(self, handler: PageHandler) -> None:
        """Call ``handler`` with each page; a falsy return stops iterating."""

        pages = self.iter_pages()
        try:
            for page in pages:
                if not handler(page):
                    return
        finally:
            pages.close()

    def all_pages(self) -> list[Page]:
        return list(self.iter_pages())


__all__ = [
    "FetchNextPage",
    "CountPage",
    "PageHandler",
    "Pager",
]
