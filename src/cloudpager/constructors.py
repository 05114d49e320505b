"""Factories wiring a Pager to a page variant and a service client.

None of these perform network I/O; the first request is sent when the
returned pager is iterated.
"""

from __future__ import annotations

from typing import Protocol

import httpx

from .core.async_pager import AsyncFetchNextPage, AsyncPager
from .core.errors import PageUnavailableError
from .core.pager import CountPage, FetchNextPage, Pager
from .core.pages import LastMark, LinkedPage, MarkerPage, Page, SinglePage
from .core.snapshot import aremember_response, remember_response


class PageRequester(Protocol):
    def request(self, url: str) -> httpx.Response: ...


class AsyncPageRequester(Protocol):
    async def request(self, url: str) -> httpx.Response: ...


def new_pager(
    initial_url: str,
    fetch_next_page: FetchNextPage,
    count_page: CountPage,
    *,
    max_pages: int | None = None,
) -> Pager:
    """Construct a manually-configured pager."""

    return Pager(initial_url, fetch_next_page, count_page, max_pages=max_pages)


class _SinglePageFetcher:
    """Fetches ``only_url`` once; any later call is PageUnavailableError.

    Holds the consumed flag, so one instance must not be driven by two
    iterations at the same time.
    """

    def __init__(self, client: PageRequester, only_url: str) -> None:
        self._client = client
        self._only_url = only_url
        self.consumed = False

    def __call__(self, _url: str) -> Page:
        if self.consumed:
            raise PageUnavailableError(
                "The requested collection page does not exist.",
                url=self._only_url,
            )
        self.consumed = True
        return SinglePage(remember_response(self._client.request(self._only_url)))


class _AsyncSinglePageFetcher:
    def __init__(self, client: AsyncPageRequester, only_url: str) -> None:
        self._client = client
        self._only_url = only_url
        self.consumed = False

    async def __call__(self, _url: str) -> Page:
        if self.consumed:
            raise PageUnavailableError(
                "The requested collection page does not exist.",
                url=self._only_url,
            )
        self.consumed = True
        response = await self._client.request(self._only_url)
        return SinglePage(await aremember_response(response))


def new_single_pager(client: PageRequester, only_url: str, count_page: CountPage) -> Pager:
    """Pager that "iterates" over the single page at ``only_url``."""

    return Pager("", _SinglePageFetcher(client, only_url), count_page)


def new_linked_pager(client: PageRequester, initial_url: str, count_page: CountPage) -> Pager:
    """Pager that follows the ``links.next`` element of each JSON response."""

    def fetch_next_page(url: str) -> Page:
        return LinkedPage(remember_response(client.request(url)))

    return Pager(initial_url, fetch_next_page, count_page)


def new_marker_pager(
    client: PageRequester,
    initial_url: str,
    last_mark: LastMark,
    count_page: CountPage,
) -> Pager:
    """Pager that requests each page with ``marker`` set to the previous page's last entry."""

    def fetch_next_page(url: str) -> Page:
        return MarkerPage(remember_response(client.request(url)), last_mark)

    return Pager(initial_url, fetch_next_page, count_page)


def new_async_pager(
    initial_url: str,
    fetch_next_page: AsyncFetchNextPage,
    count_page: CountPage,
    *,
    max_pages: int | None = None,
) -> AsyncPager:
    return AsyncPager(initial_url, fetch_next_page, count_page, max_pages=max_pages)


def new_async_single_pager(
    client: AsyncPageRequester,
    only_url: str,
    count_page: CountPage,
) -> AsyncPager:
    return AsyncPager("", _AsyncSinglePageFetcher(client, only_url), count_page)


def new_async_linked_pager(
    client: AsyncPageRequester,
    initial_url: str,
    count_page: CountPage,
) -> AsyncPager:
    async def fetch_next_page(url: str) -> Page:
        response = await client.request(url)
        return LinkedPage(await aremember_response(response))

    return AsyncPager(initial_url, fetch_next_page, count_page)


def new_async_marker_pager(
    client: AsyncPageRequester,
    initial_url: str,
    last_mark: LastMark,
    count_page: CountPage,
) -> AsyncPager:
    async def fetch_next_page(url: str) -> Page:
        response = await client.request(url)
        return MarkerPage(await aremember_response(response), last_mark)

    return AsyncPager(initial_url, fetch_next_page, count_page)


__all__ = [
    "PageRequester",
    "AsyncPageRequester",
    "new_pager",
    "new_single_pager",
    "new_linked_pager",
    "new_marker_pager",
    "new_async_pager",
    "new_async_single_pager",
    "new_async_linked_pager",
    "new_async_marker_pager",
]
