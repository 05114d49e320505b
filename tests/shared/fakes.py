from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class FakePage:
    count: int
    next_url: str = ""
    name: str = ""
    next_error: Exception | None = None
    next_calls: int = 0

    def next_page_url(self) -> str:
        self.next_calls += 1
        if self.next_error is not None:
            raise self.next_error
        return self.next_url


Step = FakePage | Exception


class SequencedFetcher:
    """fetch_next_page fake serving pages by URL and recording every call."""

    def __init__(self, pages: Mapping[str, Step], *, initial_url: str = "page-1"):
        self.pages = dict(pages)
        self.initial_url = initial_url
        self.calls: list[str] = []

    def __call__(self, url: str) -> FakePage:
        self.calls.append(url)
        step = self.pages[url]
        if isinstance(step, Exception):
            raise step
        return step


class AsyncSequencedFetcher(SequencedFetcher):
    async def __call__(self, url: str) -> FakePage:  # type: ignore[override]
        return SequencedFetcher.__call__(self, url)


def count_fake(page: FakePage) -> int:
    return page.count


class RecordingHandler:
    def __init__(self, *, stop_after: int | None = None, error_on: str | None = None):
        self.stop_after = stop_after
        self.error_on = error_on
        self.seen: list[str] = []

    def __call__(self, page: FakePage) -> bool:
        if self.error_on is not None and page.name == self.error_on:
            raise RuntimeError(f"handler failed on {page.name}")
        self.seen.append(page.name)
        if self.stop_after is not None and len(self.seen) >= self.stop_after:
            return False
        return True
