"""Page variants: single, linked and marker pagination."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from .errors import DecodeError
from .snapshot import ResponseSnapshot

MARKER_PARAM = "marker"


@runtime_checkable
class Page(Protocol):
    """Result type of any resource collection.

    Lets callers walk a collection uniformly regardless of whether or how
    it is paginated.
    """

    def next_page_url(self) -> str:
        """URL of the page that follows this one, or "" if none exists."""


LastMark = Callable[[Page], str]


class _SnapshotPage:
    """Read-only accessors shared by the snapshot-backed variants."""

    __slots__ = ()

    snapshot: ResponseSnapshot

    @property
    def body(self) -> object:
        return self.snapshot.body

    @property
    def request_url(self) -> str:
        return self.snapshot.request_url

    @property
    def headers(self) -> Mapping[str, tuple[str, ...]]:
        return self.snapshot.headers


@dataclass(slots=True, frozen=True)
class SinglePage(_SnapshotPage):
    """A page that contains all of the results of an operation."""

    snapshot: ResponseSnapshot

    def next_page_url(self) -> str:
        return ""


@dataclass(slots=True, frozen=True)
class LinkedPage(_SnapshotPage):
    """A page that carries a navigational ``links.next`` URL in its body."""

    snapshot: ResponseSnapshot

    def next_page_url(self) -> str:
        next_url = parse_links_next(self.snapshot.body)
        if next_url is None:
            return ""
        return next_url


@dataclass(slots=True, frozen=True)
class MarkerPage(_SnapshotPage):
    """A page in a collection paginated by ``limit`` and ``marker`` parameters."""

    snapshot: ResponseSnapshot
    last_mark: LastMark

    def next_page_url(self) -> str:
        mark = self.last_mark(self)
        return with_marker(self.snapshot.request_url, mark)


def parse_links_next(body: object) -> str | None:
    """Decode ``{"links": {"next": str | null}}`` and return the next link.

    Only an absent or null ``next`` means exhaustion; any other deviation from
    the envelope shape is a DecodeError.
    """

    if not isinstance(body, Mapping):
        raise DecodeError("link pagination requires a JSON object body")
    if "links" not in body:
        raise DecodeError("link pagination envelope is missing 'links'")
    links = body["links"]
    if not isinstance(links, Mapping):
        raise DecodeError("'links' must be an object")
    raw = links.get("next")
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DecodeError("'links.next' must be a string or null")
    return raw


def resolve_next_url(page: Page) -> str:
    """Next URL of ``page``, joined onto the URL the page was fetched from.

    Relative references such as ``?page=2`` or ``/v2/items?page=2`` resolve
    against the page's own request URL; pages without one pass through.
    """

    next_url = page.next_page_url()
    if not next_url:
        return ""
    base = getattr(page, "request_url", "")
    if not base:
        return next_url
    return str(httpx.URL(base).join(next_url))


def with_marker(url: str, mark: str) -> str:
    """Return ``url`` with its marker query parameter set to ``mark``.

    Other parameters are kept; the query is re-encoded with keys sorted.
    """

    parsed = httpx.URL(url)
    params = parsed.params.set(MARKER_PARAM, mark)
    ordered = sorted(params.multi_items(), key=lambda item: item[0])
    return str(parsed.copy_with(params=ordered))


__all__ = [
    "MARKER_PARAM",
    "Page",
    "LastMark",
    "SinglePage",
    "LinkedPage",
    "MarkerPage",
    "parse_links_next",
    "resolve_next_url",
    "with_marker",
]
