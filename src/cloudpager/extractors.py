"""Reusable per-resource collaborators for count_page and last_mark."""

from __future__ import annotations

from collections.abc import Mapping

from .core.errors import DecodeError, ExtractionError
from .core.pager import CountPage
from .core.pages import LastMark, Page


def _body_of(page: Page) -> Mapping[str, object]:
    body = getattr(page, "body", None)
    if not isinstance(body, Mapping):
        raise DecodeError("page body must be a JSON object")
    return body


def _results(page: Page, key: str) -> list[object]:
    raw = _body_of(page).get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DecodeError(f"'{key}' must be a list")
    return raw


def results_counter(key: str) -> CountPage:
    """count_page that reports ``len(body[key])``; a missing key counts as 0."""

    def count_page(page: Page) -> int:
        return len(_results(page, key))

    return count_page


def last_field_marker(key: str, field: str = "id") -> LastMark:
    """last_mark returning ``body[key][-1][field]`` as a string."""

    def last_mark(page: Page) -> str:
        try:
            results = _results(page, key)
        except DecodeError as exc:
            raise ExtractionError(str(exc), url=getattr(page, "request_url", None)) from exc
        if not results:
            raise ExtractionError(f"cannot extract marker from empty '{key}'")
        last = results[-1]
        if not isinstance(last, Mapping):
            raise ExtractionError(f"last element of '{key}' must be an object")
        value = last.get(field)
        if value is None or isinstance(value, (dict, list)):
            raise ExtractionError(f"last element of '{key}' has no usable '{field}'")
        return str(value)

    return last_mark


__all__ = [
    "results_counter",
    "last_field_marker",
]
