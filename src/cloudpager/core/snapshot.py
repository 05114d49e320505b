"""Immutable capture of one HTTP response.

A response body can be read from the transport only once, while pagination
logic needs to look at it several times (count, handler, next URL). The
snapshot reads and closes the body up front and centralizes JSON decoding.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx

from .errors import DecodeError, TransportError

JSON_CONTENT_TYPE = "application/json"


@dataclass(slots=True, frozen=True)
class ResponseSnapshot:
    """Request URL, headers and body of one response.

    Fields and the header mapping are read-only. ``body`` holds the decoded
    JSON value as-is, so immutability is shallow: page variants and
    extractors only read it, and callers must not mutate it.
    """

    request_url: str
    headers: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    body: object = None
    status_code: int = 200

    def __post_init__(self) -> None:
        normalized: dict[str, tuple[str, ...]] = {}
        for name, values in self.headers.items():
            if isinstance(values, str):
                values = (values,)
            key = name.lower()
            normalized[key] = normalized.get(key, ()) + tuple(values)
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    def header(self, name: str) -> str | None:
        values = self.headers.get(name.lower())
        if not values:
            return None
        return values[0]

    def header_values(self, name: str) -> tuple[str, ...]:
        return self.headers.get(name.lower(), ())

    @property
    def is_json(self) -> bool:
        return not isinstance(self.body, bytes)


def remember_response(response: httpx.Response) -> ResponseSnapshot:
    """Read and close ``response``, returning its snapshot."""

    try:
        raw = response.read()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        raise TransportError(
            "failed to read response body",
            url=_request_url(response),
            http_status=response.status_code,
            cause="network",
        ) from exc
    finally:
        response.close()
    return _build_snapshot(response, raw)


async def aremember_response(response: httpx.Response) -> ResponseSnapshot:
    """Async counterpart of :func:`remember_response`."""

    try:
        raw = await response.aread()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        raise TransportError(
            "failed to read response body",
            url=_request_url(response),
            http_status=response.status_code,
            cause="network",
        ) from exc
    finally:
        await response.aclose()
    return _build_snapshot(response, raw)


def _build_snapshot(response: httpx.Response, raw: bytes) -> ResponseSnapshot:
    request_url = _request_url(response)
    body: object = raw
    if response.headers.get("Content-Type") == JSON_CONTENT_TYPE:
        try:
            body = json.loads(raw)
        except ValueError as exc:
            raise DecodeError(
                "response body is not valid JSON",
                url=request_url,
                http_status=response.status_code,
            ) from exc

    headers: dict[str, tuple[str, ...]] = {}
    for name in response.headers.keys():
        headers[name] = tuple(response.headers.get_list(name))

    return ResponseSnapshot(
        request_url=request_url,
        headers=headers,
        body=body,
        status_code=response.status_code,
    )


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        return ""


__all__ = [
    "JSON_CONTENT_TYPE",
    "ResponseSnapshot",
    "remember_response",
    "aremember_response",
]
