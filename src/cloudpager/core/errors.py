"""Error types raised while fetching and walking paged collections."""

from __future__ import annotations


class PagerError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.http_status = http_status
        self.cause = cause


class TransportError(PagerError):
    """Network/transport-level failure while fetching a page."""


class UnexpectedStatusError(TransportError):
    """HTTP status outside the accepted codes."""


class DecodeError(PagerError):
    """Body is not valid JSON or the pagination envelope is malformed."""


class ExtractionError(PagerError):
    """A per-resource collaborator could not extract a value from a page."""


class PageUnavailableError(PagerError):
    """The requested collection page does not exist."""


class PaginationLimitError(PagerError):
    """Traversal exceeded the configured max_pages guard."""


class ClientClosedError(PagerError):
    """Raised when a client is used after close."""


class ConfigurationError(PagerError):
    """Invalid client configuration."""


__all__ = [
    "PagerError",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
    "ExtractionError",
    "PageUnavailableError",
    "PaginationLimitError",
    "ClientClosedError",
    "ConfigurationError",
]
