"""Sync HTTP transport: one authenticated GET per page, no retries."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from ..config import ClientConfig
from .errors import TransportError
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    is_ok_status,
    unexpected_status_error,
)

logger = logging.getLogger("cloudpager")


class SyncTransport:
    """Synchronous transport backed by ``httpx.Client``.

    Responses are returned unread (``stream=True``) so the body is consumed
    exactly once by the snapshot that captures it.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        if client is None:
            kwargs: dict[str, object] = {}
            if config.endpoint:
                kwargs["base_url"] = config.endpoint.rstrip("/") + "/"
            client = httpx.Client(
                headers=build_default_headers(config),
                timeout=build_default_timeout(config),
                follow_redirects=config.transport.follow_redirects,
                **kwargs,
            )
        self._client = client

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> httpx.Response:
        if self._closed:
            raise TransportError("transport is already closed", url=url)

        logger.debug("request start method=GET url=%s", url)
        try:
            request = self._client.build_request("GET", url, headers=headers)
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "request network error url=%s error=%s",
                url,
                exc.__class__.__name__,
            )
            raise TransportError(
                "network/transport error",
                url=url,
                cause="network",
            ) from exc

        http_status = response.status_code
        if not is_ok_status(self._config, http_status):
            response.close()
            logger.warning("request rejected url=%s http_status=%s", url, http_status)
            raise unexpected_status_error(self._config, url=url, http_status=http_status)

        logger.info("request success url=%s http_status=%s", url, http_status)
        return response


__all__ = [
    "SyncTransport",
]
