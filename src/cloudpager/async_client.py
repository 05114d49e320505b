"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

import httpx

from .client_shared import join_service_url, resolve_auth_provider, validate_client_config
from .config import ClientConfig
from .core.async_transport import AsyncTransport
from .core.auth import AuthProvider
from .core.errors import ClientClosedError


class AsyncServiceClient:
    """Async authenticated access to one remote service endpoint."""

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        auth: AuthProvider | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        validate_client_config(self._config)

        self._auth = resolve_auth_provider(auth)
        self._transport = transport or AsyncTransport(self._config)
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    def service_url(self, *parts: str) -> str:
        return join_service_url(self._config.endpoint, parts)

    async def request(self, url: str) -> httpx.Response:
        self._ensure_open()
        return await self._transport.get(url, headers=self._auth.authenticated_headers())

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("AsyncServiceClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncServiceClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncServiceClient",
]
