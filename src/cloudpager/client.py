"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

import httpx

from .client_shared import join_service_url, resolve_auth_provider, validate_client_config
from .config import ClientConfig
from .core.auth import AuthProvider
from .core.errors import ClientClosedError
from .core.transport import SyncTransport


class ServiceClient:
    """Authenticated access to one remote service endpoint."""

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        auth: AuthProvider | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        validate_client_config(self._config)

        self._auth = resolve_auth_provider(auth)
        self._transport = transport or SyncTransport(self._config)
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def auth(self) -> AuthProvider:
        return self._auth

    def service_url(self, *parts: str) -> str:
        return join_service_url(self._config.endpoint, parts)

    def request(self, url: str) -> httpx.Response:
        """Perform one authenticated GET; the body is left unread."""

        self._ensure_open()
        return self._transport.get(url, headers=self._auth.authenticated_headers())

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("ServiceClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "ServiceClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "ServiceClient",
]
