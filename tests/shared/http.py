from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence

import httpx

from cloudpager.client import ServiceClient
from cloudpager.async_client import AsyncServiceClient
from cloudpager.config import ClientConfig
from cloudpager.core.async_transport import AsyncTransport
from cloudpager.core.auth import AuthProvider
from cloudpager.core.snapshot import ResponseSnapshot
from cloudpager.core.transport import SyncTransport


def json_response(payload: object, *, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def snapshot(body: object, *, url: str = "https://api.example.com/items") -> ResponseSnapshot:
    return ResponseSnapshot(request_url=url, headers={}, body=body)


class RoutedHandler:
    """httpx.MockTransport handler serving canned responses by full URL."""

    def __init__(self, routes: Mapping[str, httpx.Response | Exception]):
        self.routes = dict(routes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.routes[str(request.url)]
        if isinstance(step, Exception):
            raise step
        return step

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]


def build_config(*, endpoint: str = "https://api.example.com", ok_codes: Sequence[int] = (200, 204)) -> ClientConfig:
    cfg = ClientConfig(endpoint=endpoint, ok_codes=tuple(ok_codes))
    cfg.validate()
    return cfg


def _client_kwargs(cfg: ClientConfig) -> dict[str, str]:
    if not cfg.endpoint:
        return {}
    return {"base_url": cfg.endpoint.rstrip("/") + "/"}


def build_client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    auth: AuthProvider | None = None,
    config: ClientConfig | None = None,
) -> ServiceClient:
    cfg = config or build_config()
    client = httpx.Client(transport=httpx.MockTransport(handler), **_client_kwargs(cfg))
    transport = SyncTransport(cfg, client=client)
    return ServiceClient(config=cfg, auth=auth, transport=transport)


def build_async_client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    auth: AuthProvider | None = None,
    config: ClientConfig | None = None,
) -> AsyncServiceClient:
    cfg = config or build_config()
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), **_client_kwargs(cfg))
    transport = AsyncTransport(cfg, client=client)
    return AsyncServiceClient(config=cfg, auth=auth, transport=transport)
