"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import ClientConfig
from .errors import UnexpectedStatusError


def build_default_headers(config: ClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def is_ok_status(config: ClientConfig, http_status: int) -> bool:
    return http_status in config.ok_codes


def unexpected_status_error(
    config: ClientConfig,
    *,
    url: str,
    http_status: int,
) -> UnexpectedStatusError:
    expected = ", ".join(str(code) for code in config.ok_codes)
    return UnexpectedStatusError(
        f"expected HTTP status in ({expected}), got {http_status}",
        url=url,
        http_status=http_status,
        cause="server_transient" if http_status >= 500 else "http_status",
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "is_ok_status",
    "unexpected_status_error",
]
