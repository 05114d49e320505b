"""Authentication header providers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class AuthProvider(Protocol):
    """Supplies the headers that authenticate each page request."""

    def authenticated_headers(self) -> Mapping[str, str]: ...


class NoAuthProvider:
    """Anonymous access."""

    def authenticated_headers(self) -> Mapping[str, str]:
        return {}


class TokenAuthProvider:
    """Sends a fixed token in a single header (``X-Auth-Token`` by default)."""

    def __init__(self, token: str, *, header_name: str = "X-Auth-Token") -> None:
        if not token:
            raise ValueError("token must not be empty")
        if not header_name:
            raise ValueError("header_name must not be empty")
        self._token = token
        self._header_name = header_name

    def authenticated_headers(self) -> Mapping[str, str]:
        return {self._header_name: self._token}

    def __repr__(self) -> str:
        return f"TokenAuthProvider(header_name={self._header_name!r})"


__all__ = [
    "AuthProvider",
    "NoAuthProvider",
    "TokenAuthProvider",
]
