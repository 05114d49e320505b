"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import ClientConfig
from .core.auth import AuthProvider, NoAuthProvider
from .core.errors import ConfigurationError


def validate_client_config(config: ClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def resolve_auth_provider(auth: AuthProvider | None) -> AuthProvider:
    if auth is not None:
        return auth
    return NoAuthProvider()


def join_service_url(endpoint: str, parts: tuple[str, ...]) -> str:
    if not endpoint:
        raise ConfigurationError("endpoint is not configured")
    base = endpoint.rstrip("/")
    segments = [part.strip("/") for part in parts if part.strip("/")]
    if not segments:
        return base + "/"
    return "/".join([base, *segments])


__all__ = [
    "validate_client_config",
    "resolve_auth_provider",
    "join_service_url",
]
