"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0
    follow_redirects: bool = False

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")
        if not isinstance(self.follow_redirects, bool):
            raise ValueError("transport.follow_redirects must be bool")


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Runtime configuration for a service client.

    ``endpoint`` is the service base URL used by ``ServiceClient.service_url``;
    it may stay empty when callers always pass absolute URLs.
    """

    endpoint: str = ""
    user_agent: str = "cloudpager/0.1.0"
    ok_codes: tuple[int, ...] = (200, 204)

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        if not isinstance(self.ok_codes, tuple) or not self.ok_codes:
            raise ValueError("ok_codes must be a non-empty tuple")
        for code in self.ok_codes:
            if not isinstance(code, int) or isinstance(code, bool) or not 100 <= code <= 599:
                raise ValueError("ok_codes entries must be HTTP status codes")
        if self.endpoint and not self.endpoint.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "ClientConfig",
]
