from __future__ import annotations

import logging

import httpx
import pytest

from cloudpager.config import ClientConfig
from cloudpager.core.errors import TransportError, UnexpectedStatusError
from cloudpager.core.transport import SyncTransport
from tests.shared.http import RoutedHandler, build_config, json_response

URL = "https://api.example.com/items"


def _transport(handler, config: ClientConfig | None = None) -> SyncTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SyncTransport(config or build_config(), client=client)


@pytest.mark.parametrize("status", [200, 204])
def test_ok_status_returns_unread_response(status):
    handler = RoutedHandler({URL: httpx.Response(status)})
    response = _transport(handler).get(URL)
    assert response.status_code == status
    response.close()


@pytest.mark.parametrize("status", [201, 301, 404, 500, 503])
def test_other_status_raises_unexpected_status_error(status):
    handler = RoutedHandler({URL: json_response({"error": "x"}, status_code=status)})
    with pytest.raises(UnexpectedStatusError) as excinfo:
        _transport(handler).get(URL)
    assert excinfo.value.http_status == status
    assert excinfo.value.url == URL
    assert isinstance(excinfo.value, TransportError)


def test_custom_ok_codes_are_honored():
    handler = RoutedHandler({URL: httpx.Response(202)})
    response = _transport(handler, build_config(ok_codes=(200, 202))).get(URL)
    assert response.status_code == 202
    response.close()


def test_network_error_maps_to_transport_error(caplog):
    handler = RoutedHandler({URL: httpx.ConnectError("refused")})
    with caplog.at_level(logging.ERROR, logger="cloudpager"):
        with pytest.raises(TransportError) as excinfo:
            _transport(handler).get(URL)
    assert excinfo.value.cause == "network"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert "request network error" in caplog.text


def test_headers_are_forwarded():
    handler = RoutedHandler({URL: httpx.Response(204)})
    _transport(handler).get(URL, headers={"X-Auth-Token": "t"}).close()
    assert handler.requests[0].headers["X-Auth-Token"] == "t"


def test_closed_transport_refuses_requests():
    transport = _transport(RoutedHandler({}))
    transport.close()
    transport.close()
    assert transport.closed is True
    with pytest.raises(TransportError):
        transport.get(URL)


def test_transport_can_initialize_and_close_with_real_httpx_client():
    transport = SyncTransport(build_config())
    transport.close()
    assert transport.closed is True
