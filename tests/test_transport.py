"""HTTP transport tests using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from surf_forecast.transport import HTTPTransport, TransportStatusError


def _transport(handler) -> HTTPTransport:
    return HTTPTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_get_returns_status_and_decoded_json() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.headers["Authorization"] == "secret"
        return httpx.Response(200, json={"hours": []})

    with _transport(_handler) as transport:
        response = transport.get("https://example.test/weather", headers={"Authorization": "secret"})

    assert response.status_code == 200
    assert response.data == {"hours": []}


def test_error_status_raises_with_json_body() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"errors": {"lat": "out of range"}})

    with _transport(_handler) as transport, pytest.raises(TransportStatusError) as exc_info:
        transport.get("https://example.test/weather")

    assert exc_info.value.status_code == 422
    assert exc_info.value.data == {"errors": {"lat": "out of range"}}


def test_error_status_falls_back_to_text_body() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    with _transport(_handler) as transport, pytest.raises(TransportStatusError) as exc_info:
        transport.get("https://example.test/weather")

    assert exc_info.value.status_code == 503
    assert exc_info.value.data == "Service Unavailable"


def test_network_errors_propagate_unchanged() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    with _transport(_handler) as transport, pytest.raises(httpx.ConnectError):
        transport.get("https://example.test/weather")


def test_non_json_success_body_raises_value_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with _transport(_handler) as transport, pytest.raises(ValueError):
        transport.get("https://example.test/weather")
