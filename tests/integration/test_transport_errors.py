from __future__ import annotations

import socket

import httpx
import pytest

from microya import ApiProvider, Endpoint, HttpxTransport, NoResponseReceived, RequestsTransport
from microya import transports as microya_transports


def _free_tcp_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


class SlowEndpoint(Endpoint):
    subpath = "slow"


class DownEndpoint(Endpoint):
    subpath = "down"


def test_it_maps_timeout_to_no_response_received(local_api_server: str) -> None:
    with ApiProvider(local_api_server, transport=HttpxTransport(timeout=0.05)) as provider:
        result = provider.perform_request_and_wait(SlowEndpoint(), decode_body_to=dict)

    assert isinstance(result.error, NoResponseReceived)
    assert isinstance(result.error.error, httpx.TimeoutException)


def test_it_maps_connection_refused_to_no_response_received() -> None:
    port = _free_tcp_port()
    with ApiProvider(f"http://127.0.0.1:{port}") as provider:
        result = provider.perform_request_and_wait(DownEndpoint())

    assert isinstance(result.error, NoResponseReceived)
    assert isinstance(result.error.error, httpx.ConnectError)


def test_it_requests_transport_maps_connection_refused() -> None:
    if microya_transports.requests is None:
        pytest.skip("requests is not installed")

    port = _free_tcp_port()
    with ApiProvider(f"http://127.0.0.1:{port}", transport=RequestsTransport()) as provider:
        result = provider.perform_request_and_wait(DownEndpoint())

    assert isinstance(result.error, NoResponseReceived)
    assert isinstance(result.error.error, microya_transports.requests.ConnectionError)
