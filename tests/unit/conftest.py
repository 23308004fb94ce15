import httpx
import pytest

from microya import HttpResponse, RawOutcome
from microya import transports as microya_transports

from stubs import RequestsSessionStub, StubTransport, SyncClientStub


@pytest.fixture
def outcome_factory():
    def _factory(status_code=None, data=None, transport_error=None):
        response = HttpResponse(status_code=status_code) if status_code is not None else None
        return RawOutcome(data=data, response=response, transport_error=transport_error)

    return _factory


@pytest.fixture
def stub_transport():
    created = []

    def _factory(outcome):
        transport = StubTransport(outcome)
        created.append(transport)
        return transport

    yield _factory
    for transport in created:
        transport.close()


@pytest.fixture
def response_factory():
    def _factory(status_code, content=b"", url="http://test.local/"):
        return httpx.Response(status_code, content=content, request=httpx.Request("GET", url))

    return _factory


@pytest.fixture
def mock_sync_client(monkeypatch):
    def _install(response):
        calls = []

        def client_factory(*_args, **_kwargs):
            return SyncClientStub(response, calls)

        monkeypatch.setattr(microya_transports.httpx, "Client", client_factory)
        return calls

    return _install


@pytest.fixture
def mock_requests_session(monkeypatch):
    def _install(response):
        if microya_transports.requests is None:
            pytest.skip("requests is not installed")
        calls = []

        def session_factory(*_args, **_kwargs):
            return RequestsSessionStub(response, calls)

        monkeypatch.setattr(microya_transports.requests, "Session", session_factory)
        return calls

    return _install
