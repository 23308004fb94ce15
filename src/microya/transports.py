from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional

import httpx

from .exceptions import TransportUnavailableError
from .structures import HttpResponse, RawOutcome, WireRequest

try:
    import requests
except ImportError:  # pragma: no cover - depends on installed extra
    requests = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


class Transport:
    """Executes wire requests on a worker pool.

    ``send`` performs the blocking I/O and reports transport failures through
    ``RawOutcome.transport_error`` instead of raising. ``execute`` schedules
    ``send`` on a worker thread and calls ``completion`` there exactly once.
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="microya-transport")

    def send(self, request: WireRequest) -> RawOutcome:
        raise NotImplementedError

    def execute(self, request: WireRequest, completion: Callable[[RawOutcome], None]) -> None:
        self._executor.submit(self._run, request, completion)

    def _run(self, request: WireRequest, completion: Callable[[RawOutcome], None]) -> None:
        try:
            outcome = self.send(request)
        except Exception as exc:
            logger.exception("%s failed to send %s %s", type(self).__name__, request.method, request.url)
            outcome = RawOutcome(transport_error=exc)
        completion(outcome)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()


class HttpxTransport(Transport):
    """Transport backed by ``httpx.Client``."""

    def __init__(
        self, timeout: float = 10.0, follow_redirects: bool = False, max_workers: Optional[int] = None
    ) -> None:
        super().__init__(max_workers=max_workers)
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def send(self, request: WireRequest) -> RawOutcome:
        try:
            with httpx.Client(timeout=self.timeout, follow_redirects=self.follow_redirects) as client:
                response = client.request(request.method, request.url, content=request.body, headers=request.headers)
        except httpx.HTTPError as exc:
            logger.debug("httpx transport error for %s %s: %r", request.method, request.url, exc)
            return RawOutcome(transport_error=exc)

        return RawOutcome(
            data=response.content,
            response=HttpResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                url=str(response.url),
            ),
        )


class RequestsTransport(Transport):
    """Transport backed by ``requests.Session``."""

    def __init__(self, timeout: float = 10.0, max_workers: Optional[int] = None) -> None:
        if requests is None:
            raise TransportUnavailableError("RequestsTransport requires requests. Install microya[requests].")
        super().__init__(max_workers=max_workers)
        self.timeout = timeout

    def send(self, request: WireRequest) -> RawOutcome:
        try:
            with requests.Session() as session:  # type: ignore[union-attr]
                response = session.request(
                    request.method,
                    request.url,
                    data=request.body,
                    headers=request.headers,
                    timeout=self.timeout,
                    allow_redirects=False,
                )
        except requests.RequestException as exc:  # type: ignore[union-attr]
            logger.debug("requests transport error for %s %s: %r", request.method, request.url, exc)
            return RawOutcome(transport_error=exc)

        return RawOutcome(
            data=response.content,
            response=HttpResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                url=response.url,
            ),
        )


__all__ = ["Transport", "HttpxTransport", "RequestsTransport"]
