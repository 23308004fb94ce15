from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional, Sequence, Type

from .classifier import classify
from .endpoint import Endpoint
from .exceptions import PluginError
from .plugins import Plugin
from .structures import EmptyBodyResponse, RawOutcome, TypedResult
from .transports import HttpxTransport, Transport

logger = logging.getLogger(__name__)

Completion = Callable[[TypedResult], None]


def _deliver(completion: Completion, future: "Future[TypedResult]") -> None:
    if future.exception() is None:
        completion(future.result())


@dataclass(frozen=True)
class ApiProvider:
    """Performs endpoint requests and returns typed results.

    ``plugins`` and ``base_url`` are fixed at construction and shared by all
    calls. Pass ``decode_body_to`` to decode the success body; leave it as
    ``None`` for write-only endpoints, which succeed with ``EmptyBodyResponse``.
    """

    base_url: str
    plugins: Sequence[Plugin] = ()
    transport: Optional[Transport] = None

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str):
            raise TypeError("base_url must be str")
        object.__setattr__(self, "plugins", tuple(self.plugins))
        if self.transport is None:
            object.__setattr__(self, "transport", HttpxTransport())

    def perform_request(
        self,
        endpoint: Endpoint,
        completion: Optional[Completion] = None,
        decode_body_to: Optional[Type[Any]] = None,
    ) -> "Future[TypedResult]":
        """Send the request without blocking.

        ``completion`` is called exactly once with the typed result on a
        transport worker thread, after every plugin observed the result. The
        returned future resolves with the same result. Write-only endpoints
        leave ``decode_body_to`` as ``None``; passing ``EmptyBodyResponse``
        itself is rejected with ``TypeError``.
        """

        if decode_body_to is EmptyBodyResponse:
            raise TypeError("pass decode_body_to=None for endpoints without a response body")

        request = endpoint.build_request(self.base_url)

        for plugin in self.plugins:
            plugin.modify_request(request, endpoint)

        for plugin in self.plugins:
            plugin.will_perform_request(request, endpoint)

        result: "Future[TypedResult]" = Future()
        if completion is not None:
            result.add_done_callback(partial(_deliver, completion))

        logger.debug("Dispatching %s %s for %r", request.method, request.url, endpoint)
        on_outcome = partial(self._complete, endpoint, decode_body_to, result)
        self.transport.execute(request, on_outcome)  # type: ignore[union-attr]
        return result

    def _complete(
        self,
        endpoint: Endpoint,
        body_type: Optional[Type[Any]],
        result: "Future[TypedResult]",
        outcome: RawOutcome,
    ) -> None:
        try:
            typed_result = classify(outcome, endpoint, body_type)
        except Exception as exc:
            # decoders must raise DecodingError; anything else is a bug in the decoder
            logger.exception("Failed to classify response for %r", endpoint)
            result.set_exception(exc)
            return

        try:
            for plugin in self.plugins:
                plugin.did_perform_request(outcome, typed_result, endpoint)
        except Exception as exc:
            logger.exception("Plugin failed after performing %r", endpoint)
            error = PluginError(f"Plugin failed after performing {endpoint!r}: {exc}")
            error.__cause__ = exc
            result.set_exception(error)
            return

        result.set_result(typed_result)

    def perform_request_and_wait(self, endpoint: Endpoint, decode_body_to: Optional[Type[Any]] = None) -> TypedResult:
        """Send the request and block the calling thread until the result is available."""

        return self.perform_request(endpoint, decode_body_to=decode_body_to).result()

    async def perform_request_async(
        self, endpoint: Endpoint, decode_body_to: Optional[Type[Any]] = None
    ) -> TypedResult:
        return await asyncio.wrap_future(self.perform_request(endpoint, decode_body_to=decode_body_to))

    def close(self) -> None:
        self.transport.close()  # type: ignore[union-attr]

    def __enter__(self) -> "ApiProvider":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()


__all__ = ["ApiProvider", "Completion"]
