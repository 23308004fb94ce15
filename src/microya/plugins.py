from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .structures import RawOutcome, TypedResult, WireRequest

if TYPE_CHECKING:
    from .endpoint import Endpoint


class Plugin:
    """Middleware participant called at fixed points of every request.

    All hooks are no-ops by default; subclasses override the ones they need.
    Hooks run synchronously in registration order and cannot change the
    result of a call.
    """

    def modify_request(self, request: WireRequest, endpoint: "Endpoint") -> None:
        """Mutate the request in place before it is sent."""

    def will_perform_request(self, request: WireRequest, endpoint: "Endpoint") -> None:
        """Observe the final request right before it is sent."""

    def did_perform_request(self, outcome: RawOutcome, typed_result: TypedResult, endpoint: "Endpoint") -> None:
        """Observe the raw outcome and the typed result before delivery."""


class RequestLoggerPlugin(Plugin):
    """Log every outgoing request."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def will_perform_request(self, request: WireRequest, endpoint: "Endpoint") -> None:
        self.logger.log(
            self.level,
            "Sending %s %s for %r (headers=%s, body=%d bytes)",
            request.method,
            request.url,
            endpoint,
            sorted(request.headers),
            len(request.body or b""),
        )


class ResponseLoggerPlugin(Plugin):
    """Log the outcome of every request."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def did_perform_request(self, outcome: RawOutcome, typed_result: TypedResult, endpoint: "Endpoint") -> None:
        if outcome.transport_error is not None:
            self.logger.log(self.level, "Request %r failed in transport: %r", endpoint, outcome.transport_error)
            return
        status_code = getattr(outcome.response, "status_code", None)
        if typed_result.is_success:
            self.logger.log(self.level, "Request %r succeeded with HTTP %s", endpoint, status_code)
        else:
            self.logger.log(
                self.level,
                "Request %r failed with HTTP %s: %r",
                endpoint,
                status_code,
                typed_result.error,  # type: ignore[union-attr]
            )


__all__ = ["Plugin", "RequestLoggerPlugin", "ResponseLoggerPlugin"]
