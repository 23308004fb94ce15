from __future__ import annotations

from typing import Any, Optional, Tuple


class ApiError(Exception):
    """Base of the closed API error taxonomy.

    Errors are delivered as values inside ``Failure``; subclasses carry only
    their documented payload and compare equal by class and payload.
    """

    def _payload(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        # payloads may hold unhashable parsed bodies
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._payload()!r}"


class NoResponseReceived(ApiError):
    """Raised when the transport failed or produced no response."""

    def __init__(self, error: Optional[BaseException] = None) -> None:
        self.error = error
        super().__init__(f"No response received: {error!r}" if error is not None else "No response received.")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.error,)


class UnexpectedResponseType(ApiError):
    """Raised when the response is not a well-formed HTTP response."""

    def __init__(self, response: Any) -> None:
        self.response = response
        super().__init__(f"Unexpected response type: {type(response).__name__}")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.response,)


class NoDataInResponse(ApiError):
    """Raised when a body was expected but the response carried none."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: no data in response")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.status_code,)


class ResponseDataConversionFailed(ApiError):
    """Raised when a success body cannot be decoded to the expected type."""

    def __init__(self, type_name: str, error: BaseException) -> None:
        self.type_name = type_name
        self.error = error
        super().__init__(f"Failed to decode response body to {type_name}: {error}")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.type_name, self.error)


class ClientError(ApiError):
    """Raised for HTTP 4xx, with the parsed error body when available."""

    def __init__(self, status_code: int, client_error: Optional[Any] = None) -> None:
        self.status_code = status_code
        self.client_error = client_error
        super().__init__(f"HTTP {status_code}: client error {client_error!r}")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.status_code, self.client_error)


class ServerError(ApiError):
    """Raised for HTTP 5xx."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: server error")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.status_code,)


class UnexpectedStatusCode(ApiError):
    """Raised for status codes outside the success, client and server bands."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: unexpected status code")

    def _payload(self) -> Tuple[Any, ...]:
        return (self.status_code,)


class DecodingError(ValueError):
    """Raised by decoders when a body cannot be converted to the target type."""


class PluginError(RuntimeError):
    """Raised when a plugin fails after the request was performed."""


class TransportUnavailableError(RuntimeError):
    """Raised when a transport backend library is not installed."""


__all__ = [
    "ApiError",
    "NoResponseReceived",
    "UnexpectedResponseType",
    "NoDataInResponse",
    "ResponseDataConversionFailed",
    "ClientError",
    "ServerError",
    "UnexpectedStatusCode",
    "DecodingError",
    "PluginError",
    "TransportUnavailableError",
]
