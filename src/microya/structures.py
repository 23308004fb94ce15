from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Generic, Optional, TypeVar, Union

if TYPE_CHECKING:
    from .exceptions import ApiError

T = TypeVar("T")


class HttpMethod(str, Enum):
    """HTTP methods supported by endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass
class WireRequest:
    """Fully formed HTTP request, mutable until it is dispatched."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        if not isinstance(self.method, str):
            raise TypeError("method must be str")
        if not isinstance(self.url, str):
            raise TypeError("url must be str")
        if not isinstance(self.headers, dict):
            raise TypeError("headers must be dict")
        if self.body is not None and not isinstance(self.body, bytes):
            raise TypeError("body must be bytes or None")
        if isinstance(self.method, HttpMethod):
            self.method = self.method.value


@dataclass(frozen=True)
class HttpResponse:
    """Status line and headers of a received HTTP response."""

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    url: Optional[str] = None


@dataclass(frozen=True)
class RawOutcome:
    """Untyped result of executing one wire request."""

    data: Optional[bytes] = None
    response: Optional[Any] = None
    transport_error: Optional[BaseException] = None


@dataclass(frozen=True)
class EmptyBodyResponse:
    """Success value of calls that expect no response body."""


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: "ApiError"

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the carried API error."""

        raise self.error


TypedResult = Union[Success[T], Failure]


__all__ = [
    "HttpMethod",
    "WireRequest",
    "HttpResponse",
    "RawOutcome",
    "EmptyBodyResponse",
    "Success",
    "Failure",
    "TypedResult",
]
