from __future__ import annotations

from .classifier import classify
from .decoders import Decoder, JsonDecoder, XmlDecoder
from .endpoint import Endpoint
from .exceptions import (
    ApiError,
    ClientError,
    DecodingError,
    NoDataInResponse,
    NoResponseReceived,
    PluginError,
    ResponseDataConversionFailed,
    ServerError,
    TransportUnavailableError,
    UnexpectedResponseType,
    UnexpectedStatusCode,
)
from .plugins import Plugin, RequestLoggerPlugin, ResponseLoggerPlugin
from .provider import ApiProvider
from .structures import (
    EmptyBodyResponse,
    Failure,
    HttpMethod,
    HttpResponse,
    RawOutcome,
    Success,
    TypedResult,
    WireRequest,
)
from .transports import HttpxTransport, RequestsTransport, Transport

__all__ = [
    "ApiProvider",
    "Endpoint",
    "HttpMethod",
    "WireRequest",
    "HttpResponse",
    "RawOutcome",
    "EmptyBodyResponse",
    "Success",
    "Failure",
    "TypedResult",
    "classify",
    "Plugin",
    "RequestLoggerPlugin",
    "ResponseLoggerPlugin",
    "Decoder",
    "JsonDecoder",
    "XmlDecoder",
    "Transport",
    "HttpxTransport",
    "RequestsTransport",
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
