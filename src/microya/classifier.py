from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Type

from .decoders import type_name
from .exceptions import (
    ClientError,
    DecodingError,
    NoDataInResponse,
    NoResponseReceived,
    ResponseDataConversionFailed,
    ServerError,
    UnexpectedResponseType,
    UnexpectedStatusCode,
)
from .structures import EmptyBodyResponse, Failure, HttpResponse, RawOutcome, Success, TypedResult

if TYPE_CHECKING:
    from .endpoint import Endpoint

logger = logging.getLogger(__name__)


def _is_http_response(response: Any) -> bool:
    return (
        isinstance(response, HttpResponse)
        and isinstance(response.status_code, int)
        and not isinstance(response.status_code, bool)
    )


def classify(outcome: RawOutcome, endpoint: "Endpoint", body_type: Optional[Type[Any]] = None) -> TypedResult:
    """Turn the raw outcome of one request into a typed result.

    ``body_type=None`` means no response body is expected: any 2xx succeeds
    with ``EmptyBodyResponse`` and 4xx bodies are not parsed.
    """

    if outcome.transport_error is not None:
        logger.debug("Transport error for %r: %r", endpoint, outcome.transport_error)
        return Failure(NoResponseReceived(error=outcome.transport_error))

    response = outcome.response
    if response is None:
        return Failure(NoResponseReceived(error=None))

    if not _is_http_response(response):
        return Failure(UnexpectedResponseType(response=response))

    status_code = response.status_code
    logger.debug("Classifying HTTP %d for %r", status_code, endpoint)

    if 200 <= status_code < 300:
        if body_type is None:
            return Success(EmptyBodyResponse())
        if outcome.data is None:
            return Failure(NoDataInResponse(status_code))
        try:
            return Success(endpoint.decoder.decode(body_type, outcome.data))
        except DecodingError as exc:
            return Failure(ResponseDataConversionFailed(type_name(body_type), exc))

    if 400 <= status_code < 500:
        if body_type is None:
            return Failure(ClientError(status_code, None))
        if outcome.data is None:
            return Failure(NoDataInResponse(status_code))
        return Failure(ClientError(status_code, _parse_client_error(outcome.data, endpoint)))

    if 500 <= status_code < 600:
        return Failure(ServerError(status_code))

    return Failure(UnexpectedStatusCode(status_code))


def _parse_client_error(data: bytes, endpoint: "Endpoint") -> Optional[Any]:
    # a malformed error body must not hide the client error itself
    error_type = endpoint.client_error_type
    if error_type is None:
        return None
    try:
        return endpoint.decoder.decode(error_type, data)
    except Exception as exc:
        logger.debug("Ignoring undecodable client error body for %r: %r", endpoint, exc)
        return None


__all__ = ["classify"]
