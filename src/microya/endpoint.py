from __future__ import annotations

import json
from typing import Any, ClassVar, Dict, Optional, Type

from .decoders import Decoder, JsonDecoder
from .structures import HttpMethod, WireRequest
from .utils import build_url


class Endpoint:
    """Declarative description of one API operation.

    Subclasses (or instances) set ``method``, ``subpath`` and optionally
    ``headers``, ``query_parameters`` and ``body``. ``client_error_type`` is the
    type parsed from 4xx bodies and ``decoder`` decodes both success and
    client error bodies.
    """

    client_error_type: ClassVar[Optional[Type[Any]]] = None
    decoder: ClassVar[Decoder] = JsonDecoder()

    method: HttpMethod = HttpMethod.GET
    subpath: str = ""
    headers: Optional[Dict[str, str]] = None
    query_parameters: Optional[Dict[str, Any]] = None
    body: Any = None

    def encode_body(self) -> Optional[bytes]:
        if self.body is None:
            return None
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")

    def build_request(self, base_url: str) -> WireRequest:
        headers = dict(self.headers or {})
        body = self.encode_body()
        if body is not None and not isinstance(self.body, (bytes, str)):
            if not any(key.lower() == "content-type" for key in headers):
                headers["Content-Type"] = "application/json"
        return WireRequest(
            method=HttpMethod(self.method).value,
            url=build_url(base_url, self.subpath, self.query_parameters),
            headers=headers,
            body=body,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({HttpMethod(self.method).value} /{self.subpath.strip('/')})"


__all__ = ["Endpoint"]
