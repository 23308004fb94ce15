from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingError
from .utils import parse_xml

T = TypeVar("T")


def type_name(type_: Any) -> str:
    if isinstance(type_, type):
        return type_.__name__
    return repr(type_)


def build_value(type_: Type[T], payload: Any) -> T:
    """Validate an already parsed payload as ``type_``.

    Any type pydantic can validate is accepted: builtins, typing generics such
    as ``List[Post]``, dataclasses (nested ones included) and pydantic models.
    Every failure to build the target is raised as ``DecodingError``.
    """

    try:
        adapter = TypeAdapter(type_)
    except TypeError as exc:
        raise DecodingError(f"Unsupported target type: {type_name(type_)}") from exc
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise DecodingError(f"Payload does not match {type_name(type_)}: {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        # raised directly by constructors or __post_init__ of the target
        raise DecodingError(f"Cannot build {type_name(type_)}: {exc}") from exc


class Decoder:
    """Codec used for both success and client error bodies."""

    def decode(self, type_: Type[T], data: bytes) -> T:
        raise NotImplementedError


class JsonDecoder(Decoder):
    """Decode JSON bodies."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def decode(self, type_: Type[T], data: bytes) -> T:
        try:
            payload = json.loads(data.decode(self.encoding))
        except ValueError as exc:
            raise DecodingError(f"Invalid JSON body: {exc}") from exc
        return build_value(type_, payload)


class XmlDecoder(Decoder):
    """Decode XML bodies, mapping the root element's attributes and children."""

    def decode(self, type_: Type[T], data: bytes) -> T:
        try:
            _, content = parse_xml(data)
        except ET.ParseError as exc:
            raise DecodingError("Failed to parse XML body.") from exc
        return build_value(type_, content)


__all__ = ["Decoder", "JsonDecoder", "XmlDecoder", "build_value", "type_name"]
