from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode


def build_url(base_url: str, subpath: str, query: Optional[Mapping[str, Any]] = None) -> str:
    """Join base URL and endpoint subpath, appending non-None query values."""

    if not isinstance(subpath, str):
        raise TypeError("subpath must be str")
    url = base_url.rstrip("/")
    subpath = subpath.strip("/")
    if subpath:
        url = f"{url}/{subpath}"
    if not query:
        return url
    clean = [(key, value) for key, value in query.items() if value is not None]
    if not clean:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(clean, doseq=True)}"


def local_name(tag: str) -> str:
    """Strip XML namespace and attribute prefix from a tag or key."""

    return tag.rsplit("}", 1)[-1].lstrip("@")


def merge_value(target: Dict[str, Any], key: str, value: Any) -> None:
    """Store value under key, turning repeated keys into a list."""

    if key not in target:
        target[key] = value
        return
    current = target[key]
    if isinstance(current, list):
        current.append(value)
    else:
        target[key] = [current, value]


def element_to_value(element: ET.Element) -> Any:
    """Convert an element to a dict of attributes and children, or to its text."""

    value: Dict[str, Any] = {local_name(key): item for key, item in element.attrib.items()}
    for child in element:
        merge_value(value, local_name(child.tag), element_to_value(child))

    text = (element.text or "").strip()
    if not value:
        return text
    if text:
        value["text"] = text
    return value


def parse_xml(data: bytes) -> Tuple[str, Any]:
    """Parse an XML document into its root tag and converted content."""

    root = ET.fromstring(data)
    return local_name(root.tag), element_to_value(root)


__all__ = [
    "build_url",
    "local_name",
    "merge_value",
    "element_to_value",
    "parse_xml",
]
