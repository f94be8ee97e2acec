# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Body encoders.

An encoder turns the request body value into bytes and raises when it cannot.
"""

from __future__ import annotations

import dataclasses
import json
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from typing import Any

EncoderFunc = Callable[[Any], bytes]

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_encoder(value: Any) -> bytes:
    """Compact UTF-8 JSON; dataclass instances are serialized as dicts."""
    return json.dumps(value, default=_json_default, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def string_encoder(value: Any) -> bytes:
    """Raw pass-through for text and bytes bodies."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"string body must be str or bytes, not {type(value).__name__}")


def _fill_element(element: ET.Element, value: Any) -> None:
    if isinstance(value, Mapping):
        for key, child in value.items():
            key = str(key)
            if key.startswith("@"):
                element.set(key[1:], "" if child is None else str(child))
            elif key == "#text":
                element.text = "" if child is None else str(child)
            elif isinstance(child, (list, tuple)):
                for item in child:
                    _fill_element(ET.SubElement(element, key), item)
            else:
                _fill_element(ET.SubElement(element, key), child)
    elif value is not None:
        element.text = str(value)


def xml_encoder(value: Any) -> bytes:
    """
    Serialize an ``ElementTree.Element`` or a single-root mapping to XML.

    Mapping keys become child elements, ``@name`` keys become attributes,
    ``#text`` sets the element text and list values repeat the element:

        {"user": {"@id": 7, "name": "ana", "tag": ["a", "b"]}}
        -> <user id="7"><name>ana</name><tag>a</tag><tag>b</tag></user>
    """
    if isinstance(value, ET.Element):
        root = value
    elif isinstance(value, Mapping) and len(value) == 1:
        name, content = next(iter(value.items()))
        root = ET.Element(str(name))
        _fill_element(root, content)
    else:
        raise TypeError(f"cannot encode {type(value).__name__} as XML; expected an Element or a single-root mapping")
    return ET.tostring(root, encoding="unicode").encode("utf-8")


__all__ = [
    "EncoderFunc",
    "JSON_CONTENT_TYPE",
    "TEXT_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "json_encoder",
    "string_encoder",
    "xml_encoder",
]
