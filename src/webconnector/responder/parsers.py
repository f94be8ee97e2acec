# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Body parsers: callables that read a response body stream and return a value."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping
from typing import Any, BinaryIO
from xml.etree.ElementTree import Element

from defusedxml import ElementTree

BodyParser = Callable[[BinaryIO], Any]


def read_nothing(stream: BinaryIO) -> None:  # noqa: ARG001
    return None


def read_string(stream: BinaryIO) -> str:
    """Read the whole body as UTF-8; invalid bytes raise UnicodeDecodeError."""
    return stream.read().decode("utf-8")


def read_json(stream: BinaryIO) -> Any:
    return json.loads(stream.read())


def json_parser(into: Callable[..., Any] | None = None) -> BodyParser:
    """
    Build a JSON parser, optionally converting the decoded value with ``into``.

    Dataclass types receive mapping fields as keyword arguments.
    """
    if into is None:
        return read_json

    def parse(stream: BinaryIO) -> Any:
        data = read_json(stream)
        if isinstance(into, type) and dataclasses.is_dataclass(into) and isinstance(data, Mapping):
            return into(**data)
        return into(data)

    return parse


def read_xml(stream: BinaryIO) -> Element:
    """Parse the body as XML (entity expansion disabled) and return the root element."""
    return ElementTree.fromstring(stream.read())


__all__ = ["BodyParser", "json_parser", "read_json", "read_nothing", "read_string", "read_xml"]
