# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response dispatch: Responder, parsed Response results and body parsers."""

from .parsers import BodyParser, json_parser, read_json, read_nothing, read_string, read_xml
from .responder import Option, Responder, Response, default, for_status, json, status, string, xml

__all__ = [
    "BodyParser",
    "Option",
    "Responder",
    "Response",
    "default",
    "for_status",
    "json",
    "json_parser",
    "read_json",
    "read_nothing",
    "read_string",
    "read_xml",
    "status",
    "string",
    "xml",
]
