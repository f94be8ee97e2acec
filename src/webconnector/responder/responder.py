# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Status-keyed response dispatch.

A Responder maps status codes to body parsers, with an optional default:

    responder = Responder(
        status(404),                    # handled, nothing to parse
        json(200, into=User),
        default(lambda body: raise_unexpected(body)),
    )
    result = responder.respond(http_response)
    if result.ok:
        user = result.body

Dispatch is strict: a status with no parser and no default yields a
NoResponseHandlerError in the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..errors import NoHttpResponseError, NoResponseHandlerError
from ..http.models import HttpResponse
from .parsers import BodyParser, json_parser, read_nothing, read_string, read_xml

logger = logging.getLogger(__name__)

Option = Callable[["Responder"], object]


@dataclass
class Response:
    """Outcome of dispatching one HttpResponse."""

    status: int | None = None
    body: Any = None
    http_response: HttpResponse | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Response:
        if self.error is not None:
            raise self.error
        return self


class Responder:
    """Maps HTTP status codes to body parsers."""

    def __init__(self, *options: Option):
        self._parsers: dict[int, BodyParser] = {}
        self._default: BodyParser | None = None
        for option in options:
            option(self)

    def register(self, status: int, parser: BodyParser) -> Responder:
        self._parsers[int(status)] = parser
        return self

    def set_default(self, parser: BodyParser | None) -> Responder:
        self._default = parser
        return self

    def parser_for(self, status: int) -> BodyParser | None:
        return self._parsers.get(status, self._default)

    def respond(self, http_response: HttpResponse | None) -> Response:
        if http_response is None:
            return Response(error=NoHttpResponseError())

        status_code = http_response.status_code
        parser = self.parser_for(status_code)
        if parser is None:
            logger.debug("No parser mapped for status %s", status_code)
            return Response(status=status_code, http_response=http_response, error=NoResponseHandlerError(status_code))

        try:
            value = parser(http_response.body())
        except Exception as exc:  # noqa: BLE001
            logger.debug("Parser for status %s failed: %s", status_code, exc)
            return Response(status=status_code, http_response=http_response, error=exc)
        return Response(status=status_code, body=value, http_response=http_response)


def for_status(status_code: int, parser: BodyParser) -> Option:
    """Handle ``status_code`` with ``parser``."""
    return lambda r: r.register(status_code, parser)


def default(parser: BodyParser) -> Option:
    """Handle every status without a dedicated parser."""
    return lambda r: r.set_default(parser)


def status(status_code: int) -> Option:
    """Mark ``status_code`` as handled without reading the body."""
    return lambda r: r.register(status_code, read_nothing)


def string(status_code: int) -> Option:
    """Read the whole body as text."""
    return lambda r: r.register(status_code, read_string)


def json(status_code: int, into: Callable[..., Any] | None = None) -> Option:
    return lambda r: r.register(status_code, json_parser(into))


def xml(status_code: int) -> Option:
    return lambda r: r.register(status_code, read_xml)


__all__ = [
    "Option",
    "Responder",
    "Response",
    "default",
    "for_status",
    "json",
    "status",
    "string",
    "xml",
]
