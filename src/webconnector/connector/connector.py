# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Connector: shared request configuration for one host.

A Connector keeps a host, a transport, options applied to every request and
per-path default options. Options are applied general -> path defaults ->
per-call, so later ones override single-valued settings and headers/queries
accumulate:

    connector = Connector(
        "my.host.com",
        create_default_http_client(),
        with_general(request.header("Authorization", token)),
        with_path("/users/:id"),
        with_path("/users", request.method(HttpMethod.POST)),
    )
    user = connector.send("/users/:id", Responder(rsp.json(200, into=User)), request.param("id", 7)).body

Only registered paths can be sent; anything else raises UnmappedPathError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from ..errors import UnmappedPathError
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..request import builder as request_builder
from ..request.builder import Option as RequestOption
from ..responder.responder import Response

logger = logging.getLogger(__name__)


class ResponseHandler(Protocol):
    """Anything that turns an HttpResponse into a Response (e.g. a Responder)."""

    def respond(self, http_response: HttpResponse | None) -> Response: ...


@dataclass
class ConnectorConfig:
    """Mutable configuration assembled by connector options during construction."""

    general_options: list[RequestOption] = field(default_factory=list)
    path_options: dict[str, list[RequestOption]] = field(default_factory=dict)


Option = Callable[[ConnectorConfig], object]


class Connector:
    """Builds, sends and dispatches requests for a single host."""

    def __init__(self, host: str, client: HttpClient, *options: Option):
        config = ConnectorConfig()
        for option in options:
            option(config)

        self._host = host
        self._client = client
        self._general_options: tuple[RequestOption, ...] = tuple(config.general_options)
        self._path_options: Mapping[str, tuple[RequestOption, ...]] = MappingProxyType(
            {key: tuple(value) for key, value in config.path_options.items()}
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def paths(self) -> Mapping[str, tuple[RequestOption, ...]]:
        """Read-only view of the registered paths and their default options."""
        return self._path_options

    def options_for(self, path: str, *options: RequestOption) -> list[RequestOption]:
        """Return the full option list for ``path``: path, general, path defaults, call options."""
        if path not in self._path_options:
            raise UnmappedPathError(path)
        return [
            request_builder.path(path),
            *self._general_options,
            *self._path_options[path],
            *options,
        ]

    def build(self, path: str, *options: RequestOption) -> HttpRequest:
        return request_builder.build_request(self._host, *self.options_for(path, *options))

    def send(self, path: str, responder: ResponseHandler, *options: RequestOption) -> Response:
        """
        Build the request for ``path``, send it and dispatch the response.

        Build and transport errors propagate before the responder is called;
        dispatch errors are raised from the returned Response.
        """
        request = self.build(path, *options)
        return self.do(request, responder)

    def do(self, request: HttpRequest, responder: ResponseHandler) -> Response:
        """Send an already built request and dispatch the response."""
        logger.debug("Sending %s %s", request.method, request.url)
        http_response = self._client.send(request)
        result = responder.respond(http_response)
        logger.debug("Dispatched %s %s -> status %s", request.method, request.url, result.status)
        return result.raise_for_error()


def with_general(*options: RequestOption) -> Option:
    """Add options applied to every request."""

    def apply(config: ConnectorConfig) -> None:
        config.general_options.extend(options)

    return apply


def with_path(path: str, *options: RequestOption) -> Option:
    """Register ``path`` with its default options, replacing earlier defaults."""

    def apply(config: ConnectorConfig) -> None:
        config.path_options[path] = list(options)

    return apply


def with_paths(paths: Mapping[str, list[RequestOption]]) -> Option:
    """Replace every registered path; the mapping is copied."""

    def apply(config: ConnectorConfig) -> None:
        config.path_options = {key: list(value) for key, value in paths.items()}

    return apply


__all__ = [
    "Connector",
    "ConnectorConfig",
    "Option",
    "ResponseHandler",
    "with_general",
    "with_path",
    "with_paths",
]
