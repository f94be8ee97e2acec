# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
webconnector package entrypoint.

Helpers for issuing many similarly shaped HTTP calls: a request builder driven
by ordered option functions, a status-keyed response dispatcher, and a
Connector that merges general, per-path and per-call options before sending
through an injectable transport.
"""

from . import connector, request, responder
from .cancel import CancelToken
from .config import HttpSettings, load_http_settings
from .connector import Connector, with_general, with_path, with_paths
from .errors import (
    DispatchError,
    ErrorCategory,
    NoHttpResponseError,
    NoResponseHandlerError,
    RequestBuildError,
    RequestCancelledError,
    TransportError,
    UnmappedPathError,
    WebConnectorError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .request import HttpMethod, RequestBuilder, build_request, new_builder
from .responder import Responder, Response
from .version import __version__

__all__ = [
    "CancelToken",
    "Connector",
    "DispatchError",
    "ErrorCategory",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "NoHttpResponseError",
    "NoResponseHandlerError",
    "RequestBuildError",
    "RequestBuilder",
    "RequestCancelledError",
    "Responder",
    "Response",
    "StubHttpClient",
    "TransportError",
    "UnmappedPathError",
    "WebConnectorError",
    "build_request",
    "connector",
    "create_default_http_client",
    "load_http_settings",
    "new_builder",
    "request",
    "responder",
    "setup_logging",
    "with_general",
    "with_path",
    "with_paths",
    "__version__",
]
