# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CANCELLED = "CANCELLED"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    BODY_TOO_LARGE = "BODY_TOO_LARGE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class WebConnectorError(Exception):
    """Base class for every error raised by webconnector itself."""


class RequestBuildError(WebConnectorError):
    """The accumulated request options do not describe a valid request."""


class TransportError(WebConnectorError):
    """The transport failed before producing a response."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.category = category


class RequestCancelledError(TransportError):
    def __init__(self, message: str = "request cancelled"):
        super().__init__(message, ErrorCategory.CANCELLED)


class DispatchError(WebConnectorError):
    """A response could not be routed to a body parser."""


class NoHttpResponseError(DispatchError):
    def __init__(self) -> None:
        super().__init__("webconnector/responder: no http response")


class NoResponseHandlerError(DispatchError):
    def __init__(self, status: int | None):
        super().__init__(f"webconnector/responder: no response handler for status {status}")
        self.status = status


class UnmappedPathError(WebConnectorError):
    def __init__(self, path: str):
        super().__init__(f"webconnector/connector: unmapped path {path!r}")
        self.path = path


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.TooManyRedirects)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "DispatchError",
    "ErrorCategory",
    "NoHttpResponseError",
    "NoResponseHandlerError",
    "RequestBuildError",
    "RequestCancelledError",
    "TransportError",
    "UnmappedPathError",
    "WebConnectorError",
    "categorize_exception",
]
