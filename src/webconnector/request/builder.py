# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request builder.

A RequestBuilder accumulates the pieces of a request (method, path, path
params, headers, queries, body) and renders them into an HttpRequest. It can be
configured fluently or through option functions, which are applied in order:

    request = build_request(
        "my.host.com",
        method(HttpMethod.PATCH),  # GET by default
        path("/users/:id"),
        param("id", user_id),
        query("verbose", 1),
        header("Authorization", token),
        json({"name": "ana"}),
    )

Single-valued settings (method, protocol, path, body, encoder, cancel token)
are overwritten by later options; headers and queries accumulate.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from ..cancel import CancelToken
from ..errors import RequestBuildError
from ..http.headers import coerce_headers, iter_pairs
from ..http.models import HttpRequest
from .encoders import (
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    XML_CONTENT_TYPE,
    EncoderFunc,
    json_encoder,
    string_encoder,
    xml_encoder,
)
from .methods import HttpMethod

Option = Callable[["RequestBuilder"], object]

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")


class RequestBuilder:
    """Mutable request descriptor; owned by a single build call."""

    def __init__(self, host: str):
        self.host = host
        self.protocol = "http"
        self.method = HttpMethod.GET.value
        self.path = ""
        self.params: dict[str, str] = {}
        self.headers = httpx.Headers()
        self.queries: dict[str, list[str]] = {}
        self.body: Any = None
        self.encoder: EncoderFunc = json_encoder
        self.cancel_token: CancelToken | None = None

    def apply(self, *options: Option) -> RequestBuilder:
        for option in options:
            option(self)
        return self

    def with_method(self, value: str | HttpMethod) -> RequestBuilder:
        self.method = str(value).upper()
        return self

    def with_protocol(self, value: str) -> RequestBuilder:
        self.protocol = value
        return self

    def with_path(self, value: str) -> RequestBuilder:
        self.path = value
        return self

    def add_param(self, key: str, value: Any) -> RequestBuilder:
        self.params[key] = str(value)
        return self

    def add_header(self, key: str, value: Any) -> RequestBuilder:
        self._append_header(key, str(value))
        return self

    def set_headers(self, values: Any) -> RequestBuilder:
        try:
            self.headers = coerce_headers(values)
        except UnicodeEncodeError as exc:
            raise RequestBuildError(f"header values must be ASCII: {exc}") from exc
        return self

    def add_query(self, key: str, value: Any) -> RequestBuilder:
        self.queries.setdefault(key, []).append(str(value))
        return self

    def with_encoder(self, encoder: EncoderFunc) -> RequestBuilder:
        self.encoder = encoder
        return self

    def with_body(self, value: Any) -> RequestBuilder:
        self.body = value
        return self

    def with_cancel_token(self, token: CancelToken | None) -> RequestBuilder:
        self.cancel_token = token
        return self

    def with_encoded_body(self, value: Any, encoder: EncoderFunc, content_type: str) -> RequestBuilder:
        """Set body and encoder together, replacing any existing Content-Type."""
        self.body = value
        self.encoder = encoder
        self.headers["Content-Type"] = content_type
        return self

    def _append_header(self, key: str, value: str) -> None:
        pairs = list(self.headers.multi_items())
        pairs.append((key, value))
        try:
            self.headers = httpx.Headers(pairs)
        except UnicodeEncodeError as exc:
            raise RequestBuildError(f"header {key!r} must be ASCII, got {value!r}") from exc

    def resolve_path(self) -> str:
        """Substitute ``:name`` placeholders of registered params; unknown names are left as-is."""
        names = sorted((name for name in self.params if name), key=len, reverse=True)
        if not names:
            return self.path
        pattern = re.compile(":(" + "|".join(re.escape(name) for name in names) + ")(?![A-Za-z0-9_])")
        return pattern.sub(lambda match: quote(self.params[match.group(1)], safe=""), self.path)

    def query_string(self) -> str:
        pairs = [(key, value) for key, values in self.queries.items() for value in values]
        return urlencode(pairs)

    def url(self) -> str:
        host = (self.host or "").strip()
        if not host:
            raise RequestBuildError("host is empty")
        if "://" in host:
            raise RequestBuildError(f"host {host!r} must not include a scheme; use protocol() instead")
        if not _SCHEME_RE.match(self.protocol or ""):
            raise RequestBuildError(f"invalid protocol {self.protocol!r}")

        resolved = self.resolve_path()
        if resolved and not resolved.startswith("/"):
            resolved = "/" + resolved
        url = f"{self.protocol}://{host.rstrip('/')}{resolved}"
        query = self.query_string()
        if query:
            url = f"{url}?{query}"

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise RequestBuildError(f"invalid url {url!r}: {exc}") from exc
        if not parsed.host:
            raise RequestBuildError(f"invalid url {url!r}: missing host")
        return url

    def build(self) -> HttpRequest:
        url = self.url()
        content = self.encoder(self.body) if self.body is not None else None
        return HttpRequest(
            url=url,
            method=self.method,
            headers=self.headers.copy(),
            content=content,
            cancel_token=self.cancel_token,
        )


def new_builder(host: str, *options: Option) -> RequestBuilder:
    """Create a builder for ``host`` with ``options`` applied in order."""
    return RequestBuilder(host).apply(*options)


def build_request(host: str, *options: Option) -> HttpRequest:
    """Apply ``options`` to a fresh builder and render the request."""
    return new_builder(host, *options).build()


def method(value: str | HttpMethod) -> Option:
    return lambda b: b.with_method(value)


def protocol(value: str) -> Option:
    return lambda b: b.with_protocol(value)


def path(value: str) -> Option:
    """
    Set the request path. Use ``:name`` for path params:

        path("/:user_id/address/:address_id"), param("user_id", 123), param("address_id", 2)
    """
    return lambda b: b.with_path(value)


def param(key: str, value: Any) -> Option:
    return lambda b: b.add_param(key, value)


def params(values: dict[str, Any]) -> Option:
    def apply(b: RequestBuilder) -> None:
        for key, value in values.items():
            b.add_param(key, value)

    return apply


def header(key: str, value: Any) -> Option:
    """Append a header value; repeated names keep every value in order. Values must be ASCII."""
    return lambda b: b.add_header(key, value)


def headers(values: Any) -> Option:
    """Replace the whole header set."""
    return lambda b: b.set_headers(values)


def query(key: str, value: Any) -> Option:
    return lambda b: b.add_query(key, value)


def queries(values: Any) -> Option:
    """Append every query value; mapping values may be lists."""
    pairs = list(iter_pairs(values))

    def apply(b: RequestBuilder) -> None:
        for key, value in pairs:
            b.add_query(key, value)

    return apply


def encoder(func: EncoderFunc) -> Option:
    return lambda b: b.with_encoder(func)


def body(value: Any) -> Option:
    """Set the body; it is encoded with the current encoder (JSON by default)."""
    return lambda b: b.with_body(value)


def string(value: str | bytes) -> Option:
    return lambda b: b.with_encoded_body(value, string_encoder, TEXT_CONTENT_TYPE)


def json(value: Any) -> Option:
    """Set a JSON body and ``Content-Type: application/json``."""
    return lambda b: b.with_encoded_body(value, json_encoder, JSON_CONTENT_TYPE)


def xml(value: Any) -> Option:
    """Set an XML body and ``Content-Type: application/xml``."""
    return lambda b: b.with_encoded_body(value, xml_encoder, XML_CONTENT_TYPE)


def cancel_token(token: CancelToken | None) -> Option:
    return lambda b: b.with_cancel_token(token)


__all__ = [
    "Option",
    "RequestBuilder",
    "body",
    "build_request",
    "cancel_token",
    "encoder",
    "header",
    "headers",
    "json",
    "method",
    "new_builder",
    "param",
    "params",
    "path",
    "protocol",
    "queries",
    "query",
    "string",
    "xml",
]
