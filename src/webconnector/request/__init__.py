# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request building: option functions, encoders and the RequestBuilder."""

from .builder import (
    Option,
    RequestBuilder,
    body,
    build_request,
    cancel_token,
    encoder,
    header,
    headers,
    json,
    method,
    new_builder,
    param,
    params,
    path,
    protocol,
    queries,
    query,
    string,
    xml,
)
from .encoders import EncoderFunc, json_encoder, string_encoder, xml_encoder
from .methods import HttpMethod

__all__ = [
    "EncoderFunc",
    "HttpMethod",
    "Option",
    "RequestBuilder",
    "body",
    "build_request",
    "cancel_token",
    "encoder",
    "header",
    "headers",
    "json",
    "json_encoder",
    "method",
    "new_builder",
    "param",
    "params",
    "path",
    "protocol",
    "queries",
    "query",
    "string",
    "string_encoder",
    "xml",
    "xml_encoder",
]
