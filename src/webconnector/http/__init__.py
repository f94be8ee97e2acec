# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import coerce_headers, iter_pairs
from .httpx_client import HttpxClient
from .models import HttpRequest, HttpResponse

__all__ = [
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "coerce_headers",
    "create_default_http_client",
    "iter_pairs",
]
