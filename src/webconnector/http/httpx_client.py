# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory, TransportError, categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        headers = httpx.Headers(request.headers)
        if "User-Agent" not in headers:
            headers["User-Agent"] = self.settings.user_agent

        token = request.cancel_token
        if token is not None:
            token.raise_if_cancelled()

        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        logger.debug("%s %s", request.method, request.url)
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.content,
                timeout=self.settings.timeout,
                follow_redirects=self.settings.allow_redirects,
            ) as resp:
                content = bytearray()
                for chunk in resp.iter_bytes():
                    if token is not None:
                        token.raise_if_cancelled()
                    if not chunk:
                        continue
                    if len(content) + len(chunk) > max_body_bytes:
                        logger.debug("Body of %s exceeds %d bytes", request.url, max_body_bytes)
                        raise TransportError(
                            f"response body of {request.url} exceeds {max_body_bytes} bytes",
                            ErrorCategory.BODY_TOO_LARGE,
                        )
                    content.extend(chunk)
        except (httpx.HTTPError, OSError) as exc:
            raise TransportError(str(exc), categorize_exception(exc)) from exc

        return HttpResponse(
            status_code=resp.status_code,
            headers=httpx.Headers(resp.headers),
            content=bytes(content),
            url=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()
