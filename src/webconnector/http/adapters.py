# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport adapters for tests and offline use."""

from __future__ import annotations

from ..errors import ErrorCategory, TransportError
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests.

    Responses are looked up by ``(method, url)`` first, then by ``url`` alone.
    A registered exception is raised instead of returning a response.
    """

    def __init__(self, responses: dict[object, HttpResponse | Exception] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []

    def add(self, url: str, response: HttpResponse | Exception, *, method: str | None = None) -> None:
        key: object = (method.upper(), url) if method else url
        self._responses[key] = response

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if request.cancel_token is not None:
            request.cancel_token.raise_if_cancelled()
        for key in ((request.method, request.url), request.url):
            if key in self._responses:
                outcome = self._responses[key]
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise TransportError(f"No stubbed response configured for {request.method} {request.url}", ErrorCategory.CONNECTION_ERROR)

    def close(self) -> None:
        return None
