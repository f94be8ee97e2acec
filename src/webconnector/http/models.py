# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models exchanged with HttpClient implementations."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, BinaryIO

import httpx

if TYPE_CHECKING:
    from ..cancel import CancelToken


@dataclass
class HttpRequest:
    """Fully rendered request handed to the transport."""

    url: str
    method: str = "GET"
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes | None = None
    cancel_token: CancelToken | None = None

    def body(self) -> BinaryIO:
        """Return a fresh stream over the encoded body (empty when there is none)."""
        return io.BytesIO(self.content or b"")


@dataclass
class HttpResponse:
    """HTTP response as returned by a transport."""

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""
    url: str | None = None
    stream: BinaryIO | None = None

    def body(self) -> BinaryIO:
        """
        Return the readable body stream.

        Transports that hand back a live stream set ``stream``; otherwise the
        buffered ``content`` is wrapped.
        """
        if self.stream is not None:
            return self.stream
        return io.BytesIO(self.content)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
