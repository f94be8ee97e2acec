# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cancellation tokens.

A token is attached to a request by the builder. Cancelling it only has an
effect when the transport checks it while the call is in flight.
"""

from __future__ import annotations

import threading

from .errors import RequestCancelledError


class CancelToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise RequestCancelledError(self._reason or "request cancelled")

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancelled})"


__all__ = ["CancelToken"]
