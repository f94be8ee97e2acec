# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Settings for the default httpx transport.

The request builder, responder and connector take all their configuration
programmatically; only HttpxClient reads the environment, through
``load_http_settings()`` at construction time. Unparsable values fall back to
the dataclass defaults instead of failing the import.
"""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"webconnector/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP transport defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("WEBCONNECTOR_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("WEBCONNECTOR_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("WEBCONNECTOR_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("WEBCONNECTOR_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("WEBCONNECTOR_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
