# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging helpers for webconnector.

Every module logs through ``logging.getLogger(__name__)`` below the
``webconnector`` logger, and only at DEBUG: the transport logs each request
line and body-limit hits, the responder logs unmapped statuses and parser
failures, the connector logs send/dispatch. A NullHandler keeps the library
silent until the application configures logging.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "webconnector"
DEFAULT_LOG_LEVEL = os.getenv("WEBCONNECTOR_LOG_LEVEL", "WARNING").upper()

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(level: str | None = None) -> None:
    """
    Configure stderr logging and the ``webconnector`` logger level.

    ``setup_logging("debug")`` is the quickest way to see every request the
    connector builds and sends.
    """
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(LOGGER_NAME).setLevel(effective_level)


__all__ = ["LOGGER_NAME", "setup_logging"]
