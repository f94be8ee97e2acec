# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .connector import Connector, ConnectorConfig, Option, ResponseHandler, with_general, with_path, with_paths

__all__ = [
    "Connector",
    "ConnectorConfig",
    "Option",
    "ResponseHandler",
    "with_general",
    "with_path",
    "with_paths",
]
