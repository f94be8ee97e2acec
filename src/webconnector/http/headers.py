# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Multi-value header/query normalization utilities.

Callers hand us header and query sets in many shapes: plain dicts, dicts of
lists, ``httpx.Headers``, or iterables of pairs. Everything is flattened to an
ordered list of ``(name, value)`` string pairs so repeated names keep their
registration order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import httpx


def _is_multi(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def iter_pairs(values: Any) -> Iterator[tuple[str, str]]:
    """
    Yield ``(name, value)`` pairs from a dict-like or pair-iterable container.

    Mapping values that are lists/tuples expand to one pair per element.
    """
    if not values:
        return
    if isinstance(values, httpx.Headers):
        for key, value in values.multi_items():
            yield key, value
        return

    items: Iterable[Any]
    if isinstance(values, Mapping):
        items = values.items()
    else:
        items = values

    for key, value in items:
        if key is None:
            continue
        name = str(key)
        if _is_multi(value):
            for item in value:
                yield name, str(item)
        else:
            yield name, "" if value is None else str(value)


def coerce_headers(values: Any) -> httpx.Headers:
    """Return a new ``httpx.Headers`` holding every pair of ``values`` in order."""
    return httpx.Headers(list(iter_pairs(values)))


__all__ = ["coerce_headers", "iter_pairs"]
