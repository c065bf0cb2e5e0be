# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Probe outcomes store
headers as plain lowercase-keyed dicts so the CORS checks can look them up
without caring which client produced them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers, websockets Headers (support `.raw_items()`/`.items()`)
    and iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping) and not hasattr(headers, "raw_items"):
        return headers

    for attr in ("raw_items", "items"):
        items = getattr(headers, attr, None)
        if callable(items):
            try:
                return dict(items())
            except (TypeError, ValueError):
                continue

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def normalize_headers(headers: Any) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        if isinstance(key, bytes):
            key = key.decode("latin-1")
        if isinstance(value, bytes):
            value = value.decode("latin-1")
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[str, str] | None, name: str) -> str | None:
    """
    Return a header value using case-insensitive key matching, or None when absent.

    Absent and empty headers are kept apart: CORS checks report them differently.
    """
    if not headers or not name:
        return None
    lower = name.lower()
    if lower in headers:
        return str(headers[lower]).strip()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return "" if value is None else str(value).strip()
    return None


__all__ = ["header_value", "normalize_headers"]
