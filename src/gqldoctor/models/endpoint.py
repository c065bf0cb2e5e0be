# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint model."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_WEBSOCKET_SCHEME_RE = re.compile(r"^wss?:", re.IGNORECASE)


class TransportKind(str, Enum):
    HTTP = "HTTP"
    WEBSOCKET = "WEBSOCKET"


@dataclass(frozen=True)
class Endpoint:
    """The endpoint under diagnosis; the transport kind follows the URL scheme."""

    url: str
    transport_kind: TransportKind

    @classmethod
    def from_url(cls, url: str) -> Endpoint:
        url = url.strip()
        kind = TransportKind.WEBSOCKET if _WEBSOCKET_SCHEME_RE.match(url) else TransportKind.HTTP
        return cls(url=url, transport_kind=kind)
