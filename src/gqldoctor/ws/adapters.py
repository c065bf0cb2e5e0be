# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable WebSocketClient for tests."""

from __future__ import annotations

from ..models.probe import ConnectionClosed, ProbeOutcome
from .client import WebSocketClient


class StubWebSocketClient(WebSocketClient):
    """Returns a fixed outcome (or raises a fixed exception) and records each attempt."""

    def __init__(self, outcome: ProbeOutcome | BaseException | None = None):
        self.outcome = outcome if outcome is not None else ConnectionClosed()
        self.attempts: list[tuple[str, str]] = []
        self.closed = False

    def connect(self, url: str, origin: str) -> ProbeOutcome:
        self.attempts.append((url, origin))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    def close(self) -> None:
        self.closed = True
