# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe base classes and context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..config import DiagnosticSettings
from ..http import HttpClient
from ..models import Diagnosis, Endpoint, ReportBuilder, TransportKind
from ..ws import WebSocketClient


@dataclass
class ProbeContext:
    endpoint: Endpoint
    origin: str
    http_client: HttpClient
    websocket_client: WebSocketClient
    settings: DiagnosticSettings = field(default_factory=DiagnosticSettings)


class Probe(ABC):
    """One network operation plus the rules that interpret its outcome."""

    name: str = "base"
    transport: TransportKind = TransportKind.HTTP
    priority: int = 50

    @abstractmethod
    def run(self, context: ProbeContext) -> list[Diagnosis]: ...

    def applies_to(self, endpoint: Endpoint) -> bool:
        return endpoint.transport_kind is self.transport

    def should_skip(self, state: ReportBuilder) -> bool:
        """Short-circuit predicate evaluated against the findings collected so far."""
        return state.has_blocking_problem

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(priority={self.priority})"
