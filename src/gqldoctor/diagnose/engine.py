# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Diagnostic orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import DiagnosticSettings, load_diagnostic_settings
from ..errors import describe_exception
from ..http import HttpClient, create_default_http_client
from ..models import Endpoint, Report, ReportBuilder
from ..ws import WebSocketClient, create_default_websocket_client
from .base import Probe, ProbeContext
from .classifier import unclassified
from .registry import PROBES

logger = logging.getLogger(__name__)


class DiagnosticEngine:
    """
    Runs the applicable probes for an endpoint, one at a time and in priority order.

    Each probe's ``should_skip`` predicate sees the findings collected so far, so
    short-circuiting is decided per probe rather than by nested branching here.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        websocket_client: WebSocketClient | None = None,
        probes: Sequence[Probe] | None = None,
        settings: DiagnosticSettings | None = None,
    ):
        self.http_client = http_client or create_default_http_client()
        self.websocket_client = websocket_client or create_default_websocket_client()
        self.probes = list(probes if probes is not None else PROBES)
        self.settings = settings or load_diagnostic_settings()

    def run(self, endpoint: Endpoint | str, origin: str | None = None) -> Report:
        if isinstance(endpoint, str):
            endpoint = Endpoint.from_url(endpoint)
        origin = origin or self.settings.origin
        context = ProbeContext(
            endpoint=endpoint,
            origin=origin,
            http_client=self.http_client,
            websocket_client=self.websocket_client,
            settings=self.settings,
        )
        builder = ReportBuilder(endpoint=endpoint, origin=origin)

        for probe in self.probes:
            if not probe.applies_to(endpoint):
                continue
            if probe.should_skip(builder):
                logger.debug("Skipping probe %s for %s", probe.name, endpoint.url)
                builder.mark_skipped(probe.name)
                continue
            logger.debug("Running probe %s against %s", probe.name, endpoint.url)
            builder.extend([d.with_probe(probe.name) for d in self._run_probe(probe, context)])

        return builder.finalize()

    @staticmethod
    def _run_probe(probe: Probe, context: ProbeContext):
        try:
            return probe.run(context)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Probe %s raised", probe.name, exc_info=True)
            return [unclassified(describe_exception(exc), source=probe.name)]
