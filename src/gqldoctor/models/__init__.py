# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for gqldoctor."""

from .diagnosis import Diagnosis, DiagnosisCategory, DiagnosisKind
from .endpoint import Endpoint, TransportKind
from .probe import ConnectionClosed, ProbeOutcome, ProbeSuccess, TransportFailure, outcome_from_response
from .report import Report, ReportAlreadyFinalized, ReportBuilder

__all__ = [
    "ConnectionClosed",
    "Diagnosis",
    "DiagnosisCategory",
    "DiagnosisKind",
    "Endpoint",
    "ProbeOutcome",
    "ProbeSuccess",
    "Report",
    "ReportAlreadyFinalized",
    "ReportBuilder",
    "TransportFailure",
    "TransportKind",
    "outcome_from_response",
]
