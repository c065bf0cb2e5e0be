# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Diagnostic report and its builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .diagnosis import Diagnosis, DiagnosisCategory
from .endpoint import Endpoint


@dataclass(frozen=True)
class Report:
    """Finished, read-only outcome of one diagnostic run."""

    endpoint: Endpoint
    origin: str
    diagnoses: tuple[Diagnosis, ...] = ()
    skipped_probes: tuple[str, ...] = ()

    @property
    def has_problem(self) -> bool:
        return bool(self.diagnoses)

    @property
    def has_cors_problem(self) -> bool:
        return any(d.category is DiagnosisCategory.CORS for d in self.diagnoses)

    def categories(self) -> list[DiagnosisCategory]:
        return [d.category for d in self.diagnoses]

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint.url,
            "transport": self.endpoint.transport_kind.value,
            "origin": self.origin,
            "has_problem": self.has_problem,
            "has_cors_problem": self.has_cors_problem,
            "diagnoses": [d.to_dict() for d in self.diagnoses],
            "skipped_probes": list(self.skipped_probes),
        }


class ReportAlreadyFinalized(RuntimeError):
    """Raised when a finalized ReportBuilder is modified or finalized again."""


@dataclass
class ReportBuilder:
    """
    Append-only accumulator for a single run.

    Diagnoses can only be added, never removed or replaced; ``finalize`` may be
    called exactly once and freezes the result into a Report.
    """

    endpoint: Endpoint
    origin: str
    _diagnoses: list[Diagnosis] = field(default_factory=list)
    _skipped: list[str] = field(default_factory=list)
    _finalized: bool = False

    def add(self, diagnosis: Diagnosis | None) -> None:
        self._ensure_open()
        if diagnosis is not None:
            self._diagnoses.append(diagnosis)

    def extend(self, diagnoses: list[Diagnosis]) -> None:
        for diagnosis in diagnoses:
            self.add(diagnosis)

    def mark_skipped(self, probe: str) -> None:
        self._ensure_open()
        self._skipped.append(probe)

    @property
    def diagnoses(self) -> tuple[Diagnosis, ...]:
        return tuple(self._diagnoses)

    @property
    def has_problem(self) -> bool:
        return bool(self._diagnoses)

    @property
    def has_blocking_problem(self) -> bool:
        return any(d.is_blocking for d in self._diagnoses)

    def finalize(self) -> Report:
        self._ensure_open()
        self._finalized = True
        return Report(
            endpoint=self.endpoint,
            origin=self.origin,
            diagnoses=tuple(self._diagnoses),
            skipped_probes=tuple(self._skipped),
        )

    def _ensure_open(self) -> None:
        if self._finalized:
            raise ReportAlreadyFinalized("report has already been finalized")
