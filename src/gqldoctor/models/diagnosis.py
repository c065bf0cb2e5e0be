# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Diagnosis model and taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DiagnosisCategory(str, Enum):
    AUTH = "AUTH"
    NOT_FOUND = "NOT_FOUND"
    CORS = "CORS"
    TRANSPORT = "TRANSPORT"
    SCHEMA = "SCHEMA"
    UNKNOWN = "UNKNOWN"


class DiagnosisKind(str, Enum):
    """Finer-grained error taxonomy; each kind belongs to exactly one category."""

    AUTH_REQUIRED = "AuthRequired"
    NOT_FOUND = "NotFound"
    CORS_MISSING = "CorsMissing"
    TRANSPORT_UNREACHABLE = "TransportUnreachable"
    SCHEMA_UNREADABLE = "SchemaUnreadable"
    SCHEMA_INVALID = "SchemaInvalid"
    UNCLASSIFIED = "Unclassified"


KIND_CATEGORIES: dict[DiagnosisKind, DiagnosisCategory] = {
    DiagnosisKind.AUTH_REQUIRED: DiagnosisCategory.AUTH,
    DiagnosisKind.NOT_FOUND: DiagnosisCategory.NOT_FOUND,
    DiagnosisKind.CORS_MISSING: DiagnosisCategory.CORS,
    DiagnosisKind.TRANSPORT_UNREACHABLE: DiagnosisCategory.TRANSPORT,
    DiagnosisKind.SCHEMA_UNREADABLE: DiagnosisCategory.SCHEMA,
    DiagnosisKind.SCHEMA_INVALID: DiagnosisCategory.SCHEMA,
    DiagnosisKind.UNCLASSIFIED: DiagnosisCategory.UNKNOWN,
}

# Categories after which no further request can tell us anything new.
BLOCKING_CATEGORIES = frozenset({DiagnosisCategory.TRANSPORT, DiagnosisCategory.UNKNOWN})


@dataclass(frozen=True)
class Diagnosis:
    message: str
    category: DiagnosisCategory
    kind: DiagnosisKind
    probe: str | None = None

    @classmethod
    def of(cls, kind: DiagnosisKind, message: str, *, probe: str | None = None) -> Diagnosis:
        return cls(message=message, category=KIND_CATEGORIES[kind], kind=kind, probe=probe)

    @property
    def is_blocking(self) -> bool:
        return self.category in BLOCKING_CATEGORIES

    def with_probe(self, probe: str) -> Diagnosis:
        if self.probe == probe:
            return self
        return Diagnosis(message=self.message, category=self.category, kind=self.kind, probe=probe)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "category": self.category.value,
            "kind": self.kind.value,
            "probe": self.probe,
        }
