# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for gqldoctor."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "GQLDOCTOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Transport libraries log every request/frame at INFO/DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore", "websockets")


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument, then environment) to a logging constant."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> int:
    """Configure standard logging for CLI/library use and return the effective level."""
    effective_level = resolve_log_level(level)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if effective_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(effective_level, logging.WARNING))
    return effective_level


__all__ = ["resolve_log_level", "setup_logging"]
