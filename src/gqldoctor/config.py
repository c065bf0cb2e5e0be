# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for gqldoctor."""

import os
from dataclasses import dataclass, field

from .version import __version__

DEFAULT_USER_AGENT = f"gqldoctor/{__version__}"
DEFAULT_ORIGIN = "https://studio.apollographql.com"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _positive(value: float, default: float) -> float:
    return value if value > 0 else default


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 4 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("GQLDOCTOR_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_positive(_float_env("GQLDOCTOR_HTTP_TIMEOUT", cls.timeout), cls.timeout),
            user_agent=os.getenv("GQLDOCTOR_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("GQLDOCTOR_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("GQLDOCTOR_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class WebSocketSettings:
    """WebSocket probe defaults.

    ``open_timeout`` bounds the opening handshake. ``close_wait`` bounds how long
    the probe waits for the server to close or fail an established connection;
    a connection that stays open and quiet for that long counts as reachable.
    """

    open_timeout: float = 10.0
    close_wait: float = 5.0
    subprotocols: tuple[str, ...] = field(default_factory=tuple)
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "WebSocketSettings":
        return cls(
            open_timeout=_positive(_float_env("GQLDOCTOR_HTTP_TIMEOUT", cls.open_timeout), cls.open_timeout),
            close_wait=_positive(_float_env("GQLDOCTOR_WS_CLOSE_WAIT", cls.close_wait), cls.close_wait),
            subprotocols=_list_env("GQLDOCTOR_WS_SUBPROTOCOLS", ()),
            verify_ssl=_bool_env("GQLDOCTOR_HTTP_VERIFY_SSL", cls.verify_ssl),
            user_agent=os.getenv("GQLDOCTOR_USER_AGENT", cls.user_agent),
        )


@dataclass
class DiagnosticSettings:
    """Settings for a diagnostic run."""

    origin: str = DEFAULT_ORIGIN
    max_quoted_body: int = 2048

    @classmethod
    def from_env(cls) -> "DiagnosticSettings":
        max_quoted_body = _int_env("GQLDOCTOR_MAX_QUOTED_BODY", cls.max_quoted_body)
        if max_quoted_body <= 0:
            max_quoted_body = cls.max_quoted_body
        return cls(
            origin=os.getenv("GQLDOCTOR_ORIGIN") or cls.origin,
            max_quoted_body=max_quoted_body,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings.from_env()


def load_diagnostic_settings() -> DiagnosticSettings:
    return DiagnosticSettings.from_env()
