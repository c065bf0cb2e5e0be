# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""websockets-backed WebSocketClient implementation."""

from __future__ import annotations

import logging
import ssl
import time
from collections.abc import Callable
from typing import Any

from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK, InvalidStatus, WebSocketException
from websockets.sync.client import connect as ws_connect
from websockets.typing import Origin, Subprotocol

from ..config import WebSocketSettings, load_websocket_settings
from ..errors import TransportErrorKind, categorize_exception, describe_exception
from ..models.probe import ConnectionClosed, ProbeOutcome, TransportFailure
from .client import WebSocketClient

logger = logging.getLogger(__name__)


def _close_details(exc: ConnectionClosedOK | ConnectionClosedError) -> tuple[int | None, str]:
    frame = exc.rcvd or exc.sent
    if frame is None:
        return None, ""
    return frame.code, frame.reason


class WebsocketsClient(WebSocketClient):
    """Synchronous websockets client that resolves one connection attempt into a ProbeOutcome."""

    def __init__(
        self,
        settings: WebSocketSettings | None = None,
        connector: Callable[..., Any] | None = None,
    ):
        self.settings = settings or load_websocket_settings()
        self._connect = connector or ws_connect

    def _connect_kwargs(self, url: str, origin: str) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "origin": Origin(origin),
            "open_timeout": self.settings.open_timeout,
            "close_timeout": self.settings.open_timeout,
            "user_agent_header": self.settings.user_agent,
        }
        if self.settings.subprotocols:
            kwargs["subprotocols"] = [Subprotocol(p) for p in self.settings.subprotocols]
        if url.lower().startswith("wss:") and not self.settings.verify_ssl:
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
            kwargs["ssl"] = context
        return kwargs

    def connect(self, url: str, origin: str) -> ProbeOutcome:
        try:
            connection = self._connect(url, **self._connect_kwargs(url, origin))
        except InvalidStatus as exc:
            status = exc.response.status_code
            logger.debug("WebSocket upgrade to %s rejected with HTTP %s", url, status)
            return TransportFailure(
                kind=TransportErrorKind.HANDSHAKE_REJECTED,
                message=str(exc),
                error_type=type(exc).__name__,
                status_code=status,
            )
        except (OSError, WebSocketException) as exc:
            kind = categorize_exception(exc)
            logger.debug("WebSocket connect to %s failed: %s (%s)", url, exc, kind.value)
            return TransportFailure(kind=kind, message=describe_exception(exc), error_type=type(exc).__name__)

        with connection:
            return self._await_close(connection)

    def _await_close(self, connection: Any) -> ProbeOutcome:
        deadline = time.monotonic() + self.settings.close_wait
        try:
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                connection.recv(timeout=remaining)
        except TimeoutError:
            pass
        except ConnectionClosedOK as exc:
            code, reason = _close_details(exc)
            return ConnectionClosed(close_code=code, reason=reason)
        except ConnectionClosedError as exc:
            # A received close frame is a close, whatever its code (e.g. graphql-ws 4406/4408).
            if exc.rcvd is not None:
                return ConnectionClosed(close_code=exc.rcvd.code, reason=exc.rcvd.reason)
            code, reason = _close_details(exc)
            return TransportFailure(
                kind=TransportErrorKind.ABNORMAL_CLOSURE,
                message=reason or str(exc),
                error_type=type(exc).__name__,
                close_code=code,
            )
        except OSError as exc:
            return TransportFailure(
                kind=TransportErrorKind.ABNORMAL_CLOSURE,
                message=describe_exception(exc),
                error_type=type(exc).__name__,
            )
        logger.debug("WebSocket stayed open for %.1fs without closing; treating as reachable", self.settings.close_wait)
        return ConnectionClosed(idle=True)

    def close(self) -> None:
        return None
