# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("user-agent", self.settings.user_agent)
        max_body_bytes = self.settings.max_body_bytes
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            kind = categorize_exception(exc)
            logger.debug("%s %s failed: %s (%s)", request.method, request.url, exc, kind.value)
            return HttpResponse.failure(exc, kind)

        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            text=text,
            url=str(resp.url),
            meta={
                "body_truncated": truncated,
                "body_bytes_read": len(content),
                "body_bytes_limit": max_body_bytes,
            },
        )

    def close(self) -> None:
        self._client.close()
