"""HTTP client wrapper around httpx."""
from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import Any

import httpx

from gateway_registry.context import CallContext
from gateway_registry.errors import (
    AbortError,
    MalformedUpstreamResponseError,
    NetworkError,
    RequestTimeoutError,
    UpstreamRejectedError,
)


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: Any
    headers: dict[str, str]
    raw_text: str = ""


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps failures into gateway errors.

    Every call takes a :class:`CallContext`; the time left on it becomes the
    per-request timeout. Nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        *,
        provider: str = "",
        timeout: float = 30.0,
        proxy_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._provider = provider
        self._default_timeout = timeout
        kwargs: dict[str, Any] = {
            "base_url": base_url,
            "headers": headers or {},
            "timeout": httpx.Timeout(timeout),
        }
        if transport is not None:
            kwargs["transport"] = transport
        elif proxy_url:
            kwargs["proxy"] = proxy_url
        self._client = httpx.Client(**kwargs)

    def get(
        self,
        path: str,
        *,
        context: CallContext | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Send a GET request and return the parsed response."""
        return self._send("GET", path, context=context, headers=headers)

    def post(
        self,
        path: str,
        *,
        json: dict[str, Any],
        context: CallContext | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Send a POST request and return the parsed response.

        The body is serialized here rather than by httpx so that a provider
        specific ``content-type`` header is left untouched.
        """
        content = _json.dumps(json).encode("utf-8")
        return self._send("POST", path, context=context, headers=headers, content=content)

    def _send(
        self,
        method: str,
        path: str,
        *,
        context: CallContext | None,
        headers: dict[str, str] | None,
        content: bytes | None = None,
    ) -> HttpResponse:
        ctx = context or CallContext.background()
        ctx.raise_if_done()
        left = ctx.remaining()
        timeout = self._default_timeout if left is None else min(left, self._default_timeout)

        try:
            resp = self._client.request(
                method,
                path,
                content=content,
                headers=headers or {},
                timeout=httpx.Timeout(timeout),
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"request failed: {exc}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"request failed: {exc}", cause=exc) from exc

        # The signal may have fired while the request was in flight.
        if ctx.signal.aborted:
            raise AbortError("operation aborted by caller")

        raw_text = resp.text
        if resp.status_code != 200:
            raise UpstreamRejectedError(
                resp.status_code, raw_text, provider=self._provider
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise MalformedUpstreamResponseError(
                f"failed to parse response: {exc}", cause=exc
            ) from exc

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=dict(resp.headers),
            raw_text=raw_text,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
