"""Kiro / Amazon Q usage adapter (AWS CodeWhisperer JSON-RPC)."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import httpx

from gateway_registry._http import HttpClient
from gateway_registry.config import GatewayConfig
from gateway_registry.context import CallContext
from gateway_registry.errors import (
    AbortError,
    DiscoveryFailedError,
    GatewayError,
    MalformedUpstreamResponseError,
)
from gateway_registry.quota.credentials import KiroCredentials
from gateway_registry.quota.types import QuotaCategory, UsageSnapshot

logger = logging.getLogger(__name__)

TARGET_GET_USAGE = "AmazonCodeWhispererService.GetUsageLimits"
TARGET_LIST_PROFILES = "AmazonCodeWhispererService.ListProfiles"

USAGE_ORIGIN = "AI_EDITOR"
USAGE_RESOURCE_TYPE = "AGENTIC_REQUEST"


class KiroUsageAdapter:
    """Adapter for CodeWhisperer usage limits.

    The usage call wants a profile ARN. When the credential lacks one the
    adapter first lists the account's profiles and uses the first; a failed
    listing is logged and the usage call goes ahead without an ARN.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        cfg = config or GatewayConfig()
        self._http = HttpClient(
            cfg.kiro_endpoint,
            headers={
                "content-type": "application/x-amz-json-1.0",
                "accept": "application/json",
            },
            provider=self.name,
            timeout=cfg.request_timeout,
            proxy_url=cfg.proxy_url,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "kiro"

    def parse_credentials(self, metadata: Mapping[str, Any]) -> KiroCredentials:
        return KiroCredentials.from_metadata(metadata)

    # ------------------------------------------------------------------
    # Wire calls
    # ------------------------------------------------------------------

    def _call(
        self,
        target: str,
        access_token: str,
        payload: dict[str, Any],
        context: CallContext,
    ) -> Any:
        resp = self._http.post(
            "/",
            json=payload,
            context=context,
            headers={
                "x-amz-target": target,
                "authorization": f"Bearer {access_token}",
            },
        )
        return resp.body

    def list_profiles(self, access_token: str, context: CallContext) -> list[str]:
        """Return the profile ARNs visible to the token.

        Any failure other than caller cancellation is raised as
        :class:`DiscoveryFailedError`.
        """
        try:
            body = self._call(TARGET_LIST_PROFILES, access_token, {}, context)
        except AbortError:
            raise
        except GatewayError as exc:
            raise DiscoveryFailedError(f"failed to list profiles: {exc}", cause=exc) from exc

        profiles = body.get("profiles") if isinstance(body, dict) else None
        if profiles is None:
            return []
        if not isinstance(profiles, list):
            raise DiscoveryFailedError("failed to parse profiles response: profiles is not a list")

        arns: list[str] = []
        for profile in profiles:
            arn = profile.get("profileArn") if isinstance(profile, dict) else None
            if isinstance(arn, str) and arn:
                arns.append(arn)
        return arns

    def get_usage_limits(
        self,
        access_token: str,
        profile_arn: str | None,
        context: CallContext,
    ) -> dict[str, Any]:
        """Fetch the raw usage-limits payload."""
        payload: dict[str, Any] = {
            "origin": USAGE_ORIGIN,
            "resourceType": USAGE_RESOURCE_TYPE,
        }
        if profile_arn:
            payload["profileArn"] = profile_arn

        body = self._call(TARGET_GET_USAGE, access_token, payload, context)
        if not isinstance(body, dict):
            raise MalformedUpstreamResponseError(
                "failed to parse usage response: expected a JSON object"
            )
        return body

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def fetch_usage(self, credentials: KiroCredentials, context: CallContext) -> UsageSnapshot:
        profile_arn = credentials.profile_arn
        if not profile_arn:
            try:
                arns = self.list_profiles(credentials.access_token, context)
            except DiscoveryFailedError as exc:
                logger.warning("kiro quota: %s", exc)
            else:
                if arns:
                    profile_arn = arns[0]
                    logger.debug("kiro quota: resolved profile ARN: %s", profile_arn)

        body = self.get_usage_limits(credentials.access_token, profile_arn, context)
        return self._normalize(body)

    # ------------------------------------------------------------------
    # Response translation
    # ------------------------------------------------------------------

    def _normalize(self, body: dict[str, Any]) -> UsageSnapshot:
        subscription = body.get("subscriptionInfo") or {}
        title = subscription.get("subscriptionTitle") if isinstance(subscription, dict) else None

        used = 0.0
        limit = 0.0
        categories: tuple[QuotaCategory, ...] = ()

        # Only the first breakdown entry is surfaced.
        breakdown = body.get("usageBreakdownList") or []
        if not isinstance(breakdown, list):
            raise MalformedUpstreamResponseError(
                "failed to parse usage response: usageBreakdownList is not a list"
            )
        if breakdown:
            first = breakdown[0]
            if not isinstance(first, dict):
                raise MalformedUpstreamResponseError(
                    "failed to parse usage response: usageBreakdownList[0] is not an object"
                )
            used = _number(first.get("currentUsageWithPrecision"), "currentUsageWithPrecision")
            limit = _number(first.get("usageLimitWithPrecision"), "usageLimitWithPrecision")
            name = first.get("resourceType")
            categories = (
                QuotaCategory(
                    name=name.lower() if isinstance(name, str) and name else "credits",
                    used=used,
                    limit=limit,
                    remaining=max(limit - used, 0.0),
                ),
            )

        reset = _number(body.get("nextDateReset"), "nextDateReset")
        return UsageSnapshot(
            provider=self.name,
            plan_label=title if isinstance(title, str) else "",
            current_usage=used,
            usage_limit=limit,
            reset_at=_parse_reset(reset),
            categories=categories,
            raw=body,
        )

    def close(self) -> None:
        self._http.close()


def _number(value: Any, field: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedUpstreamResponseError(
            f"failed to parse usage response: {field} is not a number"
        )
    return float(value)


def _parse_reset(seconds: float) -> datetime | None:
    if seconds <= 0:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        logger.debug("kiro quota: nextDateReset out of range: %r", seconds)
        return None
