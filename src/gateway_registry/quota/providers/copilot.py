"""GitHub Copilot usage adapter."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import httpx

from gateway_registry._http import HttpClient
from gateway_registry.config import GatewayConfig
from gateway_registry.context import CallContext
from gateway_registry.errors import MalformedUpstreamResponseError
from gateway_registry.quota.credentials import CopilotCredentials
from gateway_registry.quota.types import QuotaCategory, UsageSnapshot

logger = logging.getLogger(__name__)

USER_ENDPOINT = "/copilot_internal/user"

# Reported categories, most significant first.
CATEGORY_ORDER = ("premium_interactions", "chat", "completions")


class CopilotUsageAdapter:
    """Adapter for the Copilot per-user quota endpoint.

    The endpoint rejects callers that do not identify as a first-party
    editor plugin, so every request carries the configured client signature.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        cfg = config or GatewayConfig()
        sig = cfg.copilot_signature
        self._http = HttpClient(
            cfg.github_api_base_url,
            headers={
                "accept": "application/json",
                "user-agent": sig.user_agent,
                "editor-version": sig.editor_version,
                "editor-plugin-version": sig.editor_plugin_version,
                "x-github-api-version": sig.api_version,
            },
            provider=self.name,
            timeout=cfg.request_timeout,
            proxy_url=cfg.proxy_url,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "github-copilot"

    def parse_credentials(self, metadata: Mapping[str, Any]) -> CopilotCredentials:
        return CopilotCredentials.from_metadata(metadata)

    def fetch_usage(self, credentials: CopilotCredentials, context: CallContext) -> UsageSnapshot:
        resp = self._http.get(
            USER_ENDPOINT,
            context=context,
            headers={"authorization": f"token {credentials.access_token}"},
        )
        if not isinstance(resp.body, dict):
            raise MalformedUpstreamResponseError(
                "failed to parse response: expected a JSON object"
            )
        return self._normalize(resp.body)

    # ------------------------------------------------------------------
    # Response translation
    # ------------------------------------------------------------------

    def _normalize(self, body: dict[str, Any]) -> UsageSnapshot:
        snapshots = body.get("quota_snapshots") or {}
        if not isinstance(snapshots, dict):
            raise MalformedUpstreamResponseError(
                "failed to parse response: quota_snapshots is not an object"
            )

        names = [n for n in CATEGORY_ORDER if n in snapshots]
        names += [n for n in snapshots if n not in CATEGORY_ORDER]
        categories = tuple(_category(name, snapshots[name]) for name in names)

        primary = categories[0] if categories else None
        plan = body.get("copilot_plan") or body.get("access_type_sku") or ""

        return UsageSnapshot(
            provider=self.name,
            plan_label=plan if isinstance(plan, str) else "",
            current_usage=primary.used if primary else 0.0,
            usage_limit=primary.limit if primary else 0.0,
            percent_remaining=primary.percent_remaining if primary else None,
            reset_at=_parse_reset(body.get("quota_reset_date")),
            categories=categories,
            raw=body,
        )

    def close(self) -> None:
        self._http.close()


def _category(name: str, detail: Any) -> QuotaCategory:
    if not isinstance(detail, dict):
        raise MalformedUpstreamResponseError(
            f"failed to parse response: quota_snapshots.{name} is not an object"
        )
    entitlement = _number(detail.get("entitlement"), name)
    remaining = _number(detail.get("remaining"), name)
    percent = detail.get("percent_remaining")
    return QuotaCategory(
        name=name,
        used=max(entitlement - remaining, 0.0),
        limit=entitlement,
        remaining=remaining,
        percent_remaining=_number(percent, name) if percent is not None else None,
        unlimited=bool(detail.get("unlimited", False)),
        overage_count=_number(detail.get("overage_count"), name),
        overage_permitted=bool(detail.get("overage_permitted", False)),
    )


def _number(value: Any, where: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedUpstreamResponseError(
            f"failed to parse response: non-numeric quota field in {where}"
        )
    return float(value)


def _parse_reset(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("copilot quota: unparseable quota_reset_date %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
