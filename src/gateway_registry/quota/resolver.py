"""Resolve an account id to a normalized usage snapshot."""
from __future__ import annotations

import logging
import time

from gateway_registry.catalog.registry import normalize_channel
from gateway_registry.config import GatewayConfig
from gateway_registry.context import CallContext
from gateway_registry.errors import (
    InvalidInputError,
    NotFoundError,
    UnsupportedProviderError,
)
from gateway_registry.quota.adapter import UsageAdapter
from gateway_registry.quota.credentials import extract_token
from gateway_registry.quota.store import CredentialStore
from gateway_registry.quota.types import UsageSnapshot

logger = logging.getLogger(__name__)

# Account types served by another provider's adapter.
PROVIDER_ALIASES = {"amazonq": "kiro"}


class QuotaResolver:
    """Looks up a credential, picks the provider's adapter and fetches usage.

    Holds no per-request state, so one instance can serve concurrent callers.
    Nothing is retried: the first failure is raised to the caller.
    """

    def __init__(
        self,
        store: CredentialStore,
        adapters: dict[str, UsageAdapter] | None = None,
        config: GatewayConfig | None = None,
    ) -> None:
        self._store = store
        self._config = config or GatewayConfig()
        self._adapters: dict[str, UsageAdapter] = {}
        for name, adapter in (adapters or {}).items():
            self.register_adapter(name, adapter)

    @classmethod
    def with_default_adapters(
        cls,
        store: CredentialStore,
        config: GatewayConfig | None = None,
    ) -> QuotaResolver:
        """Create a resolver wired to the built-in Kiro and Copilot adapters."""
        from gateway_registry.quota.providers.copilot import CopilotUsageAdapter
        from gateway_registry.quota.providers.kiro import KiroUsageAdapter

        cfg = config or GatewayConfig.from_env()
        kiro = KiroUsageAdapter(cfg)
        copilot = CopilotUsageAdapter(cfg)
        return cls(store, {kiro.name: kiro, copilot.name: copilot}, cfg)

    def register_adapter(self, provider: str, adapter: UsageAdapter) -> None:
        """Register an adapter for a provider type."""
        self._adapters[normalize_channel(provider)] = adapter

    @property
    def adapters(self) -> dict[str, UsageAdapter]:
        """Return a copy of the registered adapters."""
        return dict(self._adapters)

    def resolve_usage(
        self,
        account_id: str,
        context: CallContext | None = None,
    ) -> UsageSnapshot:
        """Return the usage snapshot for *account_id*.

        *context* is the inbound request's context; the adapter runs under a
        child bounded by ``config.request_timeout``, so a caller that aborts
        or runs out of time stops the outbound calls too.
        """
        if not account_id or not account_id.strip():
            raise InvalidInputError("auth_id is required")

        record = self._store.get_by_id(account_id)
        if record is None:
            raise NotFoundError(f"auth not found: {account_id}")

        extract_token(record.metadata)
        adapter = self._resolve_adapter(record.provider)
        credentials = adapter.parse_credentials(record.metadata)

        parent = context or CallContext.background()
        call_ctx = parent.with_timeout(self._config.request_timeout)

        logger.debug("quota: resolving %s via %s", account_id, adapter.name)
        start = time.monotonic()
        snapshot = adapter.fetch_usage(credentials, call_ctx)
        logger.debug(
            "quota: resolved %s in %.2fs (plan=%s)",
            account_id,
            time.monotonic() - start,
            snapshot.plan_label,
        )
        return snapshot

    def close(self) -> None:
        """Close all adapters."""
        for adapter in self._adapters.values():
            if hasattr(adapter, "close"):
                adapter.close()

    def _resolve_adapter(self, provider: str) -> UsageAdapter:
        key = normalize_channel(provider or "")
        key = PROVIDER_ALIASES.get(key, key)
        adapter = self._adapters.get(key)
        if adapter is None:
            raise UnsupportedProviderError(provider)
        return adapter
