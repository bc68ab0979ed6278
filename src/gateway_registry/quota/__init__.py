"""Quota normalization: credentials in, usage snapshots out."""
from __future__ import annotations

from gateway_registry.quota.adapter import StubUsageAdapter, UsageAdapter
from gateway_registry.quota.credentials import (
    CopilotCredentials,
    KiroCredentials,
    extract_token,
)
from gateway_registry.quota.resolver import QuotaResolver
from gateway_registry.quota.store import (
    AuthDirCredentialStore,
    CredentialRecord,
    CredentialStore,
    InMemoryCredentialStore,
)
from gateway_registry.quota.types import QuotaCategory, UsageSnapshot

__all__ = [
    "AuthDirCredentialStore",
    "CopilotCredentials",
    "CredentialRecord",
    "CredentialStore",
    "InMemoryCredentialStore",
    "KiroCredentials",
    "QuotaCategory",
    "QuotaResolver",
    "StubUsageAdapter",
    "UsageAdapter",
    "UsageSnapshot",
    "extract_token",
]
