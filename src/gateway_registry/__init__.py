"""Gateway registry: model capability tables and provider quota normalization."""
from __future__ import annotations

__version__ = "0.1.0"

# Config
from gateway_registry.config import (
    CopilotClientSignature,
    GatewayConfig,
    ListingDefaults,
)
from gateway_registry.context import AbortController, AbortSignal, CallContext

# Errors
from gateway_registry.errors import (
    GatewayError,
    InvalidInputError,
    UnsupportedProviderError,
    NotFoundError,
    MissingCredentialFieldError,
    UpstreamUnavailableError,
    NetworkError,
    RequestTimeoutError,
    AbortError,
    UpstreamRejectedError,
    MalformedUpstreamResponseError,
    DiscoveryFailedError,
)

# Catalog
from gateway_registry.catalog import (
    LOOKUP_ORDER,
    CapabilityRegistry,
    ModelDescriptor,
    ThinkingBudget,
    ThinkingLevels,
    list_channels,
    lookup_by_id,
    models_for_channel,
)

# Quota
from gateway_registry.quota import (
    AuthDirCredentialStore,
    CredentialRecord,
    CredentialStore,
    InMemoryCredentialStore,
    QuotaCategory,
    QuotaResolver,
    UsageAdapter,
    UsageSnapshot,
)
from gateway_registry.quota.providers import CopilotUsageAdapter, KiroUsageAdapter

__all__ = [
    "__version__",
    # Config
    "CopilotClientSignature",
    "GatewayConfig",
    "ListingDefaults",
    "AbortController",
    "AbortSignal",
    "CallContext",
    # Errors
    "GatewayError",
    "InvalidInputError",
    "UnsupportedProviderError",
    "NotFoundError",
    "MissingCredentialFieldError",
    "UpstreamUnavailableError",
    "NetworkError",
    "RequestTimeoutError",
    "AbortError",
    "UpstreamRejectedError",
    "MalformedUpstreamResponseError",
    "DiscoveryFailedError",
    # Catalog
    "LOOKUP_ORDER",
    "CapabilityRegistry",
    "ModelDescriptor",
    "ThinkingBudget",
    "ThinkingLevels",
    "list_channels",
    "lookup_by_id",
    "models_for_channel",
    # Quota
    "AuthDirCredentialStore",
    "CredentialRecord",
    "CredentialStore",
    "InMemoryCredentialStore",
    "QuotaCategory",
    "QuotaResolver",
    "UsageAdapter",
    "UsageSnapshot",
    # Providers
    "CopilotUsageAdapter",
    "KiroUsageAdapter",
]
