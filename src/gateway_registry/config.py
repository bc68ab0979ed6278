"""Configuration types."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

KIRO_ENDPOINT = "https://codewhisperer.us-east-1.amazonaws.com"
GITHUB_API_BASE_URL = "https://api.github.com"


@dataclass(frozen=True)
class ListingDefaults:
    """Fallback limits for listing entries that omit them."""

    context_length: int = 128000
    max_completion_tokens: int = 16384


@dataclass(frozen=True)
class CopilotClientSignature:
    """Client identification the Copilot usage endpoint expects."""

    user_agent: str = "GitHubCopilotChat/0.26.7"
    editor_version: str = "vscode/1.100.0"
    editor_plugin_version: str = "copilot-chat/0.26.7"
    api_version: str = "2025-04-01"


@dataclass(frozen=True)
class GatewayConfig:
    """Settings for the quota adapters and listing conversion."""

    request_timeout: float = 30.0
    kiro_endpoint: str = KIRO_ENDPOINT
    github_api_base_url: str = GITHUB_API_BASE_URL
    proxy_url: str | None = None
    copilot_signature: CopilotClientSignature = field(
        default_factory=CopilotClientSignature
    )
    listing_defaults: ListingDefaults = field(default_factory=ListingDefaults)

    @classmethod
    def from_env(cls) -> GatewayConfig:
        """Create a config from ``GATEWAY_*`` environment variables.

        Unset variables keep the dataclass defaults.
        """
        defaults = cls()
        listing = ListingDefaults(
            context_length=_env_int(
                "GATEWAY_DEFAULT_CONTEXT_LENGTH",
                defaults.listing_defaults.context_length,
            ),
            max_completion_tokens=_env_int(
                "GATEWAY_DEFAULT_MAX_COMPLETION_TOKENS",
                defaults.listing_defaults.max_completion_tokens,
            ),
        )
        return cls(
            request_timeout=float(
                os.environ.get("GATEWAY_REQUEST_TIMEOUT", defaults.request_timeout)
            ),
            kiro_endpoint=os.environ.get("GATEWAY_KIRO_ENDPOINT", defaults.kiro_endpoint),
            github_api_base_url=os.environ.get(
                "GATEWAY_GITHUB_API_BASE_URL", defaults.github_api_base_url
            ),
            proxy_url=os.environ.get("GATEWAY_PROXY_URL") or None,
            listing_defaults=listing,
        )


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    parsed = int(value)
    if parsed <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return parsed
