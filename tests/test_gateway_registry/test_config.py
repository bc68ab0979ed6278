"""Tests for configuration types."""
from __future__ import annotations

import dataclasses

import pytest

from gateway_registry.config import (
    GITHUB_API_BASE_URL,
    KIRO_ENDPOINT,
    CopilotClientSignature,
    GatewayConfig,
    ListingDefaults,
)


class TestGatewayConfig:
    def test_defaults(self) -> None:
        cfg = GatewayConfig()
        assert cfg.request_timeout == 30.0
        assert cfg.kiro_endpoint == KIRO_ENDPOINT
        assert cfg.github_api_base_url == GITHUB_API_BASE_URL
        assert cfg.proxy_url is None
        assert cfg.listing_defaults == ListingDefaults(128000, 16384)

    def test_signature_defaults(self) -> None:
        sig = CopilotClientSignature()
        assert sig.user_agent == "GitHubCopilotChat/0.26.7"
        assert sig.editor_version == "vscode/1.100.0"
        assert sig.editor_plugin_version == "copilot-chat/0.26.7"
        assert sig.api_version == "2025-04-01"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GatewayConfig().request_timeout = 1.0  # type: ignore[misc]


class TestFromEnv:
    def test_unset_keeps_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "GATEWAY_REQUEST_TIMEOUT",
            "GATEWAY_KIRO_ENDPOINT",
            "GATEWAY_GITHUB_API_BASE_URL",
            "GATEWAY_PROXY_URL",
            "GATEWAY_DEFAULT_CONTEXT_LENGTH",
            "GATEWAY_DEFAULT_MAX_COMPLETION_TOKENS",
        ):
            monkeypatch.delenv(name, raising=False)
        assert GatewayConfig.from_env() == GatewayConfig()

    def test_reads_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GATEWAY_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("GATEWAY_KIRO_ENDPOINT", "https://kiro.test")
        monkeypatch.setenv("GATEWAY_PROXY_URL", "http://proxy.test:8080")
        monkeypatch.setenv("GATEWAY_DEFAULT_CONTEXT_LENGTH", "64000")
        monkeypatch.setenv("GATEWAY_DEFAULT_MAX_COMPLETION_TOKENS", "4096")
        cfg = GatewayConfig.from_env()
        assert cfg.request_timeout == 12.5
        assert cfg.kiro_endpoint == "https://kiro.test"
        assert cfg.proxy_url == "http://proxy.test:8080"
        assert cfg.listing_defaults == ListingDefaults(64000, 4096)

    def test_rejects_non_positive_limits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GATEWAY_DEFAULT_CONTEXT_LENGTH", "0")
        with pytest.raises(ValueError, match="GATEWAY_DEFAULT_CONTEXT_LENGTH"):
            GatewayConfig.from_env()
