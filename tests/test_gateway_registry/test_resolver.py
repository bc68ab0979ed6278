"""Tests for the quota resolver."""
from __future__ import annotations

import json
import time

import httpx
import pytest

from gateway_registry.config import GatewayConfig
from gateway_registry.context import AbortController, CallContext
from gateway_registry.errors import (
    AbortError,
    InvalidInputError,
    MissingCredentialFieldError,
    NotFoundError,
    RequestTimeoutError,
    UnsupportedProviderError,
    UpstreamRejectedError,
)
from gateway_registry.quota import (
    CredentialRecord,
    InMemoryCredentialStore,
    QuotaResolver,
    StubUsageAdapter,
    UsageAdapter,
    UsageSnapshot,
)
from gateway_registry.quota.providers import CopilotUsageAdapter, KiroUsageAdapter
from gateway_registry.quota.providers.kiro import TARGET_GET_USAGE, TARGET_LIST_PROFILES


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _store(*records: CredentialRecord) -> InMemoryCredentialStore:
    return InMemoryCredentialStore(records)


def _record(record_id: str = "acct", provider: str = "kiro", **metadata) -> CredentialRecord:
    if "access_token" not in metadata:
        metadata["access_token"] = "abc"
    return CredentialRecord(id=record_id, provider=provider, metadata=metadata)


class _CountingHandler:
    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._response is not None:
            return self._response
        target = request.headers.get("x-amz-target")
        if target == TARGET_LIST_PROFILES:
            return httpx.Response(200, json={"profiles": [{"profileArn": "arn-only"}]})
        if target == TARGET_GET_USAGE:
            return httpx.Response(
                200,
                json={
                    "usageBreakdownList": [
                        {"currentUsageWithPrecision": 12.5, "usageLimitWithPrecision": 50.0}
                    ]
                },
            )
        return httpx.Response(200, json={"copilot_plan": "individual"})


def _http_resolver(store, handler: _CountingHandler) -> QuotaResolver:
    transport = httpx.MockTransport(handler)
    cfg = GatewayConfig()
    return QuotaResolver(
        store,
        {
            "kiro": KiroUsageAdapter(cfg, transport=transport),
            "github-copilot": CopilotUsageAdapter(cfg, transport=transport),
        },
        cfg,
    )


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class TestInputValidation:
    @pytest.mark.parametrize("account_id", ["", "   "])
    def test_blank_id_makes_no_calls(self, account_id: str) -> None:
        store = _store(_record())
        handler = _CountingHandler()
        resolver = _http_resolver(store, handler)
        with pytest.raises(InvalidInputError, match="auth_id is required"):
            resolver.resolve_usage(account_id)
        assert store.lookups == []
        assert handler.requests == []

    def test_unknown_id(self) -> None:
        stub = StubUsageAdapter("kiro")
        resolver = QuotaResolver(_store(), {"kiro": stub})
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_usage("ghost")
        assert exc_info.value.reauthenticate is True
        assert stub.calls == []

    def test_missing_token_makes_no_calls(self) -> None:
        handler = _CountingHandler()
        record = CredentialRecord(id="acct", provider="kiro", metadata={"profile_arn": "arn"})
        resolver = _http_resolver(_store(record), handler)
        with pytest.raises(MissingCredentialFieldError) as exc_info:
            resolver.resolve_usage("acct")
        assert exc_info.value.field == "access_token"
        assert handler.requests == []

    def test_missing_token_checked_before_provider(self) -> None:
        record = CredentialRecord(id="acct", provider="openai", metadata={})
        resolver = QuotaResolver(_store(record), {})
        with pytest.raises(MissingCredentialFieldError):
            resolver.resolve_usage("acct")

    def test_unsupported_provider(self) -> None:
        stub = StubUsageAdapter("kiro")
        resolver = QuotaResolver(_store(_record(provider="openai")), {"kiro": stub})
        with pytest.raises(UnsupportedProviderError) as exc_info:
            resolver.resolve_usage("acct")
        assert isinstance(exc_info.value, InvalidInputError)
        assert exc_info.value.provider == "openai"
        assert stub.calls == []


# ---------------------------------------------------------------------------
# Adapter selection
# ---------------------------------------------------------------------------


class TestAdapterSelection:
    def test_selects_by_provider(self) -> None:
        kiro = StubUsageAdapter("kiro", UsageSnapshot(provider="kiro", current_usage=1.0))
        copilot = StubUsageAdapter("github-copilot", UsageSnapshot(provider="github-copilot"))
        resolver = QuotaResolver(
            _store(_record("k", "kiro"), _record("c", "github-copilot")),
            {"kiro": kiro, "github-copilot": copilot},
        )
        assert resolver.resolve_usage("c").provider == "github-copilot"
        assert len(copilot.calls) == 1
        assert kiro.calls == []

    def test_amazonq_uses_kiro_adapter(self) -> None:
        kiro = StubUsageAdapter("kiro")
        resolver = QuotaResolver(_store(_record(provider="amazonq")), {"kiro": kiro})
        resolver.resolve_usage("acct")
        assert len(kiro.calls) == 1

    def test_provider_match_ignores_case(self) -> None:
        kiro = StubUsageAdapter("kiro")
        resolver = QuotaResolver(_store(_record(provider=" Kiro ")), {"KIRO": kiro})
        resolver.resolve_usage("acct")
        assert len(kiro.calls) == 1

    def test_register_adapter(self) -> None:
        resolver = QuotaResolver(_store(_record(provider="custom")))
        stub = StubUsageAdapter("custom")
        resolver.register_adapter("custom", stub)
        assert resolver.adapters == {"custom": stub}
        resolver.resolve_usage("acct")
        assert stub.calls[0][0] == "abc"

    def test_stub_satisfies_protocol(self) -> None:
        assert isinstance(StubUsageAdapter(), UsageAdapter)
        assert isinstance(KiroUsageAdapter(), UsageAdapter)
        assert isinstance(CopilotUsageAdapter(), UsageAdapter)

    def test_default_adapters(self) -> None:
        resolver = QuotaResolver.with_default_adapters(_store(), GatewayConfig())
        assert set(resolver.adapters) == {"kiro", "github-copilot"}
        resolver.close()


# ---------------------------------------------------------------------------
# Deadlines and cancellation
# ---------------------------------------------------------------------------


class TestContextPropagation:
    def test_child_deadline_bounded_by_config(self) -> None:
        stub = StubUsageAdapter("kiro")
        resolver = QuotaResolver(
            _store(_record()), {"kiro": stub}, GatewayConfig(request_timeout=30.0)
        )
        resolver.resolve_usage("acct")
        (_, ctx), = stub.calls
        remaining = ctx.remaining()
        assert remaining is not None
        assert 0.0 < remaining <= 30.0

    def test_child_never_outlives_parent(self) -> None:
        stub = StubUsageAdapter("kiro")
        resolver = QuotaResolver(_store(_record()), {"kiro": stub})
        parent = CallContext.background().with_timeout(2.0)
        resolver.resolve_usage("acct", parent)
        (_, ctx), = stub.calls
        assert ctx.deadline is not None
        assert parent.deadline is not None
        assert ctx.deadline <= parent.deadline

    def test_aborted_caller_stops_outbound_calls(self) -> None:
        handler = _CountingHandler()
        resolver = _http_resolver(_store(_record()), handler)
        controller = AbortController()
        controller.abort()
        with pytest.raises(AbortError):
            resolver.resolve_usage("acct", CallContext(signal=controller.signal))
        assert handler.requests == []

    def test_expired_caller_deadline(self) -> None:
        handler = _CountingHandler()
        resolver = _http_resolver(_store(_record(provider="github-copilot")), handler)
        expired = CallContext(deadline=time.monotonic() - 1.0)
        with pytest.raises(RequestTimeoutError):
            resolver.resolve_usage("acct", expired)
        assert handler.requests == []


# ---------------------------------------------------------------------------
# End to end over HTTP
# ---------------------------------------------------------------------------


class TestEndToEnd:
    def test_kiro_discovery_then_fetch(self) -> None:
        handler = _CountingHandler()
        store = _store(_record(access_token="abc", profile_arn=""))
        resolver = _http_resolver(store, handler)

        snapshot = resolver.resolve_usage("acct")

        assert snapshot.current_usage == 12.5
        assert snapshot.usage_limit == 50.0
        targets = [r.headers["x-amz-target"] for r in handler.requests]
        assert targets == [TARGET_LIST_PROFILES, TARGET_GET_USAGE]
        assert json.loads(handler.requests[1].content)["profileArn"] == "arn-only"
        assert all(r.headers["authorization"] == "Bearer abc" for r in handler.requests)

    def test_copilot_direct_fetch(self) -> None:
        handler = _CountingHandler()
        resolver = _http_resolver(_store(_record(provider="github-copilot")), handler)
        snapshot = resolver.resolve_usage("acct")
        assert snapshot.plan_label == "individual"
        assert len(handler.requests) == 1

    def test_no_retry_on_server_error(self) -> None:
        handler = _CountingHandler(httpx.Response(500, text="boom"))
        resolver = _http_resolver(_store(_record(provider="github-copilot")), handler)
        with pytest.raises(UpstreamRejectedError) as exc_info:
            resolver.resolve_usage("acct")
        assert exc_info.value.transient is True
        assert len(handler.requests) == 1

    def test_adapter_errors_propagate_unchanged(self) -> None:
        err = UpstreamRejectedError(403, "forbidden", provider="kiro")
        resolver = QuotaResolver(_store(_record()), {"kiro": StubUsageAdapter("kiro", error=err)})
        with pytest.raises(UpstreamRejectedError) as exc_info:
            resolver.resolve_usage("acct")
        assert exc_info.value is err
