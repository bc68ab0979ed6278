"""Usage adapter interface."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from gateway_registry.context import CallContext
from gateway_registry.quota.credentials import extract_token
from gateway_registry.quota.types import UsageSnapshot


@runtime_checkable
class UsageAdapter(Protocol):
    """Protocol that every usage adapter must satisfy."""

    @property
    def name(self) -> str:
        """Provider key the adapter serves."""
        ...

    def parse_credentials(self, metadata: Mapping[str, Any]) -> Any:
        """Convert raw credential metadata into the adapter's typed credentials."""
        ...

    def fetch_usage(self, credentials: Any, context: CallContext) -> UsageSnapshot:
        """Fetch and normalize the account's usage."""
        ...


class StubUsageAdapter:
    """In-memory adapter for testing."""

    def __init__(
        self,
        name: str = "stub",
        snapshot: UsageSnapshot | None = None,
        error: Exception | None = None,
    ) -> None:
        self._name = name
        self._snapshot = snapshot or UsageSnapshot(provider=name)
        self._error = error
        self.calls: list[tuple[Any, CallContext]] = []

    @property
    def name(self) -> str:
        return self._name

    def parse_credentials(self, metadata: Mapping[str, Any]) -> str:
        return extract_token(metadata)

    def fetch_usage(self, credentials: Any, context: CallContext) -> UsageSnapshot:
        self.calls.append((credentials, context))
        if self._error is not None:
            raise self._error
        return self._snapshot

    def close(self) -> None:
        """Nothing to release."""
