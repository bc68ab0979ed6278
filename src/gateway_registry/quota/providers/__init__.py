"""Per-provider usage adapters."""
from __future__ import annotations

from gateway_registry.quota.providers.copilot import CopilotUsageAdapter
from gateway_registry.quota.providers.kiro import KiroUsageAdapter

__all__ = ["CopilotUsageAdapter", "KiroUsageAdapter"]
