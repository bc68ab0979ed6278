"""Normalized quota types."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class QuotaCategory:
    """Usage for one quota bucket (e.g. chat, completions, credits)."""

    name: str
    used: float = 0.0
    limit: float = 0.0
    remaining: float | None = None
    percent_remaining: float | None = None
    unlimited: bool = False
    overage_count: float = 0.0
    overage_permitted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "used": self.used,
            "limit": self.limit,
            "remaining": self.remaining,
            "percent_remaining": self.percent_remaining,
            "unlimited": self.unlimited,
            "overage_count": self.overage_count,
            "overage_permitted": self.overage_permitted,
        }


@dataclass(frozen=True)
class UsageSnapshot:
    """Provider usage converted into one common shape.

    Units are provider-specific (credits, request counts) and are not
    comparable across providers. ``percent_remaining`` is only set when the
    provider reports it.
    """

    provider: str
    plan_label: str = ""
    current_usage: float = 0.0
    usage_limit: float = 0.0
    percent_remaining: float | None = None
    reset_at: datetime | None = None
    categories: tuple[QuotaCategory, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def category(self, name: str) -> QuotaCategory | None:
        """Return the named category, if the provider reported it."""
        for cat in self.categories:
            if cat.name == name:
                return cat
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "plan_label": self.plan_label,
            "current_usage": self.current_usage,
            "usage_limit": self.usage_limit,
            "percent_remaining": self.percent_remaining,
            "reset_at": self.reset_at.isoformat() if self.reset_at else None,
            "categories": [c.to_dict() for c in self.categories],
        }
