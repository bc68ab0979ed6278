"""Model catalog types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ThinkingBudget:
    """Extended-reasoning token budget expressed as a numeric range."""

    min: int
    max: int
    zero_allowed: bool = False
    dynamic_allowed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "zero_allowed": self.zero_allowed,
            "dynamic_allowed": self.dynamic_allowed,
        }


@dataclass(frozen=True)
class ThinkingLevels:
    """Extended reasoning expressed as discrete effort levels."""

    levels: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"levels": list(self.levels)}


ReasoningSupport = Union[ThinkingBudget, ThinkingLevels]

EFFORT_LEVELS = ThinkingLevels(("minimal", "low", "medium", "high"))


@dataclass(frozen=True)
class ModelDescriptor:
    """Static metadata about a model served by one channel."""

    id: str
    """API identifier, unique within its channel only."""

    owned_by: str
    """Provider that owns the model (e.g. "anthropic", "aws")."""

    channel: str
    """Routing family; several account types may share one."""

    display_name: str = ""
    """Human-readable name."""

    description: str = ""

    context_length: int | None = None
    """Max total tokens; ``None`` means unspecified."""

    max_completion_tokens: int | None = None
    """Max output tokens; ``None`` means unspecified."""

    supported_endpoints: frozenset[str] = frozenset()
    """Endpoint paths the model accepts. Empty for embedding-only models."""

    reasoning: ReasoningSupport | None = None
    """Either a token budget or effort levels, never both."""

    created: int | None = None
    """Unix timestamp the entry was published."""

    object: str = "model"

    def to_dict(self) -> dict[str, Any]:
        """Render as a model-listing entry."""
        out: dict[str, Any] = {
            "id": self.id,
            "object": self.object,
            "owned_by": self.owned_by,
            "type": self.channel,
        }
        if self.created is not None:
            out["created"] = self.created
        if self.display_name:
            out["display_name"] = self.display_name
        if self.description:
            out["description"] = self.description
        if self.context_length is not None:
            out["context_length"] = self.context_length
        if self.max_completion_tokens is not None:
            out["max_completion_tokens"] = self.max_completion_tokens
        if self.supported_endpoints:
            out["supported_endpoints"] = sorted(self.supported_endpoints)
        if self.reasoning is not None:
            out["thinking"] = self.reasoning.to_dict()
        return out


@dataclass(frozen=True)
class ModelOverride:
    """Entry in a keyed model configuration map."""

    reasoning: ReasoningSupport | None = None
    max_completion_tokens: int | None = None
