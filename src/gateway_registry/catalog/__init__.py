"""Model catalog: per-channel capability tables and global lookup."""
from __future__ import annotations

from gateway_registry.catalog import _data
from gateway_registry.catalog.listing import descriptor_from_listing, descriptors_from_listing
from gateway_registry.catalog.registry import CapabilityRegistry, normalize_channel
from gateway_registry.catalog.types import (
    EFFORT_LEVELS,
    ModelDescriptor,
    ModelOverride,
    ReasoningSupport,
    ThinkingBudget,
    ThinkingLevels,
)

ANTIGRAVITY_CHANNEL = "antigravity"

CHANNEL_TABLES: dict[str, tuple[ModelDescriptor, ...]] = {
    "claude": _data.CLAUDE_MODELS,
    "gemini": _data.GEMINI_MODELS,
    "vertex": _data.GEMINI_VERTEX_MODELS,
    "gemini-cli": _data.GEMINI_CLI_MODELS,
    "aistudio": _data.AISTUDIO_MODELS,
    "codex": _data.OPENAI_MODELS,
    "qwen": _data.QWEN_MODELS,
    "iflow": _data.IFLOW_MODELS,
    "github-copilot": _data.GITHUB_COPILOT_MODELS,
    "kiro": _data.KIRO_MODELS,
    "amazonq": _data.AMAZONQ_MODELS,
}

# Priority for lookup_by_id. An id defined by several channels (for example
# "gemini-2.5-pro" or "gpt-5") resolves to the first channel listed here.
# Reordering this tuple changes which descriptor those ids return.
LOOKUP_ORDER: tuple[str, ...] = (
    "claude",
    "gemini",
    "vertex",
    "gemini-cli",
    "aistudio",
    "codex",
    "qwen",
    "iflow",
    "github-copilot",
    "kiro",
    "amazonq",
)

ANTIGRAVITY_MODEL_CONFIG = _data.ANTIGRAVITY_MODEL_CONFIG

_default_registry = CapabilityRegistry(
    CHANNEL_TABLES,
    LOOKUP_ORDER,
    override_channel=ANTIGRAVITY_CHANNEL,
    overrides=ANTIGRAVITY_MODEL_CONFIG,
)


def get_default_registry() -> CapabilityRegistry:
    """Return the registry built from the static tables."""
    return _default_registry


def models_for_channel(channel: str) -> tuple[ModelDescriptor, ...]:
    """Return the models a channel serves, or ``()`` for an unknown channel.

    The channel key is trimmed and matched case-insensitively. The
    ``antigravity`` table is derived from :data:`ANTIGRAVITY_MODEL_CONFIG`
    on every call and sorted by id, ignoring case.
    """
    return _default_registry.models_for_channel(channel)


def lookup_by_id(model_id: str) -> ModelDescriptor | None:
    """Look up a model by exact id across all channels.

    Channels are scanned in :data:`LOOKUP_ORDER`; the antigravity
    configuration is checked last. Returns ``None`` for an empty or unknown id.
    """
    return _default_registry.lookup_by_id(model_id)


def list_channels() -> list[str]:
    """Return every channel key the registry knows."""
    return _default_registry.channels()


__all__ = [
    "ANTIGRAVITY_CHANNEL",
    "ANTIGRAVITY_MODEL_CONFIG",
    "CHANNEL_TABLES",
    "EFFORT_LEVELS",
    "LOOKUP_ORDER",
    "CapabilityRegistry",
    "ModelDescriptor",
    "ModelOverride",
    "ReasoningSupport",
    "ThinkingBudget",
    "ThinkingLevels",
    "descriptor_from_listing",
    "descriptors_from_listing",
    "get_default_registry",
    "list_channels",
    "lookup_by_id",
    "models_for_channel",
    "normalize_channel",
]
