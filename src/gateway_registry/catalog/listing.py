"""Convert a provider's live ``/models`` listing into model descriptors.

Listing entries follow the Copilot shape::

    {"id": ..., "name": ..., "supported_endpoints": [...],
     "capabilities": {"limits": {"max_context_window_tokens": ...,
                                 "max_output_tokens": ...},
                      "supports": {"min_thinking_budget": ...,
                                   "max_thinking_budget": ...}}}

Limits the provider leaves out (or reports as zero) fall back to
:class:`ListingDefaults`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from gateway_registry.catalog.types import (
    EFFORT_LEVELS,
    ModelDescriptor,
    ReasoningSupport,
    ThinkingBudget,
)
from gateway_registry.config import ListingDefaults

_LEVEL_PREFIXES = ("gpt-", "o1", "o3")


def infer_endpoints(entry: Mapping[str, Any]) -> frozenset[str]:
    """Return the endpoints a listed model accepts."""
    listed = entry.get("supported_endpoints")
    if listed:
        return frozenset(str(e) for e in listed)

    model_id = str(entry.get("id", "")).lower()
    if "embedding" in model_id:
        return frozenset()
    if "-codex" in model_id:
        return frozenset({"/responses"})
    return frozenset({"/chat/completions"})


def infer_reasoning(entry: Mapping[str, Any]) -> ReasoningSupport | None:
    """Return the reasoning support advertised (or implied) by a listed model."""
    supports = _section(_section(entry, "capabilities"), "supports")
    max_budget = _as_int(supports.get("max_thinking_budget"))
    if max_budget > 0:
        return ThinkingBudget(
            min=_as_int(supports.get("min_thinking_budget")),
            max=max_budget,
            zero_allowed=False,
            dynamic_allowed=False,
        )

    model_id = str(entry.get("id", "")).lower()
    if model_id.startswith(_LEVEL_PREFIXES):
        return EFFORT_LEVELS
    return None


def descriptor_from_listing(
    entry: Mapping[str, Any],
    *,
    channel: str,
    owned_by: str | None = None,
    defaults: ListingDefaults | None = None,
    created: int | None = None,
    description_suffix: str = "",
) -> ModelDescriptor | None:
    """Build a descriptor for one listing entry, or ``None`` if it has no id."""
    model_id = str(entry.get("id") or "")
    if not model_id:
        return None

    limits = defaults or ListingDefaults()
    display_name = str(entry.get("name") or "") or model_id
    caps = _section(_section(entry, "capabilities"), "limits")
    context_length = _as_int(caps.get("max_context_window_tokens")) or limits.context_length
    max_output = _as_int(caps.get("max_output_tokens")) or limits.max_completion_tokens

    description = display_name
    if description_suffix:
        description = f"{display_name} {description_suffix}"

    return ModelDescriptor(
        id=model_id,
        owned_by=owned_by or channel,
        channel=channel,
        display_name=display_name,
        description=description,
        created=created,
        context_length=context_length,
        max_completion_tokens=max_output,
        supported_endpoints=infer_endpoints(entry),
        reasoning=infer_reasoning(entry),
    )


def descriptors_from_listing(
    payload: Mapping[str, Any] | Iterable[Mapping[str, Any]],
    *,
    channel: str,
    owned_by: str | None = None,
    defaults: ListingDefaults | None = None,
    created: int | None = None,
    description_suffix: str = "",
) -> tuple[ModelDescriptor, ...]:
    """Convert a whole listing, sorted by id, dropping invalid and repeated ids."""
    if isinstance(payload, Mapping):
        entries = payload.get("data") or []
    else:
        entries = payload

    seen: dict[str, ModelDescriptor] = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        desc = descriptor_from_listing(
            entry,
            channel=channel,
            owned_by=owned_by,
            defaults=defaults,
            created=created,
            description_suffix=description_suffix,
        )
        if desc is not None and desc.id not in seen:
            seen[desc.id] = desc
    return tuple(seen[k] for k in sorted(seen))


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0
