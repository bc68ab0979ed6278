"""Channel-keyed capability registry."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from gateway_registry.catalog.types import ModelDescriptor, ModelOverride


def normalize_channel(channel: str) -> str:
    """Channel keys match case-insensitively after trimming whitespace."""
    return channel.strip().lower()


class CapabilityRegistry:
    """Resolves channels to their tables and model ids to descriptors.

    *tables* maps channel keys to static descriptor tuples. *override_channel*
    names the one channel whose table is derived on each call from
    *overrides* instead.

    ``lookup_by_id`` walks *lookup_order* and returns the first match, so
    ids that collide across channels resolve to the earliest channel in that
    order. The override map is consulted only when no table matches.
    """

    def __init__(
        self,
        tables: Mapping[str, Iterable[ModelDescriptor]],
        lookup_order: Iterable[str],
        *,
        override_channel: str | None = None,
        overrides: Mapping[str, ModelOverride | None] | None = None,
    ) -> None:
        self._tables: dict[str, tuple[ModelDescriptor, ...]] = {}
        for channel, models in tables.items():
            key = normalize_channel(channel)
            table = tuple(models)
            _check_unique(key, table)
            self._tables[key] = table

        self._lookup_order = tuple(normalize_channel(c) for c in lookup_order)
        unknown = [c for c in self._lookup_order if c not in self._tables]
        if unknown:
            raise ValueError(f"lookup order names unknown channels: {unknown}")

        self._override_channel = (
            normalize_channel(override_channel) if override_channel else None
        )
        self._overrides: Mapping[str, ModelOverride | None] = overrides or {}

    @property
    def lookup_order(self) -> tuple[str, ...]:
        return self._lookup_order

    def channels(self) -> list[str]:
        """Return every known channel key."""
        keys = list(self._tables)
        if self._override_channel and self._override_channel not in self._tables:
            keys.append(self._override_channel)
        return keys

    def models_for_channel(self, channel: str) -> tuple[ModelDescriptor, ...]:
        """Return the channel's models; unknown channels give an empty tuple."""
        key = normalize_channel(channel)
        if key and key == self._override_channel:
            return self._derive_override_models()
        return self._tables.get(key, ())

    def lookup_by_id(self, model_id: str) -> ModelDescriptor | None:
        """Return the first descriptor whose id matches exactly, or ``None``."""
        if not model_id:
            return None

        for channel in self._lookup_order:
            for model in self._tables[channel]:
                if model.id == model_id:
                    return model

        entry = self._overrides.get(model_id)
        if entry is not None and self._override_channel:
            return _from_override(self._override_channel, model_id, entry)
        return None

    def _derive_override_models(self) -> tuple[ModelDescriptor, ...]:
        channel = self._override_channel or ""
        models = [
            _from_override(channel, model_id, entry)
            for model_id, entry in self._overrides.items()
            if model_id and entry is not None
        ]
        models.sort(key=lambda m: m.id.lower())
        return tuple(models)


def _from_override(channel: str, model_id: str, entry: ModelOverride) -> ModelDescriptor:
    return ModelDescriptor(
        id=model_id,
        owned_by=channel,
        channel=channel,
        reasoning=entry.reasoning,
        max_completion_tokens=entry.max_completion_tokens,
    )


def _check_unique(channel: str, table: tuple[ModelDescriptor, ...]) -> None:
    seen: set[str] = set()
    for model in table:
        if model.id in seen:
            raise ValueError(f"duplicate model id {model.id!r} in channel {channel!r}")
        seen.add(model.id)
