"""Credential store interface and simple implementations."""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialRecord:
    """A stored auth record: opaque id, provider type and untyped metadata."""

    id: str
    provider: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)


@runtime_checkable
class CredentialStore(Protocol):
    """Anything that can fetch a credential record by id."""

    def get_by_id(self, record_id: str) -> CredentialRecord | None:
        """Return the record, or ``None`` when no record has that id."""
        ...


class InMemoryCredentialStore:
    """Dict-backed store, for tests and for tokens supplied on the command line."""

    def __init__(self, records: Iterable[CredentialRecord] = ()) -> None:
        self._records: dict[str, CredentialRecord] = {r.id: r for r in records}
        self.lookups: list[str] = []

    def add(self, record: CredentialRecord) -> None:
        self._records[record.id] = record

    def get_by_id(self, record_id: str) -> CredentialRecord | None:
        self.lookups.append(record_id)
        return self._records.get(record_id)


class AuthDirCredentialStore:
    """Reads ``*.json`` auth files from a directory.

    The file name is the record id and the ``type`` field is the provider.
    The whole JSON object becomes the metadata. Files are read on every
    lookup so a token written by a login flow is picked up immediately.
    """

    def __init__(self, auth_dir: str | os.PathLike[str]) -> None:
        self._dir = Path(auth_dir).expanduser()

    @property
    def directory(self) -> Path:
        return self._dir

    def get_by_id(self, record_id: str) -> CredentialRecord | None:
        if not record_id or Path(record_id).name != record_id:
            return None
        path = self._dir / record_id
        if not path.is_file():
            return None
        return self._load(path)

    def find_first(self, provider: str) -> CredentialRecord | None:
        """Return the first record (by file name) of the given provider type."""
        wanted = provider.strip().lower()
        for path in self._json_files():
            record = self._load(path)
            if record is not None and record.provider == wanted:
                return record
        return None

    def _json_files(self) -> list[Path]:
        if not self._dir.is_dir():
            return []
        return sorted(
            p for p in self._dir.iterdir() if p.is_file() and p.suffix.lower() == ".json"
        )

    def _load(self, path: Path) -> CredentialRecord | None:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("skipping unreadable auth file %s: %s", path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("skipping auth file %s: not a JSON object", path)
            return None
        provider = data.get("type")
        return CredentialRecord(
            id=path.name,
            provider=provider.strip().lower() if isinstance(provider, str) else "",
            metadata=data,
        )
