"""Tests for credential stores and typed credential extraction."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from gateway_registry.errors import MissingCredentialFieldError
from gateway_registry.quota.credentials import (
    CopilotCredentials,
    KiroCredentials,
    extract_token,
    optional_str,
)
from gateway_registry.quota.store import (
    AuthDirCredentialStore,
    CredentialRecord,
    CredentialStore,
    InMemoryCredentialStore,
)


def _write(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


# ---------------------------------------------------------------------------
# InMemoryCredentialStore
# ---------------------------------------------------------------------------


class TestInMemoryStore:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryCredentialStore(), CredentialStore)

    def test_get_by_id(self) -> None:
        record = CredentialRecord(id="a", provider="kiro", metadata={"access_token": "t"})
        store = InMemoryCredentialStore([record])
        assert store.get_by_id("a") is record
        assert store.get_by_id("b") is None
        assert store.lookups == ["a", "b"]

    def test_add(self) -> None:
        store = InMemoryCredentialStore()
        store.add(CredentialRecord(id="x"))
        assert store.get_by_id("x") is not None


# ---------------------------------------------------------------------------
# AuthDirCredentialStore
# ---------------------------------------------------------------------------


class TestAuthDirStore:
    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(AuthDirCredentialStore(tmp_path), CredentialStore)

    def test_loads_record(self, tmp_path: Path) -> None:
        _write(tmp_path / "kiro-me.json", {"type": "Kiro", "access_token": "t", "profile_arn": "arn"})
        record = AuthDirCredentialStore(tmp_path).get_by_id("kiro-me.json")
        assert record is not None
        assert record.id == "kiro-me.json"
        assert record.provider == "kiro"
        assert record.metadata["access_token"] == "t"

    def test_missing_file(self, tmp_path: Path) -> None:
        assert AuthDirCredentialStore(tmp_path).get_by_id("nope.json") is None

    def test_rejects_path_components(self, tmp_path: Path) -> None:
        inner = tmp_path / "auths"
        inner.mkdir()
        _write(tmp_path / "outside.json", {"type": "kiro"})
        store = AuthDirCredentialStore(inner)
        assert store.get_by_id("../outside.json") is None
        assert store.get_by_id("") is None

    def test_unreadable_json_is_none(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        assert AuthDirCredentialStore(tmp_path).get_by_id("bad.json") is None

    def test_non_object_json_is_none(self, tmp_path: Path) -> None:
        _write(tmp_path / "list.json", [1, 2])
        assert AuthDirCredentialStore(tmp_path).get_by_id("list.json") is None

    def test_missing_type_gives_empty_provider(self, tmp_path: Path) -> None:
        _write(tmp_path / "x.json", {"access_token": "t"})
        record = AuthDirCredentialStore(tmp_path).get_by_id("x.json")
        assert record is not None
        assert record.provider == ""

    def test_find_first_by_provider(self, tmp_path: Path) -> None:
        (tmp_path / "a-broken.json").write_text("nope", encoding="utf-8")
        _write(tmp_path / "b-kiro.json", {"type": "kiro"})
        _write(tmp_path / "c-copilot.json", {"type": "github-copilot"})
        _write(tmp_path / "d-copilot.json", {"type": "github-copilot"})
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        store = AuthDirCredentialStore(tmp_path)
        found = store.find_first("github-copilot")
        assert found is not None
        assert found.id == "c-copilot.json"
        assert store.find_first("amazonq") is None

    def test_find_first_missing_dir(self, tmp_path: Path) -> None:
        assert AuthDirCredentialStore(tmp_path / "missing").find_first("kiro") is None


# ---------------------------------------------------------------------------
# Credential extraction
# ---------------------------------------------------------------------------


class TestExtractToken:
    def test_present(self) -> None:
        assert extract_token({"access_token": " abc "}) == "abc"

    @pytest.mark.parametrize(
        "metadata",
        [None, {}, {"access_token": ""}, {"access_token": "   "}, {"access_token": 123}, {"token": "abc"}],
    )
    def test_missing(self, metadata) -> None:
        with pytest.raises(MissingCredentialFieldError) as exc_info:
            extract_token(metadata)
        assert exc_info.value.field == "access_token"

    def test_optional_str_ignores_other_types(self) -> None:
        assert optional_str({"k": ["x"]}, "k") is None
        assert optional_str({"k": "v"}, "k") == "v"


class TestTypedCredentials:
    def test_copilot(self) -> None:
        assert CopilotCredentials.from_metadata({"access_token": "t"}) == CopilotCredentials("t")

    def test_kiro_with_profile(self) -> None:
        creds = KiroCredentials.from_metadata({"access_token": "t", "profile_arn": "arn-9"})
        assert creds.profile_arn == "arn-9"

    def test_kiro_blank_profile_is_none(self) -> None:
        creds = KiroCredentials.from_metadata({"access_token": "t", "profile_arn": ""})
        assert creds.profile_arn is None

    def test_kiro_requires_token(self) -> None:
        with pytest.raises(MissingCredentialFieldError):
            KiroCredentials.from_metadata({"profile_arn": "arn-9"})
