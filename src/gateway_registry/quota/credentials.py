"""Typed views over loosely-typed credential metadata.

Metadata is validated once here. Adapters only ever see these dataclasses.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from gateway_registry.errors import MissingCredentialFieldError

ACCESS_TOKEN = "access_token"
PROFILE_ARN = "profile_arn"


def optional_str(metadata: Mapping[str, Any] | None, key: str) -> str | None:
    """Return a non-empty string field, or ``None`` if absent or not a string."""
    if not metadata:
        return None
    value = metadata.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def extract_token(metadata: Mapping[str, Any] | None) -> str:
    """Return the bearer token, raising if it is missing."""
    token = optional_str(metadata, ACCESS_TOKEN)
    if token is None:
        raise MissingCredentialFieldError(ACCESS_TOKEN)
    return token


@dataclass(frozen=True)
class CopilotCredentials:
    access_token: str

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any] | None) -> CopilotCredentials:
        return cls(access_token=extract_token(metadata))


@dataclass(frozen=True)
class KiroCredentials:
    access_token: str
    profile_arn: str | None = None

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any] | None) -> KiroCredentials:
        return cls(
            access_token=extract_token(metadata),
            profile_arn=optional_str(metadata, PROFILE_ARN),
        )
