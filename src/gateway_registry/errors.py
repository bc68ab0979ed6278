"""Error hierarchy for the capability registry and quota layer."""
from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base error for all gateway_registry errors."""

    kind = "gateway_error"
    reauthenticate = False
    transient = False

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Return the error payload handed to the front end."""
        return {"error": self.message, "kind": self.kind}


# ---------------------------------------------------------------------------
# Caller-side errors
# ---------------------------------------------------------------------------


class InvalidInputError(GatewayError):
    """The caller supplied a missing or malformed identifier."""

    kind = "invalid_input"


class UnsupportedProviderError(InvalidInputError):
    """The credential's provider type has no usage adapter."""

    kind = "unsupported_provider"

    def __init__(self, provider: str, **kwargs: Any) -> None:
        super().__init__(f"no usage adapter for provider {provider!r}", **kwargs)
        self.provider = provider


class NotFoundError(GatewayError):
    """No credential is stored under the requested identifier."""

    kind = "not_found"
    reauthenticate = True


class MissingCredentialFieldError(GatewayError):
    """A required field is absent from the credential metadata."""

    kind = "missing_credential_field"
    reauthenticate = True

    def __init__(self, field: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"{field} not found in auth data", **kwargs)
        self.field = field


# ---------------------------------------------------------------------------
# Upstream errors
# ---------------------------------------------------------------------------


class UpstreamUnavailableError(GatewayError):
    """The provider could not be reached."""

    kind = "upstream_unavailable"
    transient = True


class NetworkError(UpstreamUnavailableError):
    """A transport-level failure occurred."""


class RequestTimeoutError(UpstreamUnavailableError):
    """The call ran past its deadline."""


class AbortError(UpstreamUnavailableError):
    """The caller cancelled the operation."""


class UpstreamRejectedError(GatewayError):
    """The provider answered with a non-success status."""

    kind = "upstream_rejected"

    def __init__(
        self,
        status_code: int,
        body: str,
        *,
        provider: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(f"API returned status {status_code}: {body}", cause=cause)
        self.status_code = status_code
        self.body = body
        self.provider = provider
        # Throttling and server faults may clear on their own.
        self.transient = status_code == 429 or status_code >= 500


class MalformedUpstreamResponseError(GatewayError):
    """The provider's body did not parse into the expected shape."""

    kind = "malformed_upstream_response"


class DiscoveryFailedError(GatewayError):
    """The secondary-identifier discovery call failed.

    Adapters catch this and continue without the identifier; it never
    reaches the resolver's caller.
    """

    kind = "discovery_failed"
