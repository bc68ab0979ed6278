"""Cancellation and deadline propagation for outbound calls."""
from __future__ import annotations

import threading
import time

from gateway_registry.errors import AbortError, RequestTimeoutError


class AbortSignal:
    """An observable flag indicating whether an operation has been aborted."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    def _abort(self) -> None:
        self._event.set()


class AbortController:
    """Controls an :class:`AbortSignal` to cancel an in-flight operation."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self) -> None:
        self.signal._abort()


class CallContext:
    """A deadline plus an abort signal, handed down from the inbound request.

    Children created with :meth:`with_timeout` share the parent's signal and
    never extend the parent's deadline.
    """

    def __init__(
        self,
        deadline: float | None = None,
        signal: AbortSignal | None = None,
    ) -> None:
        self._deadline = deadline
        self.signal = signal or AbortSignal()

    @classmethod
    def background(cls) -> CallContext:
        """Return a context with no deadline that is never aborted."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Deadline on the :func:`time.monotonic` clock, if any."""
        return self._deadline

    def with_timeout(self, seconds: float) -> CallContext:
        """Derive a child whose deadline is at most *seconds* from now."""
        candidate = time.monotonic() + seconds
        if self._deadline is not None and self._deadline < candidate:
            candidate = self._deadline
        return CallContext(deadline=candidate, signal=self.signal)

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` when unbounded."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def raise_if_done(self) -> None:
        """Raise if the context was aborted or its deadline has passed."""
        if self.signal.aborted:
            raise AbortError("operation aborted by caller")
        left = self.remaining()
        if left is not None and left <= 0:
            raise RequestTimeoutError("deadline exceeded")
