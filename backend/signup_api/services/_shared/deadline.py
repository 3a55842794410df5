"""Request-scoped time budgets.

A :class:`Deadline` is created at the edge of the system (the HTTP handler or
CLI command) and handed down through :class:`ServiceContext`. Services derive
tighter child deadlines from it and check it before every blocking call.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from signup_api.services._shared.errors import DeadlineExceededError

Clock = Callable[[], float]


class Deadline:
    """
    Absolute expiry on a monotonic clock, optionally cancellable.

    :param expires_at: Clock value after which the deadline is exceeded.
    :type expires_at: float
    :param clock: Monotonic clock, injectable for tests.
    :type clock: Callable[[], float]
    :param parent: Deadline this one was derived from; cancelling the parent
        cancels every child.
    :type parent: Deadline | None
    """

    __slots__ = ("expires_at", "_clock", "_parent", "_cancelled")

    def __init__(
        self,
        expires_at: float,
        *,
        clock: Clock = time.monotonic,
        parent: Deadline | None = None,
    ) -> None:
        self.expires_at = expires_at
        self._clock = clock
        self._parent = parent
        self._cancelled = False

    @classmethod
    def after(cls, seconds: float, *, clock: Clock = time.monotonic) -> Deadline:
        """Return a deadline ``seconds`` from now."""
        return cls(clock() + seconds, clock=clock)

    def child(self, seconds: float) -> Deadline:
        """
        Derive a deadline bounded by both ``seconds`` and this deadline.

        :param seconds: Budget for the child operation.
        :type seconds: float
        :returns: The earlier of now+``seconds`` and ``self.expires_at``.
        :rtype: Deadline
        """
        expires_at = min(self._clock() + seconds, self.expires_at)
        return Deadline(expires_at, clock=self._clock, parent=self)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        return self._parent is not None and self._parent.cancelled

    def remaining(self) -> float:
        """Seconds left before expiry, never negative."""
        return max(self.expires_at - self._clock(), 0.0)

    @property
    def expired(self) -> bool:
        return self.cancelled or self._clock() >= self.expires_at

    def check(self, operation: str) -> None:
        """
        Raise when the budget is exhausted before ``operation`` starts.

        :param operation: Step about to run, recorded on the error.
        :type operation: str
        :raises DeadlineExceededError: If expired or cancelled.
        """
        if self.cancelled:
            raise DeadlineExceededError(f"{operation}: cancelled")
        if self._clock() >= self.expires_at:
            raise DeadlineExceededError(f"{operation}: deadline exceeded")

    def __repr__(self) -> str:
        return f"<Deadline remaining={self.remaining():.3f}s cancelled={self.cancelled}>"
