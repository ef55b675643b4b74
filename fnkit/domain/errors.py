"""Exception types raised by fnkit.

Failures produced by caller-supplied functions are never wrapped in these
types; they propagate as the original object. The one exception is a
deferred that failed with a reason that is not an exception: raising it
requires ``RejectedError``.
"""

from typing import Any


class FnkitError(Exception):
    """Base class for all fnkit errors."""


class InvalidArgumentError(FnkitError, ValueError):
    """An argument violates a combinator's or helper's contract."""


class DeferredStateError(FnkitError):
    """A deferred was used in a way its current state does not allow."""


class ChainStateError(FnkitError):
    """An async chain continuation was invoked out of turn."""


class RejectedError(FnkitError):
    """Raised for a deferred that failed with a non-exception reason."""

    def __init__(self, reason: Any) -> None:
        super().__init__(f"Deferred rejected with {reason!r}")
        self.reason = reason
