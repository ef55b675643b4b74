"""Value types shared by the combinators."""

from .deferred import Deferred, DeferredState, as_exception

__all__ = [
    "Deferred",
    "DeferredState",
    "as_exception",
]
