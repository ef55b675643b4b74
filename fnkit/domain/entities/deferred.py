"""Single-assignment deferred results.

A ``Deferred`` starts pending and settles exactly once, either fulfilled
with a value or failed with a reason. Consumers subscribe with
``add_callbacks`` or chain with ``then``; asyncio code can simply
``await`` it.

Callbacks run through a module-level drain queue rather than nested calls,
so settling a long chain of deferreds that settle each other synchronously
keeps a flat call stack. A consequence: when ``resolve`` is called from
inside a callback, the dependent callbacks run after the current callback
returns rather than before ``resolve`` returns.

Not thread-safe: a deferred belongs to one thread / event loop.
"""

import asyncio
from collections import deque
from collections.abc import Callable, Generator
from enum import Enum
from typing import Any

from attrs import define, field

from fnkit.config import get_logger, settings
from fnkit.domain.errors import DeferredStateError, InvalidArgumentError, RejectedError

logger = get_logger(__name__)

Callback = Callable[[Any], Any]


class DeferredState(Enum):
    """Lifecycle of a deferred result."""

    PENDING = "pending"
    FULFILLED = "fulfilled"
    FAILED = "failed"


class _CallbackQueue:
    """Runs deferred callbacks one after another instead of recursively."""

    def __init__(self) -> None:
        self._pending: deque[tuple[Callback, Any]] = deque()
        self._draining = False

    def push(self, callback: Callback, payload: Any) -> None:
        self._pending.append((callback, payload))

    def drain(self) -> None:
        # A drain already running further up the stack picks up new entries
        if self._draining:
            return

        self._draining = True
        first_error: Exception | None = None
        try:
            while self._pending:
                callback, payload = self._pending.popleft()
                try:
                    callback(payload)
                except Exception as e:
                    # Keep draining so unrelated deferreds still settle
                    logger.opt(exception=e).error(
                        "Deferred callback {} raised", _describe(callback)
                    )
                    if first_error is None:
                        first_error = e
        finally:
            self._draining = False

        if first_error is not None:
            raise first_error


_queue = _CallbackQueue()


def _describe(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def as_exception(reason: Any) -> BaseException:
    """Return the reason itself if it is an exception, else wrap it."""
    if isinstance(reason, BaseException):
        return reason
    return RejectedError(reason)


@define(eq=False, repr=False)
class Deferred:
    """A value that becomes available later, or a failure.

    Example:
        >>> d = Deferred()
        >>> doubled = d.then(lambda v: v * 2)
        >>> d.resolve(21)
        True
        >>> doubled.result()
        42
    """

    _state: DeferredState = field(default=DeferredState.PENDING, init=False)
    _value: Any = field(default=None, init=False)
    _reason: Any = field(default=None, init=False)
    _adopting: bool = field(default=False, init=False)
    _callbacks: list[tuple[Callback | None, Callback | None]] = field(
        factory=list, init=False
    )

    # === Construction ===

    @classmethod
    def resolved(cls, value: Any = None) -> "Deferred":
        """Create a deferred already fulfilled with ``value``."""
        deferred = cls()
        deferred.resolve(value)
        return deferred

    @classmethod
    def rejected(cls, reason: Any) -> "Deferred":
        """Create a deferred already failed with ``reason``."""
        deferred = cls()
        deferred.reject(reason)
        return deferred

    # === State ===

    @property
    def state(self) -> DeferredState:
        return self._state

    @property
    def is_pending(self) -> bool:
        return self._state is DeferredState.PENDING

    @property
    def is_settled(self) -> bool:
        return self._state is not DeferredState.PENDING

    @property
    def value(self) -> Any:
        """Fulfilled value, or None when pending or failed."""
        return self._value

    @property
    def reason(self) -> Any:
        """Failure reason, or None when pending or fulfilled."""
        return self._reason

    def result(self) -> Any:
        """Return the fulfilled value or raise the failure.

        Raises:
            DeferredStateError: If the deferred is still pending
            RejectedError: If it failed with a non-exception reason
        """
        if self._state is DeferredState.PENDING:
            raise DeferredStateError("Deferred is still pending")
        if self._state is DeferredState.FAILED:
            raise as_exception(self._reason)
        return self._value

    # === Settlement ===

    def resolve(self, value: Any = None) -> bool:
        """Fulfil with ``value``, or adopt its state if it is a Deferred.

        Returns:
            True if this call settled (or started adopting), False if the
            deferred had already been settled and the call was ignored
        """
        if not self._claim("resolve"):
            return False

        if value is self:
            self._settle(
                DeferredState.FAILED,
                InvalidArgumentError("A deferred cannot be resolved with itself"),
            )
        elif isinstance(value, Deferred):
            self._adopting = True
            value.add_callbacks(
                lambda v: self._settle(DeferredState.FULFILLED, v),
                lambda r: self._settle(DeferredState.FAILED, r),
            )
        else:
            self._settle(DeferredState.FULFILLED, value)
        return True

    def reject(self, reason: Any) -> bool:
        """Fail with ``reason``.

        Returns:
            True if this call settled the deferred, False if it was ignored
        """
        if not self._claim("reject"):
            return False
        self._settle(DeferredState.FAILED, reason)
        return True

    def _claim(self, operation: str) -> bool:
        if self._state is DeferredState.PENDING and not self._adopting:
            return True

        if self._state is DeferredState.PENDING:
            message = f"Ignoring {operation}() on deferred adopting another deferred"
        else:
            message = f"Ignoring {operation}() on already settled deferred ({self._state.value})"
        if settings.sequencing.strict_settlement:
            raise DeferredStateError(message)
        logger.warning(message)
        return False

    def _settle(self, state: DeferredState, payload: Any) -> None:
        self._state = state
        if state is DeferredState.FULFILLED:
            self._value = payload
        else:
            self._reason = payload

        callbacks, self._callbacks = self._callbacks, []
        for on_fulfilled, on_failed in callbacks:
            self._enqueue(on_fulfilled, on_failed)
        _queue.drain()

    def _enqueue(self, on_fulfilled: Callback | None, on_failed: Callback | None) -> None:
        if self._state is DeferredState.FULFILLED:
            if on_fulfilled is not None:
                _queue.push(on_fulfilled, self._value)
        elif on_failed is not None:
            _queue.push(on_failed, self._reason)

    # === Subscription ===

    def add_callbacks(
        self,
        on_fulfilled: Callback | None,
        on_failed: Callback | None = None,
    ) -> "Deferred":
        """Subscribe to settlement.

        Callbacks fire in registration order. If the deferred has already
        settled, the matching callback fires right away.

        Returns:
            self, for fluent registration
        """
        if self._state is DeferredState.PENDING:
            self._callbacks.append((on_fulfilled, on_failed))
        else:
            self._enqueue(on_fulfilled, on_failed)
            _queue.drain()
        return self

    def then(
        self,
        on_fulfilled: Callback | None = None,
        on_failed: Callback | None = None,
    ) -> "Deferred":
        """Chain a transformation of this deferred's outcome.

        The returned deferred is fulfilled with the handler's return value
        (adopting it when it is a Deferred) or fails with whatever the
        handler raises. A missing handler passes the outcome through.
        """
        child = Deferred()

        def fulfilled(value: Any) -> None:
            if on_fulfilled is None:
                child.resolve(value)
                return
            try:
                outcome = on_fulfilled(value)
            except Exception as e:
                child.reject(e)
                return
            child.resolve(outcome)

        def failed(reason: Any) -> None:
            if on_failed is None:
                child.reject(reason)
                return
            try:
                outcome = on_failed(reason)
            except Exception as e:
                child.reject(e)
                return
            child.resolve(outcome)

        self.add_callbacks(fulfilled, failed)
        return child

    def catch(self, on_failed: Callback) -> "Deferred":
        """Shorthand for ``then(None, on_failed)``."""
        return self.then(None, on_failed)

    # === asyncio bridge ===

    def __await__(self) -> Generator[Any, None, Any]:
        if self._state is not DeferredState.PENDING:
            return self.result()

        future = asyncio.get_running_loop().create_future()

        def on_fulfilled(value: Any) -> None:
            if not future.done():
                future.set_result(value)

        def on_failed(reason: Any) -> None:
            if not future.done():
                future.set_exception(as_exception(reason))

        self.add_callbacks(on_fulfilled, on_failed)
        return (yield from future.__await__())

    def __repr__(self) -> str:
        if self._state is DeferredState.FULFILLED:
            return f"<Deferred fulfilled: {self._value!r}>"
        if self._state is DeferredState.FAILED:
            return f"<Deferred failed: {self._reason!r}>"
        return "<Deferred pending>"
