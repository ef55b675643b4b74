"""Asynchronous sequencing combinators.

Everything here is single-threaded and cooperative. A step only starts
after the previous one has signalled completion, either by calling its
continuation (``chain_async``) or by settling its deferred
(``run_promises_in_series``). Failures travel through deferreds, never
as exceptions raised back into the code that started the sequence.
"""

import asyncio
import inspect
from collections.abc import Callable, Iterable
from enum import Enum
from functools import partial, reduce, wraps
from typing import Any

from attrs import define, field
from toolz.functoolz import is_arity

from fnkit.config import get_logger, settings
from fnkit.domain.entities.deferred import Deferred
from fnkit.domain.errors import ChainStateError, DeferredStateError, InvalidArgumentError

logger = get_logger(__name__)

Continuation = Callable[[], None]
Step = Callable[[Continuation], Any]


# === Callback adaptation ===


def promisify(fn: Callable[..., Any]) -> Callable[..., Deferred]:
    """
    Adapt a callback-style function into one returning a Deferred.

    ``fn`` must accept a completion callback ``(error, result)`` as its
    last positional argument and call it once. A non-None ``error`` fails
    the deferred with that exact object; otherwise it is fulfilled with
    ``result``. If ``fn`` raises before calling back, the deferred fails
    with the raised exception. A second callback with
    ``sequencing.strict_settlement`` set raises ``DeferredStateError`` out
    of the wrapper.

    Example:
        >>> def read(key, callback):
        ...     callback(None, {"a": 1}[key])
        >>> promisify(read)("a").result()
        1
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Deferred:
        deferred = Deferred()

        def callback(error: Any = None, result: Any = None) -> None:
            if error is not None:
                deferred.reject(error)
            else:
                deferred.resolve(result)

        try:
            fn(*args, callback, **kwargs)
        except Exception as e:
            if deferred.is_pending:
                deferred.reject(e)
            elif (
                isinstance(e, DeferredStateError)
                and settings.sequencing.strict_settlement
            ):
                raise
            else:
                logger.opt(exception=e).warning(
                    "{} raised after completing; ignoring", getattr(fn, "__name__", fn)
                )
        return deferred

    return wrapper


# === Continuation-passing chains ===


class ChainState(Enum):
    """Lifecycle of an async chain."""

    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@define(eq=False)
class AsyncChain:
    """Runs steps one at a time, each advancing the chain when it is done.

    Every step is called with its own ``advance`` continuation. Only the
    first call of the continuation belonging to the step in flight moves
    the chain on; repeated or stale calls are ignored with a warning (or
    raise ``ChainStateError`` when ``sequencing.strict_advance`` is set).

    The chain is done as soon as its final step returns; that step need
    not advance, and a later advance from it counts as stale.

    Steps that advance synchronously are driven by a loop, so long chains
    do not grow the stack. Any earlier step that never advances stalls the
    chain; this is not detected.
    """

    steps: tuple[Step, ...] = field(converter=tuple)
    completed: Deferred = field(factory=Deferred, init=False)
    _state: ChainState = field(default=ChainState.IDLE, init=False)
    _index: int | None = field(default=None, init=False)
    _next_index: int | None = field(default=None, init=False)
    _driving: bool = field(default=False, init=False)

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def index(self) -> int | None:
        """Position of the step in flight (or that ran last)."""
        return self._index

    def start(self) -> "AsyncChain":
        if self._state is not ChainState.IDLE:
            raise ChainStateError(f"Chain already started ({self._state.value})")
        self._schedule(0)
        return self

    def _continuation(self, index: int) -> Continuation:
        def advance() -> None:
            self._advance_from(index)

        return advance

    def _advance_from(self, index: int) -> None:
        if (
            self._state is not ChainState.RUNNING
            or index != self._index
            or self._next_index is not None
        ):
            message = (
                f"Ignoring advance from step {index}; "
                f"chain is {self._state.value} at step {self._index}"
            )
            if settings.sequencing.strict_advance:
                raise ChainStateError(message)
            logger.warning(message)
            return
        self._schedule(index + 1)

    def _schedule(self, index: int) -> None:
        self._next_index = index
        # Synchronous advances are picked up by the loop already running
        if not self._driving:
            self._drive()

    def _drive(self) -> None:
        self._driving = True
        try:
            while self._next_index is not None:
                index, self._next_index = self._next_index, None

                if index >= len(self.steps):
                    self._state = ChainState.DONE
                    logger.debug("Async chain finished after {} steps", len(self.steps))
                    self.completed.resolve(None)
                    return

                self._state = ChainState.RUNNING
                self._index = index
                try:
                    self.steps[index](self._continuation(index))
                except Exception as e:
                    logger.opt(exception=e).error("Async chain step {} raised", index)
                    self._state = ChainState.FAILED
                    self._next_index = None
                    self.completed.reject(e)
                    return

                # The final step ends the chain whether or not it advanced
                if index == len(self.steps) - 1 and self._next_index is None:
                    self._next_index = len(self.steps)
        finally:
            self._driving = False


def chain_async(steps: Iterable[Step]) -> AsyncChain:
    """
    Run continuation-passing steps in order.

    Args:
        steps: Callables each taking a zero-argument ``advance`` continuation

    Returns:
        The started AsyncChain; its ``completed`` deferred resolves once the
        last step has returned, or fails if a step raises

    Raises:
        InvalidArgumentError: If a step is not callable

    Example:
        >>> chain_async([
        ...     lambda advance: advance(),
        ...     lambda advance: loop.call_later(1, advance),
        ...     lambda advance: print("done"),
        ... ])
    """
    chain = AsyncChain(steps)
    for position, step in enumerate(chain.steps):
        if not callable(step):
            raise InvalidArgumentError(f"chain_async() step {position} is not callable")
    return chain.start()


# === Deferred pipelines ===


def _call_step(fn: Callable[..., Any], position: int, previous: Any) -> Any:
    # The first step and steps declaring no parameters are called bare
    if position == 0 or is_arity(0, fn) is True:
        return fn()
    return fn(previous)


def run_promises_in_series(fns: Iterable[Callable[..., Any]]) -> Deferred:
    """
    Run deferred-producing functions strictly one after another.

    The first function is called with no arguments. Each later one receives
    the value the previous one settled with, unless it declares no
    parameters. Functions may return a Deferred or a plain value. The first
    failure fails the result and no later function is called.

    Returns:
        Deferred settling with the last function's outcome

    Example:
        >>> run_promises_in_series([
        ...     lambda: Deferred.resolved(1),
        ...     lambda prev: Deferred.resolved(prev + 1),
        ... ]).result()
        2
    """
    steps = (partial(_call_step, fn, position) for position, fn in enumerate(fns))
    return reduce(lambda deferred, step: deferred.then(step), steps, Deferred.resolved(None))


async def run_in_series(fns: Iterable[Callable[..., Any]]) -> Any:
    """asyncio counterpart of ``run_promises_in_series``.

    Functions are called the same way; awaitable results (coroutines,
    futures, Deferreds) are awaited before the next function is called.
    The first exception propagates.
    """
    value: Any = None
    for position, fn in enumerate(fns):
        value = _call_step(fn, position, value)
        if inspect.isawaitable(value):
            value = await value
    return value


def sleep(ms: float) -> Deferred:
    """Deferred resolving to None after ``ms`` milliseconds.

    Must be called while an asyncio event loop is running.
    """
    deferred = Deferred()
    loop = asyncio.get_running_loop()
    loop.call_later(ms / 1000, deferred.resolve, None)
    return deferred
