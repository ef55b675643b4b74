"""Synchronous function combinators.

Composition and currying never inspect what the wrapped callables do;
whatever they raise reaches the caller unchanged.
"""

from collections.abc import Callable
from typing import Any

from attrs import define, field
from toolz import compose as _toolz_compose
from toolz import compose_left
from toolz.functoolz import num_required_args

from fnkit.config import get_logger
from fnkit.domain.errors import InvalidArgumentError

logger = get_logger(__name__)


# === Composition ===


def _require_callables(name: str, fns: tuple[Any, ...]) -> None:
    if not fns:
        raise InvalidArgumentError(f"{name}() requires at least one callable")
    for position, fn in enumerate(fns):
        if not callable(fn):
            raise InvalidArgumentError(
                f"{name}() argument {position} is not callable: {fn!r}"
            )


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Right-to-left function composition.

    The rightmost function receives the original arguments and may take
    several; every other function receives the previous result.

    Args:
        *fns: Callables to compose

    Returns:
        A callable computing ``fns[0](fns[1](...fns[-1](*args, **kwargs)))``

    Raises:
        InvalidArgumentError: If no callables are given or one is not callable

    Example:
        >>> add5 = lambda x: x + 5
        >>> multiply = lambda x, y: x * y
        >>> compose(add5, multiply)(5, 2)
        15
    """
    _require_callables("compose", fns)
    return _toolz_compose(*fns)


def pipe_functions(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Left-to-right function composition.

    The leftmost function receives the original arguments and may take
    several; every later function receives the previous result.

    Args:
        *fns: Callables to chain

    Returns:
        A callable computing ``fns[-1](...fns[1](fns[0](*args, **kwargs)))``

    Raises:
        InvalidArgumentError: If no callables are given or one is not callable
    """
    _require_callables("pipe_functions", fns)
    return compose_left(*fns)


# === Currying ===


@define(frozen=True, eq=False, repr=False)
class Curried:
    """A partial application that fires once enough positional args arrive.

    Each call returns a new ``Curried`` with the extra arguments appended;
    the instance itself never changes, so a partial can be reused as the
    start of several chains.
    """

    func: Callable[..., Any]
    arity: int
    args: tuple[Any, ...] = ()
    keywords: dict[str, Any] = field(factory=dict)

    @property
    def remaining(self) -> int:
        """Number of positional arguments still needed."""
        return max(self.arity - len(self.args), 0)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        accumulated = self.args + args
        keywords = {**self.keywords, **kwargs} if kwargs else self.keywords

        if len(accumulated) >= self.arity:
            return self.func(*accumulated, **keywords)

        return Curried(self.func, self.arity, accumulated, keywords)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", None) or repr(self.func)
        return f"<Curried {name} {len(self.args)}/{self.arity}>"


def curry(fn: Callable[..., Any], arity: int | None = None) -> Curried:
    """
    Curry a callable so it can be supplied its arguments in any grouping.

    An arity of 0 does not call ``fn`` straight away; the returned partial
    fires on its first call, with whatever arguments that call brings.

    Args:
        fn: Callable to curry
        arity: Positional arguments to collect before calling ``fn``;
            defaults to the number of required positional parameters

    Returns:
        A Curried partial with no arguments applied yet

    Raises:
        InvalidArgumentError: If ``fn`` is not callable, the arity is
            negative, or it cannot be determined and was not given

    Example:
        >>> curry(pow)(2)(10)
        1024
        >>> curry(min, 3)(10)(50)(2)
        2
    """
    if not callable(fn):
        raise InvalidArgumentError(f"curry() expects a callable, got {fn!r}")

    if arity is None:
        arity = num_required_args(fn)
        if arity is None:
            raise InvalidArgumentError(
                f"Cannot determine the arity of {fn!r}; pass it explicitly"
            )
    elif arity < 0:
        raise InvalidArgumentError(f"arity must be non-negative, got {arity}")

    return Curried(fn, arity)


# === Introspection ===


def function_name(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Log the name of ``fn`` at debug level and return it unchanged."""
    logger.debug(getattr(fn, "__name__", repr(fn)))
    return fn
