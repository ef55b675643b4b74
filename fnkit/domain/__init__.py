"""fnkit domain layer - pure helpers and combinators."""

from . import arrays, dates, entities, errors, functions, maths, urls

from .entities import Deferred, DeferredState
from .errors import (
    ChainStateError,
    DeferredStateError,
    FnkitError,
    InvalidArgumentError,
    RejectedError,
)
from .functions import (
    AsyncChain,
    ChainState,
    Curried,
    chain_async,
    compose,
    curry,
    function_name,
    pipe_functions,
    promisify,
    run_in_series,
    run_promises_in_series,
    sleep,
)

__all__ = [
    # Modules
    "arrays",
    "dates",
    "entities",
    "errors",
    "functions",
    "maths",
    "urls",
    # Deferred results
    "Deferred",
    "DeferredState",
    # Errors
    "ChainStateError",
    "DeferredStateError",
    "FnkitError",
    "InvalidArgumentError",
    "RejectedError",
    # Combinators
    "AsyncChain",
    "ChainState",
    "Curried",
    "chain_async",
    "compose",
    "curry",
    "function_name",
    "pipe_functions",
    "promisify",
    "run_in_series",
    "run_promises_in_series",
    "sleep",
]
