"""Function combinators: composition, currying and async sequencing."""

from .composition import Curried, compose, curry, function_name, pipe_functions
from .sequencing import (
    AsyncChain,
    ChainState,
    chain_async,
    promisify,
    run_in_series,
    run_promises_in_series,
    sleep,
)

__all__ = [
    # Composition
    "compose",
    "pipe_functions",
    # Currying
    "Curried",
    "curry",
    "function_name",
    # Sequencing
    "AsyncChain",
    "ChainState",
    "chain_async",
    "promisify",
    "run_in_series",
    "run_promises_in_series",
    "sleep",
]
