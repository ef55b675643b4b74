"""fnkit - function combinators and small collection, math and date helpers.

Log records are disabled until the application calls
``fnkit.config.setup_loguru_logger`` or ``loguru.logger.enable("fnkit")``.
"""

from loguru import logger

from .domain import (
    AsyncChain,
    ChainState,
    ChainStateError,
    Curried,
    Deferred,
    DeferredState,
    DeferredStateError,
    FnkitError,
    InvalidArgumentError,
    RejectedError,
    arrays,
    chain_async,
    compose,
    curry,
    dates,
    function_name,
    maths,
    pipe_functions,
    promisify,
    run_in_series,
    run_promises_in_series,
    sleep,
    urls,
)

logger.disable(__name__)

__version__ = "0.1.0"

__all__ = [
    "AsyncChain",
    "ChainState",
    "ChainStateError",
    "Curried",
    "Deferred",
    "DeferredState",
    "DeferredStateError",
    "FnkitError",
    "InvalidArgumentError",
    "RejectedError",
    "arrays",
    "chain_async",
    "compose",
    "curry",
    "dates",
    "function_name",
    "maths",
    "pipe_functions",
    "promisify",
    "run_in_series",
    "run_promises_in_series",
    "sleep",
    "urls",
]
