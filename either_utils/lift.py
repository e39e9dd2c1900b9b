import functools
import logging
import reprlib
from collections.abc import Callable
from typing import Any, TypeVar

from either_utils.result import Failure, Pair, Result, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# falls back to "<Cls instance at 0x...>" when __repr__ itself raises
_repr = reprlib.Repr()
_repr.maxstring = 120
_repr.maxother = 120


def _name(op: Callable[..., Any]) -> str:
    return getattr(op, "__qualname__", None) or object.__repr__(op)


def _log_failure(op: Callable[..., Any], t: Any, e: Exception) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Lifted operation %s failed on %s: %s",
            _name(op),
            _repr.repr(t),
            _repr.repr(e),
        )


def lift(op: Callable[[T], R]) -> Callable[[T], Result[Exception, R]]:
    """
    Wraps `op` so that it returns a `Result` instead of raising. If `op(t)`
    returns `r` the wrapped function returns `Success(r)`, if it raises `e` the
    wrapped function returns `Failure(e)`. The input `t` is not kept, see
    `lift_with_value` for that.

    Only `Exception`s are captured, `KeyboardInterrupt` and friends propagate.

    Usage:

        results = map(lift(int), ["1", "x", "3"])
    """

    @functools.wraps(op)
    def lifted(t: T) -> Result[Exception, R]:
        try:
            r = op(t)
        except Exception as e:
            _log_failure(op, t, e)
            return Failure(e)
        return Success(r)

    return lifted


def lift_with_value(
    op: Callable[[T], R]
) -> Callable[[T], Result[Pair[Exception, T], R]]:
    """
    Same as `lift`, but on failure the wrapped function returns
    `Failure(Pair(e, t))`, so the caller can report which input failed and why.
    """

    @functools.wraps(op)
    def lifted(t: T) -> Result[Pair[Exception, T], R]:
        try:
            r = op(t)
        except Exception as e:
            _log_failure(op, t, e)
            return Failure(Pair.of(e, t))
        return Success(r)

    return lifted
