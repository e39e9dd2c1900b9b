import logging
import time
from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import Any, Literal, TypeVar, overload

from tqdm import tqdm

from either_utils.lift import lift, lift_with_value
from either_utils.result import Pair, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
L = TypeVar("L")
R = TypeVar("R")


def successes(results: Iterable[Result[L, R]]) -> list[R]:
    """Success values, in order. Failures are skipped."""
    # each Result iterates over its success value, if any
    return [v for r in results for v in r]


def failures(results: Iterable[Result[L, R]]) -> list[L]:
    """Failure values, in order. Successes are skipped."""
    return [r.value for r in results if r.is_failure()]  # type: ignore[misc]


def partition(results: Iterable[Result[L, R]]) -> tuple[list[R], list[L]]:
    """
    Splits results into (successes, failures) in a single pass, so it's safe
    to use with one-shot iterators. Order within each list is preserved.
    """
    oks: list[R] = []
    errs: list[L] = []
    for r in results:
        if r.is_success():
            oks.append(r.value)  # type: ignore[arg-type]
        else:
            errs.append(r.value)  # type: ignore[arg-type]
    return oks, errs


@overload
def lift_map(
    op: Callable[[T], R],
    inputs: Iterable[T],
    *,
    with_value: Literal[True] = True,
    label: str | None = None,
    progress: bool = False,
    level: int = logging.INFO,
) -> list[Result[Pair[Exception, T], R]]:
    ...


@overload
def lift_map(
    op: Callable[[T], R],
    inputs: Iterable[T],
    *,
    with_value: Literal[False],
    label: str | None = None,
    progress: bool = False,
    level: int = logging.INFO,
) -> list[Result[Exception, R]]:
    ...


def lift_map(
    op: Callable[[T], R],
    inputs: Iterable[T],
    *,
    with_value: bool = True,
    label: str | None = None,
    progress: bool = False,
    level: int = logging.INFO,
) -> list[Result[Any, R]]:
    """
    Applies `op` to every input and returns one `Result` per input, in input
    order. A failing input never interrupts the rest of the batch.

    Args:
        op:
            The fallible operation to apply.
        inputs:
            The values to process, consumed once.
        with_value:
            If True (default) failures are `Failure(Pair(exception, input))`,
            see `lift_with_value`, otherwise `Failure(exception)`, see `lift`.
        label:
            Human-readable label for this batch. When given, the execution time
            and the success/failure counts are logged at `level`.
        progress:
            Display a tqdm progress bar.
        level:
            The log level for the batch stats (default: logging.INFO).
    """
    lifted: Callable[[T], Result[Any, R]] = (
        lift_with_value(op) if with_value else lift(op)
    )
    it: Iterable[T] = tqdm(inputs, desc=label) if progress else inputs

    if label is None:
        return [lifted(t) for t in it]

    start = time.perf_counter()
    results = [lifted(t) for t in it]
    elapsed = timedelta(seconds=time.perf_counter() - start)
    ok = sum(1 for r in results if r.is_success())
    logger.log(level, "%s took %s", label, elapsed)
    logger.log(
        level,
        "%s: %s succeeded, %s failed",
        label,
        f"{ok:,}",
        f"{len(results) - ok:,}",
    )
    return results
