from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
V = TypeVar("V")
F = TypeVar("F")
S = TypeVar("S")


@dataclass(frozen=True)
class Pair(Generic[F, S]):
    """
    Immutable pair of two values, both of any type. `lift_with_value` uses it
    to carry the exception alongside the input that caused it.
    """

    first: F
    second: S

    @classmethod
    def of(cls, first: F, second: S) -> "Pair[F, S]":
        return cls(first, second)


@dataclass(frozen=True, repr=False)
class Result(Generic[L, R], Iterable[R]):
    """
    Represents either a failure or a success value (a disjoint union).

    Exactly one variant is populated: instances are always either `Failure` or
    `Success`, never the bare `Result`. A Result iterates over its success
    value, so it behaves like a zero- or one-element collection:

        list(Success(3)) -> [3]
        list(Failure(e)) -> []
    """

    _value: L | R

    def __post_init__(self) -> None:
        if type(self) is Result:
            raise TypeError("Result can't be instantiated, use Failure or Success")

    @staticmethod
    def of_failure(value: L) -> "Result[L, Any]":
        if value is None:
            raise ValueError("Failure value is required, None supplied")
        return Failure(value)

    @staticmethod
    def of_success(value: R) -> "Result[Any, R]":
        return Success(value)

    @property
    def value(self) -> L | R:
        raise NotImplementedError()

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def get_failure(self) -> L | None:
        return self._value if self.is_failure() else None  # type: ignore[return-value]

    def get_success(self) -> R | None:
        """
        Success value, or None on failure. NOTE: `Success(None)` also returns
        None here, use `is_success()` or iterate to tell the two apart.
        """
        return self._value if self.is_success() else None  # type: ignore[return-value]

    def map_failure(self, f: Callable[[L], V]) -> V | None:
        """Applies `f` to the failure value, `f` is not called on success"""
        if self.is_failure():
            return f(self._value)  # type: ignore[arg-type]
        return None

    def map_success(self, f: Callable[[R], V]) -> V | None:
        """Applies `f` to the success value, `f` is not called on failure"""
        if self.is_success():
            return f(self._value)  # type: ignore[arg-type]
        return None

    def __len__(self) -> int:
        return 1 if self.is_success() else 0

    def __bool__(self) -> bool:
        return self.is_success()

    def __iter__(self) -> Iterator[R]:
        return iter([self._value]) if self.is_success() else iter([])  # type: ignore[list-item]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@dataclass(frozen=True, repr=False)
class Failure(Result[L, Any]):
    @property
    def value(self) -> L:
        return self._value  # type: ignore[return-value]


@dataclass(frozen=True, repr=False)
class Success(Result[Any, R]):
    @property
    def value(self) -> R:
        return self._value  # type: ignore[return-value]
