from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Comparer(Generic[T]):
    """Ordering strategy used by PriorityQueue.

    `compare(x, y)` returns a negative number when x sorts before y, zero
    when they tie and a positive number when x sorts after y. Instances
    are also callable, so `comparer(x, y)` is the same as
    `comparer.compare(x, y)`.
    """

    __slots__ = ()

    def compare(self, x: T, y: T) -> int:
        raise NotImplementedError

    def __call__(self, x: T, y: T) -> int:
        return self.compare(x, y)

    # -----------------------------
    # Factories
    # -----------------------------
    @staticmethod
    def default() -> "DefaultComparer":
        """Natural order, with None sorting before everything else."""
        return _DEFAULT

    @staticmethod
    def create(func: Callable[[T, T], int]) -> "FunctionComparer[T]":
        """Wrap a plain `cmp(x, y) -> int` function."""
        return FunctionComparer(func)

    @staticmethod
    def reverse(base: Optional["Comparer[T]"] = None) -> "ReverseComparer[T]":
        """Invert `base` (natural order if omitted), e.g. for a max-heap."""
        return ReverseComparer(base if base is not None else _DEFAULT)

    @staticmethod
    def from_key(key: Callable[[T], Any]) -> "KeyComparer[T]":
        """Order items by `key(item)` under the natural order."""
        return KeyComparer(key)


class DefaultComparer(Comparer[Any]):
    """Natural ordering via `<`.

    None is less than any present value and two Nones are equal. Values
    that cannot be ordered against each other raise TypeError.
    """

    __slots__ = ()

    def compare(self, x: Any, y: Any) -> int:
        if x is None:
            return 0 if y is None else -1
        if y is None:
            return 1
        if x < y:
            return -1
        if y < x:
            return 1
        return 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "DefaultComparer()"


class FunctionComparer(Comparer[T]):
    __slots__ = ("_func",)

    def __init__(self, func: Callable[[T, T], int]) -> None:
        if not callable(func):
            raise TypeError("comparison function must be callable")
        self._func = func

    def compare(self, x: T, y: T) -> int:
        return self._func(x, y)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"FunctionComparer({self._func!r})"


class ReverseComparer(Comparer[T]):
    __slots__ = ("_base",)

    def __init__(self, base: Comparer[T]) -> None:
        self._base = base

    @property
    def base(self) -> Comparer[T]:
        return self._base

    def compare(self, x: T, y: T) -> int:
        return self._base.compare(y, x)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ReverseComparer({self._base!r})"


class KeyComparer(Comparer[T]):
    __slots__ = ("_key",)

    def __init__(self, key: Callable[[T], Any]) -> None:
        if not callable(key):
            raise TypeError("key must be callable")
        self._key = key

    def compare(self, x: T, y: T) -> int:
        return _DEFAULT.compare(self._key(x), self._key(y))

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"KeyComparer({self._key!r})"


_DEFAULT = DefaultComparer()


def as_comparer(comparer: Any) -> Comparer[Any]:
    """Normalize None / Comparer / plain function into a Comparer."""
    if comparer is None:
        return _DEFAULT
    if isinstance(comparer, Comparer):
        return comparer
    return FunctionComparer(comparer)
