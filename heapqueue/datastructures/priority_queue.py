from __future__ import annotations
import threading
from collections.abc import Sized
from typing import Any, Callable, Generic, Iterable, Iterator, List, MutableSequence, Optional, TypeVar, Union

from .buffer import clear_slots, copy_slots, make_array
from .comparer import Comparer, as_comparer
from .errors import (
    CollectionModifiedError,
    EmptyPriorityQueueError,
    EnumerationEndedError,
    EnumerationNotStartedError,
)

T = TypeVar("T")

ComparerLike = Union[Comparer[T], Callable[[T, T], int], None]

# Guards the one-time creation of every queue's sync_root.
_SYNC_ROOT_GUARD = threading.Lock()


class PriorityQueue(Generic[T]):
    """A binary min-heap over a ctypes slot array.

    The element at the root is always a minimal one under `comparer`
    (natural order by default). Ties are not broken by insertion order.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object`; slots past `count` hold None.
    • Capacity starts at 4 on first push and doubles (at least +4) when full.
    • Every push/pop/clear bumps `_version`, which invalidates open enumerators.
    • Iteration and `to_list()` yield heap storage order, NOT sorted order.
    """

    __slots__ = ("_buf", "_size", "_version", "_comparer", "_sync_root")

    DEFAULT_CAPACITY = 4
    MINIMUM_GROW = 4
    GROW_FACTOR = 200  # percent
    TRIM_THRESHOLD = 0.9

    def __init__(self, capacity: int = 0, comparer: ComparerLike = None) -> None:
        if not isinstance(capacity, int):
            raise TypeError("capacity must be an int")
        if capacity < 0:
            raise ValueError("capacity must be a non-negative number")
        self._comparer: Comparer[T] = as_comparer(comparer)
        self._buf = make_array(capacity)
        self._size = 0
        self._version = 0
        self._sync_root: Optional[threading.RLock] = None

    @classmethod
    def from_iterable(cls, collection: Iterable[T], comparer: ComparerLike = None) -> "PriorityQueue[T]":
        """Build a queue holding every element of `collection` in O(n).

        Sized collections are copied straight into a buffer of exactly
        `len(collection)` slots; other iterables are appended one by one.
        """
        if collection is None:
            raise ValueError("collection must not be None")

        queue: PriorityQueue[T] = cls(0, comparer)
        if isinstance(collection, Sized):
            queue._init_from_sized(collection)  # type: ignore[arg-type]
        else:
            queue._init_from_iterable(collection)
        queue._heapify()
        return queue

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _init_from_sized(self, source: Iterable[T]) -> None:
        self._buf = make_array(len(source))  # type: ignore[arg-type]
        self._size = 0
        for item in source:
            self._buf[self._size] = item
            self._size += 1

    def _init_from_iterable(self, source: Iterable[T]) -> None:
        for item in source:
            if self._size == len(self._buf):
                self._grow()
            self._buf[self._size] = item
            self._size += 1

    def _grow(self) -> None:
        """Enlarge the buffer when it is full."""
        capacity = len(self._buf)
        if self._size == 0:
            self._buf = make_array(self.DEFAULT_CAPACITY)
            return

        new_capacity = capacity * self.GROW_FACTOR // 100
        if new_capacity < capacity + self.MINIMUM_GROW:
            new_capacity = capacity + self.MINIMUM_GROW

        new_buf = make_array(new_capacity)
        copy_slots(self._buf, new_buf, self._size)
        self._buf = new_buf

    def _sift_up(self, idx: int) -> None:
        buf = self._buf
        compare = self._comparer.compare
        value = buf[idx]
        while idx > 0:
            parent = (idx - 1) // 2
            parent_value = buf[parent]
            if compare(value, parent_value) >= 0:
                break
            buf[idx] = parent_value
            idx = parent
        buf[idx] = value

    def _sift_down(self, idx: int) -> None:
        buf = self._buf
        n = self._size
        compare = self._comparer.compare
        value = buf[idx]
        while 2 * idx + 1 < n:
            child = 2 * idx + 1
            child_value = buf[child]
            right = child + 1
            if right < n:
                right_value = buf[right]
                if compare(child_value, right_value) > 0:
                    child, child_value = right, right_value
            if compare(value, child_value) <= 0:
                break
            buf[idx] = child_value
            idx = child
        buf[idx] = value

    def _heapify(self) -> None:
        """Transform the live slots into a heap in-place in O(n) time."""
        for i in range(self._size // 2 - 1, -1, -1):
            self._sift_down(i)

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def comparer(self) -> Comparer[T]:
        return self._comparer

    @property
    def count(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Number of allocated slots (live + unused)."""
        return len(self._buf)

    @property
    def is_synchronized(self) -> bool:
        return False

    @property
    def sync_root(self) -> threading.RLock:
        """Lock callers may use to serialize access; the queue never takes it."""
        if self._sync_root is None:
            with _SYNC_ROOT_GUARD:
                if self._sync_root is None:
                    self._sync_root = threading.RLock()
        return self._sync_root

    def push(self, item: T) -> None:
        """Push item onto the heap (amortized O(log n)). None is allowed."""
        if self._size == len(self._buf):
            self._grow()
        self._buf[self._size] = item
        self._sift_up(self._size)
        self._size += 1
        self._version += 1

    def pop(self) -> T:
        """Pop and return the smallest item (O(log n))."""
        if self._size == 0:
            raise EmptyPriorityQueueError("pop from empty priority queue")
        buf = self._buf
        self._size -= 1
        top = buf[0]
        buf[0] = buf[self._size]
        buf[self._size] = None
        self._sift_down(0)
        self._version += 1
        return top

    def peek(self) -> T:
        """Return the smallest item without removing it (O(1))."""
        if self._size == 0:
            raise EmptyPriorityQueueError("peek at empty priority queue")
        return self._buf[0]

    def clear(self) -> None:
        """Remove all items. Keeps capacity; call trim_excess() to release it."""
        if self._size > 0:
            clear_slots(self._buf, 0, self._size)
            self._size = 0
        self._version += 1

    def contains(self, item: Any) -> bool:
        """Return True if an equal item is queued (linear scan, uses ==)."""
        buf = self._buf
        if item is None:
            for i in range(self._size):
                if buf[i] is None:
                    return True
            return False
        for i in range(self._size):
            if buf[i] == item:
                return True
        return False

    def copy_to(self, array: MutableSequence[Any], index: int = 0) -> None:
        """Copy the live elements, in storage order, into `array` at `index`.

        Raises:
            ValueError: `array` is None, too short, or cannot hold the elements.
            IndexError: `index` is negative or past the end of `array`.
        """
        if array is None:
            raise ValueError("array must not be None")
        length = len(array)
        if index < 0 or index > length:
            raise IndexError("index was out of range; must be non-negative and not beyond the array")
        if length - index < self._size:
            raise ValueError("destination array is not long enough to copy all the items at the given index")
        try:
            copy_slots(self._buf, array, self._size, index)
        except TypeError as exc:
            raise ValueError("destination array type is incompatible with the queued items") from exc

    def to_list(self) -> List[T]:
        """Snapshot of the live elements in storage order (not sorted)."""
        out: List[T] = [None] * self._size  # type: ignore[list-item]
        copy_slots(self._buf, out, self._size)
        return out

    def trim_excess(self) -> None:
        """Shrink the buffer to `count` slots when under 90% of capacity is used."""
        threshold = int(len(self._buf) * self.TRIM_THRESHOLD)
        if self._size < threshold:
            new_buf = make_array(self._size)
            copy_slots(self._buf, new_buf, self._size)
            self._buf = new_buf

    def get_enumerator(self) -> "PriorityQueueEnumerator[T]":
        return PriorityQueueEnumerator(self)

    def __iter__(self) -> "PriorityQueueEnumerator[T]":
        # Iterates over storage order (heap order), not sorted order
        return PriorityQueueEnumerator(self)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PriorityQueue(count={self._size})"


class PriorityQueueEnumerator(Iterator[T]):
    """Cursor over a PriorityQueue in storage order.

    Captures the queue's version on creation; any push/pop/clear after that
    makes move_next() and reset() raise CollectionModifiedError. Supports
    both the explicit move_next()/current protocol and plain `for` loops.
    """

    __slots__ = ("_queue", "_index", "_version", "_current")

    _NOT_STARTED = -1
    _ENDED = -2

    def __init__(self, queue: PriorityQueue[T]) -> None:
        self._queue = queue
        self._version = queue._version
        self._index = self._NOT_STARTED
        self._current: Optional[T] = None

    def move_next(self) -> bool:
        """Advance to the next element; False once the end is reached."""
        queue = self._queue
        if self._version != queue._version:
            raise CollectionModifiedError()
        if self._index == self._ENDED:
            return False

        self._index += 1
        if self._index == queue._size:
            self._index = self._ENDED
            self._current = None
            return False

        self._current = queue._buf[self._index]
        return True

    @property
    def current(self) -> T:
        if self._index < 0:
            if self._index == self._NOT_STARTED:
                raise EnumerationNotStartedError()
            raise EnumerationEndedError()
        return self._current  # type: ignore[return-value]

    def reset(self) -> None:
        """Rewind to before the first element."""
        if self._version != self._queue._version:
            raise CollectionModifiedError()
        self._index = self._NOT_STARTED
        self._current = None

    def dispose(self) -> None:
        self._index = self._ENDED
        self._current = None

    def __iter__(self) -> "PriorityQueueEnumerator[T]":
        return self

    def __next__(self) -> T:
        if not self.move_next():
            raise StopIteration
        return self._current  # type: ignore[return-value]

    def __enter__(self) -> "PriorityQueueEnumerator[T]":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.dispose()
