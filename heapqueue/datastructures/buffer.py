from __future__ import annotations
import ctypes
from typing import Any


def make_array(capacity: int):
    """Allocate a raw ctypes array of `capacity` py_object slots.

    Every slot starts out as None so unused capacity is always readable.
    A zero-length array is valid and is what an empty queue starts with.
    """
    if capacity < 0:
        raise ValueError("capacity must be >= 0")
    buf = (capacity * ctypes.py_object)()
    for i in range(capacity):
        buf[i] = None
    return buf


def copy_slots(src: Any, dst: Any, count: int, dst_index: int = 0) -> None:
    """Copy `src[0:count]` into `dst` starting at `dst_index`. O(count)."""
    for i in range(count):
        dst[dst_index + i] = src[i]


def clear_slots(buf: Any, start: int, stop: int) -> None:
    """Drop references held by slots in [start, stop)."""
    for i in range(start, stop):
        buf[i] = None
