from .comparer import Comparer, DefaultComparer, FunctionComparer, KeyComparer, ReverseComparer
from .errors import (
    CollectionModifiedError,
    EmptyPriorityQueueError,
    EnumerationEndedError,
    EnumerationError,
    EnumerationNotStartedError,
)
from .priority_queue import PriorityQueue, PriorityQueueEnumerator

__all__ = [
    "PriorityQueue",
    "PriorityQueueEnumerator",
    "Comparer",
    "DefaultComparer",
    "FunctionComparer",
    "KeyComparer",
    "ReverseComparer",
    "EmptyPriorityQueueError",
    "EnumerationError",
    "CollectionModifiedError",
    "EnumerationNotStartedError",
    "EnumerationEndedError",
]
