"""Exceptions raised by the heap containers.

Each one subclasses the built-in exception callers already catch for the
same situation, so ``except IndexError`` keeps working around ``pop()``.
"""


class EmptyPriorityQueueError(IndexError):
    """Raised by pop()/peek() on an empty queue."""


class EnumerationError(RuntimeError):
    """Base class for misuse of a queue enumerator."""


class CollectionModifiedError(EnumerationError):
    """The queue changed after the enumerator was created."""

    def __init__(self, message: str = "collection was modified; enumeration operation may not execute") -> None:
        super().__init__(message)


class EnumerationNotStartedError(EnumerationError):
    def __init__(self, message: str = "enumeration has not started; call move_next()") -> None:
        super().__init__(message)


class EnumerationEndedError(EnumerationError):
    def __init__(self, message: str = "enumeration already finished") -> None:
        super().__init__(message)
