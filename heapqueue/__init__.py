"""Array-backed binary-heap priority queue."""

from .datastructures import *  # noqa: F401,F403
from .datastructures import __all__

__version__ = "0.1.0"
