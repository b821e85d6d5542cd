"""
Person identity allocation.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class IdentityAllocator:
    """Monotonically increasing integer id source.

    Every person takes its id from an allocator at construction time. Ids
    are never reused; an allocator only moves forward.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("start must be a positive integer")
        self._next = start
        self._lock = threading.RLock()

    def next_id(self) -> int:
        """Return a fresh id and advance the counter."""
        with self._lock:
            allocated = self._next
            self._next += 1
        logger.debug("Allocated person id %d", allocated)
        return allocated

    def peek(self) -> int:
        """Return the id the next call to next_id() would produce."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(next={self._next})"


_default_allocator = IdentityAllocator()


def default_allocator() -> IdentityAllocator:
    """Return the process-wide allocator used when none is passed explicitly."""
    return _default_allocator
