"""A lock that a thread cannot take twice, and a guard for it."""

from __future__ import annotations

import threading
from typing import Any


class WebLock:
    """Mutual exclusion that notices when the holding thread asks again."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._owner: int | None = None

    def lock(self) -> bool:
        """Take the lock, waiting if needed.

        Returns False without waiting if the calling thread already holds it.
        """
        me = threading.get_ident()
        if self._owner == me:
            return False
        self._lock.acquire()
        self._owner = me
        return True

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        self._owner = None
        if self._lock.locked():
            self._lock.release()


class WebLockGuard:
    """Holds a :class:`WebLock` for the duration of a ``with`` block.

    Only releases the lock if it was the one that took it.
    """

    def __init__(self, lock: WebLock) -> None:
        self._lock = lock
        self.acquired = False

    def __enter__(self) -> WebLockGuard:
        self.acquired = self._lock.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        if self.acquired:
            self.acquired = False
            self._lock.unlock()