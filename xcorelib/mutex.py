"""Mutual exclusion lock with timed acquisition."""

from __future__ import annotations

import threading


class Mutex:
    """Non-recursive lock; a holder that locks again blocks itself."""

    def __init__(self):
        self._lock = threading.Lock()

    def lock(self):
        """Block until the mutex is acquired."""
        self._lock.acquire()

    def try_lock(self, interval=0):
        """Try to acquire the mutex, waiting up to interval milliseconds.

        With a zero interval the attempt does not block. Returns True when
        the mutex was acquired.
        """
        if interval < 0:
            raise ValueError("interval must not be negative")
        if interval:
            return self._lock.acquire(timeout=interval / 1000)
        return self._lock.acquire(blocking=False)

    def unlock(self):
        """Release the mutex."""
        self._lock.release()

    @property
    def locked(self):
        """Whether the mutex is currently held."""
        return self._lock.locked()

    def __enter__(self):
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unlock()
        return None