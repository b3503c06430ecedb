"""Counting semaphore with timed waits and a readable value."""

from __future__ import annotations

import threading
import time


class Semaphore:
    """Counting semaphore whose current count can be queried."""

    def __init__(self, value=0):
        self._value = value
        self._condition = threading.Condition(threading.Lock())

    def post(self):
        """Increment the count, waking one waiter."""
        with self._condition:
            self._value += 1
            self._condition.notify()

    def wait(self):
        """Block until the count is positive, then decrement it."""
        with self._condition:
            self._condition.wait_for(lambda: self._value > 0)
            self._value -= 1

    def try_wait(self, timeout=0):
        """Try to decrement the count, waiting up to timeout milliseconds.

        With a zero timeout the attempt does not block. Returns True when
        the count was decremented.
        """
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        deadline = time.monotonic() + timeout / 1000
        with self._condition:
            while self._value <= 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._condition.wait(remaining)
            self._value -= 1
            return True

    def value(self):
        """Return the current count."""
        with self._condition:
            return self._value