"""Thread-safe unsigned integer with wrapping atomic operations."""

from __future__ import annotations

import threading

_WIDTHS = (8, 16, 32, 64)


class AtomicUnsigned:
    """An unsigned integer of fixed bit width updated under a lock.

    Arithmetic wraps modulo 2**width. Fetch operations return the value
    held before the update.
    """

    def __init__(self, value=0, width=32):
        if width not in _WIDTHS:
            raise ValueError(f"unsupported width: {width}")
        self._width = width
        self._mask = (1 << width) - 1
        self._lock = threading.Lock()
        self._value = self._check(value)

    @property
    def width(self):
        """Bit width of the value."""
        return self._width

    def _check(self, value):
        if not 0 <= value <= self._mask:
            raise ValueError(
                f"value {value} does not fit in {self._width} unsigned bits")
        return value

    def load(self):
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value):
        """Replace the current value."""
        value = self._check(value)
        with self._lock:
            self._value = value

    def compare_exchange(self, expected, desired):
        """Set the value to desired if it equals expected; report success."""
        self._check(expected)
        desired = self._check(desired)
        with self._lock:
            if self._value != expected:
                return False
            self._value = desired
            return True

    def _fetch_update(self, operand, operation):
        operand = self._check(operand)
        with self._lock:
            previous = self._value
            self._value = operation(previous, operand) & self._mask
            return previous

    def fetch_add(self, value):
        """Add value with wrap-around and return the previous value."""
        return self._fetch_update(value, lambda current, x: current + x)

    def fetch_sub(self, value):
        """Subtract value with wrap-around and return the previous value."""
        return self._fetch_update(value, lambda current, x: current - x)

    def fetch_and(self, value):
        """Bitwise AND with value and return the previous value."""
        return self._fetch_update(value, lambda current, x: current & x)

    def fetch_or(self, value):
        """Bitwise OR with value and return the previous value."""
        return self._fetch_update(value, lambda current, x: current | x)

    def __repr__(self):
        return f"AtomicUnsigned({self.load()}, width={self._width})"