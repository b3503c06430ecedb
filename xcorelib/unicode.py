"""Conversion between UTF-8 byte strings and UTF-16 code unit sequences.

UTF-16 text is a sequence of 16-bit code units given as integers. Both
encodings may carry a terminating zero, at which processing stops. A
``max_length`` limit counts the terminator, so at most ``max_length - 1``
elements are produced.
"""

from __future__ import annotations

import itertools

_START_MARK = (0x00, 0xC0, 0xE0, 0xF0)


def _capacity(max_length):
    if max_length is None:
        return None
    if max_length < 1:
        raise ValueError("max_length must be at least 1")
    return max_length - 1


def _code_points(source):
    """Yield code points from UTF-16 units, dropping unpaired surrogates."""
    units = iter(source)
    pending = None
    while True:
        if pending is not None:
            value, pending = pending, None
        else:
            value = next(units, 0) & 0xFFFF
        if not value:
            return

        if value & 0xF800 == 0xD800:
            if value > 0xDBFF:
                continue
            surrogate = next(units, 0) & 0xFFFF
            if not surrogate:
                return
            if not 0xDC00 <= surrogate <= 0xDFFF:
                pending = surrogate
                continue
            value = 0x10000 + (((value & 0x03FF) << 10) | (surrogate & 0x03FF))

        yield value


def _utf8_width(code_point):
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def _utf8_sequences(source):
    """Yield (lead byte, continuation bytes) pairs from UTF-8 data."""
    data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    stream = iter(data)
    for lead in stream:
        if not lead:
            return
        if lead & 0xE0 == 0xC0:
            width = 1
        elif lead & 0xF0 == 0xE0:
            width = 2
        elif lead & 0xF8 == 0xF0:
            width = 3
        else:
            width = 0
        tail = bytes(itertools.islice(stream, width))
        if len(tail) < width or 0 in tail:
            return
        yield lead, tail


def length_from_utf16(source):
    """Return the number of UTF-8 bytes needed for UTF-16 text."""
    return sum(_utf8_width(code_point) for code_point in _code_points(source))


def length_to_utf16(source):
    """Return the number of UTF-16 code units needed for UTF-8 text."""
    return sum(1 if len(tail) < 3 else 2 for _, tail in _utf8_sequences(source))


def from_utf16(source, max_length=None):
    """Convert UTF-16 code units to UTF-8 bytes.

    Characters that do not fit entirely in the limit are left out.
    """
    remaining = _capacity(max_length)
    output = bytearray()
    for code_point in _code_points(source):
        encoded = chr(code_point).encode("utf-8")
        if remaining is not None:
            if remaining < len(encoded):
                break
            remaining -= len(encoded)
        output += encoded
    return bytes(output)


def to_utf16(source, max_length=None):
    """Convert UTF-8 bytes to a list of UTF-16 code units."""
    limit = _capacity(max_length)
    units = []
    for lead, tail in _utf8_sequences(source):
        if limit is not None and len(units) >= limit:
            break

        width = len(tail)
        code = (lead & ~_START_MARK[width] & 0xFF) << (6 * width)
        for position, byte in enumerate(tail, start=1):
            code |= (byte & 0x3F) << (6 * (width - position))

        if code < 0x10000:
            units.append(code)
        else:
            code -= 0x10000
            units.append(0xD800 | ((code >> 10) & 0x03FF))
            units.append(0xDC00 | (code & 0x03FF))
    return units