"""Bit counting, saturating arithmetic and byte order helpers.

Widths are given in bits. Byte order conversions treat values as they are
held in little-endian memory, so little-endian conversions leave a value
unchanged and big-endian conversions swap its bytes.
"""

from __future__ import annotations

_SATURATION_WIDTHS = (8, 16, 32, 64)
_SWAP_WIDTHS = (16, 32, 64)
_MASK32 = 0xFFFFFFFF


def _check_unsigned(value, width):
    if not 0 <= value < (1 << width):
        raise ValueError(f"value {value} does not fit in {width} unsigned bits")


def _limits(width, signed):
    if width not in _SATURATION_WIDTHS:
        raise ValueError(f"unsupported width: {width}")
    if signed:
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    return 0, (1 << width) - 1


def _check_operands(a, b, low, high):
    for operand in (a, b):
        if not low <= operand <= high:
            raise ValueError(f"operand {operand} is outside [{low}, {high}]")


def count_leading_zeros32(value):
    """Return the number of leading zero bits in a 32-bit value; 32 for zero."""
    _check_unsigned(value, 32)
    return 32 - value.bit_length()


def reverse_bits32(value):
    """Return a 32-bit value with the order of its bits reversed."""
    _check_unsigned(value, 32)
    value = ((value >> 1) & 0x55555555) | ((value & 0x55555555) << 1)
    value = ((value >> 2) & 0x33333333) | ((value & 0x33333333) << 2)
    value = ((value >> 4) & 0x0F0F0F0F) | ((value & 0x0F0F0F0F) << 4)
    return byte_swap(value & _MASK32, 32)


def saturated_add(a, b, width=32, signed=True):
    """Add two integers, clamping the sum to the range of the given type."""
    low, high = _limits(width, signed)
    _check_operands(a, b, low, high)
    return max(low, min(high, a + b))


def saturated_sub(a, b, width=32, signed=True):
    """Subtract b from a, clamping the difference to the range of the type."""
    low, high = _limits(width, signed)
    _check_operands(a, b, low, high)
    return max(low, min(high, a - b))


def byte_swap(value, width=32):
    """Reverse the byte order of an unsigned value of 16, 32 or 64 bits."""
    if width not in _SWAP_WIDTHS:
        raise ValueError(f"unsupported width: {width}")
    _check_unsigned(value, width)
    return int.from_bytes(value.to_bytes(width // 8, "little"), "big")


def to_big_endian(value, width=32):
    """Convert a value to big-endian byte order."""
    return byte_swap(value, width)


def from_big_endian(value, width=32):
    """Convert a big-endian value to native byte order."""
    return byte_swap(value, width)


def to_little_endian(value, width=32):
    """Convert a value to little-endian byte order."""
    if width not in _SWAP_WIDTHS:
        raise ValueError(f"unsupported width: {width}")
    _check_unsigned(value, width)
    return value


def from_little_endian(value, width=32):
    """Convert a little-endian value to native byte order."""
    return to_little_endian(value, width)