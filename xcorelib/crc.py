"""Cyclic redundancy checks: CRC-7, CRC-8 Dallas, CRC-16-CCITT and CRC-32.

Each update function takes the running value and a bytes-like object and
returns the new value.
"""

from __future__ import annotations

import binascii
import zlib


def _build_crc7_table():
    table = []
    for index in range(256):
        crc = 0
        value = index
        for _ in range(8):
            crc = (crc << 1) & 0xFF
            if (value & 0x80) ^ (crc & 0x80):
                crc ^= 0x09
            value = (value << 1) & 0xFF
        table.append((crc & 0x7F) << 1)
    return tuple(table)


def _build_crc8_dallas_table():
    table = []
    for index in range(256):
        crc = 0
        value = index
        for _ in range(8):
            if (crc ^ value) & 0x01:
                crc = ((crc ^ 0x18) >> 1) | 0x80
            else:
                crc >>= 1
            value >>= 1
        table.append(crc)
    return tuple(table)


_CRC7_TABLE = _build_crc7_table()
_CRC8_DALLAS_TABLE = _build_crc8_dallas_table()


def _octets(data):
    return memoryview(data).cast("B")


def crc7_update(crc, data):
    """Update a CRC-7 value (polynomial 0x09) with data.

    The running value is kept shifted left by one bit and shifted back on
    return, so chained calls should start each from zero.
    """
    crc &= 0xFF
    for byte in _octets(data):
        crc = (_CRC7_TABLE[crc ^ byte] ^ (crc << 7)) & 0xFF
    return crc >> 1


def crc8_dallas_update(crc, data):
    """Update a Dallas/Maxim CRC-8 value (reflected polynomial 0x31)."""
    crc &= 0xFF
    for byte in _octets(data):
        crc = _CRC8_DALLAS_TABLE[crc ^ byte]
    return crc


def crc16_ccitt_update(crc, data):
    """Update a CRC-16-CCITT value (polynomial 0x1021, no reflection)."""
    return binascii.crc_hqx(_octets(data), crc & 0xFFFF)


def crc32_update(crc, data):
    """Update a CRC-32 value (reflected polynomial 0xEDB88320)."""
    return zlib.crc32(_octets(data), crc & 0xFFFFFFFF) & 0xFFFFFFFF