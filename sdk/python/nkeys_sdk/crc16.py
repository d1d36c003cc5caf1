"""CRC-16/XMODEM checksum used to protect encoded nkeys.

Polynomial 0x1021, initial value 0, no reflection and no final xor. The
codec appends the result little-endian.
"""

from __future__ import annotations

_POLY = 0x1021


def _build_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ _POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16(data: bytes | bytearray) -> int:
    """Compute the 16-bit checksum of *data*."""
    crc = 0
    for b in data:
        crc = ((crc << 8) & 0xFFFF) ^ _TABLE[((crc >> 8) ^ b) & 0xFF]
    return crc


def validate(data: bytes | bytearray, expected: int) -> bool:
    return crc16(data) == expected
