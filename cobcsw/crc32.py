"""CRC32/MPEG-2 checksum: polynomial 0x04C11DB7, initial value 0xFFFFFFFF,
no reflection and no final XOR."""

from __future__ import annotations

CRC32_POLYNOMIAL = 0x04C11DB7
CRC32_INITIAL_VALUE = 0xFFFFFFFF

_MASK32 = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        value = index << 24
        for _ in range(8):
            if value & 0x80000000:
                value = ((value << 1) ^ CRC32_POLYNOMIAL) & _MASK32
            else:
                value = (value << 1) & _MASK32
        table.append(value)
    return tuple(table)


_TABLE = _build_table()


def crc32(data: bytes | bytearray | memoryview) -> int:
    """Return the 32-bit CRC32/MPEG-2 checksum of ``data``."""
    crc = CRC32_INITIAL_VALUE
    for byte in memoryview(data).cast("B"):
        crc = ((crc << 8) & _MASK32) ^ _TABLE[((crc >> 24) ^ byte) & 0xFF]
    return crc