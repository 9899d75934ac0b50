"""Serialization, CRC32/MPEG-2, system time conversion, and loopback communication and GPIO models."""

__version__ = "0.1.0"
__all__ = ["communication", "crc32", "gpio", "rodos_time", "serial"]