"""Serialization of scalar values and user-defined layouts into little-endian bytes.

End users call :func:`serialize` and :func:`deserialize`. Those build on the
low-level :func:`serialize_to` and :func:`deserialize_from`, which write into or
read from a buffer at an offset and return the offset just past the data.
Scalar values are described by :class:`ScalarType`; composite values are
described by a :class:`Layout` of named fields.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Mapping, Sequence, Tuple, Union


class ScalarType(Enum):
    """Scalar types whose serialized form is a plain copy of their memory."""

    BYTE = auto()
    CHAR = auto()
    BOOL = auto()
    INT8 = auto()
    UINT8 = auto()
    INT16 = auto()
    UINT16 = auto()
    INT32 = auto()
    UINT32 = auto()
    INT64 = auto()
    UINT64 = auto()
    FLOAT = auto()
    DOUBLE = auto()

    @property
    def struct_format(self) -> str:
        """The little-endian struct format of this type."""
        return "<" + _FORMAT_CODES[self]

    @property
    def is_integer(self) -> bool:
        """Whether this is one of the fixed-width integer types."""
        return self in _INTEGER_TYPES


_FORMAT_CODES = {
    ScalarType.BYTE: "B",
    ScalarType.CHAR: "c",
    ScalarType.BOOL: "?",
    ScalarType.INT8: "b",
    ScalarType.UINT8: "B",
    ScalarType.INT16: "h",
    ScalarType.UINT16: "H",
    ScalarType.INT32: "i",
    ScalarType.UINT32: "I",
    ScalarType.INT64: "q",
    ScalarType.UINT64: "Q",
    ScalarType.FLOAT: "f",
    ScalarType.DOUBLE: "d",
}

_INTEGER_TYPES = frozenset(
    {
        ScalarType.INT8,
        ScalarType.UINT8,
        ScalarType.INT16,
        ScalarType.UINT16,
        ScalarType.INT32,
        ScalarType.UINT32,
        ScalarType.INT64,
        ScalarType.UINT64,
    }
)


Kind = Union[ScalarType, "Layout"]


@dataclass(frozen=True)
class Layout:
    """A user-defined type made of named fields, serialized one after another.

    ``factory`` is called with the deserialized fields as keyword arguments;
    without it :meth:`deserialize` returns a dict.
    """

    fields: Tuple[Tuple[str, Any], ...]
    factory: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        fields = tuple((name, kind) for name, kind in self.fields)
        for name, kind in fields:
            if serial_size(kind) == 0:
                raise TypeError(f"field {name!r} has a kind that is not serializable: {kind!r}")
        object.__setattr__(self, "fields", fields)

    def size(self) -> int:
        """Number of bytes a serialized value of this layout takes."""
        return sum(serial_size(kind) for _, kind in self.fields)

    def serialize(self, values: Any) -> bytes:
        """Serialize a mapping or an object with the layout's fields as attributes."""
        buffer = bytearray(self.size())
        self._write(buffer, 0, values)
        return bytes(buffer)

    def deserialize(self, source: bytes | bytearray | memoryview) -> Any:
        """Build a value from exactly :meth:`size` bytes."""
        _check_length(source, self.size())
        value, _ = self._read(source, 0)
        return value

    def _write(self, buffer: bytearray | memoryview, offset: int, values: Any) -> int:
        for name, kind in self.fields:
            field_value = values[name] if isinstance(values, Mapping) else getattr(values, name)
            offset = serialize_to(buffer, offset, field_value, kind)
        return offset

    def _read(self, source: bytes | bytearray | memoryview, offset: int) -> tuple[Any, int]:
        result = {}
        for name, kind in self.fields:
            result[name], offset = deserialize_from(source, offset, kind)
        if self.factory is not None:
            return self.factory(**result), offset
        return result, offset


def is_trivially_serializable(kind: Any) -> bool:
    """Whether ``kind`` is a scalar type that serializes as a plain memory copy."""
    return isinstance(kind, ScalarType)


def serial_size(kind: Any) -> int:
    """Serialized size of ``kind`` in bytes, or 0 if it is not serializable."""
    if isinstance(kind, ScalarType):
        return struct.calcsize(kind.struct_format)
    if isinstance(kind, Layout):
        return kind.size()
    return 0


def total_serial_size(*args: Any) -> int:
    """Sum of the serialized sizes of all given kinds."""
    return sum(serial_size(kind) for kind in args)


def _require_serializable(kind: Any) -> int:
    size = serial_size(kind)
    if size == 0:
        raise TypeError(f"not a serializable kind: {kind!r}")
    return size


def _check_length(source: Sequence[int] | bytes | bytearray | memoryview, size: int) -> None:
    if len(source) != size:
        raise ValueError(f"expected exactly {size} bytes, got {len(source)}")


def serialize_to(buffer: bytearray | memoryview, offset: int, value: Any, kind: Kind) -> int:
    """Write ``value`` as ``kind`` into ``buffer`` at ``offset``; return the next free offset."""
    size = _require_serializable(kind)
    if offset < 0 or offset + size > len(buffer):
        raise ValueError(f"{size} bytes do not fit into the buffer at offset {offset}")
    if isinstance(kind, Layout):
        return kind._write(buffer, offset, value)
    if kind is ScalarType.CHAR and isinstance(value, str):
        value = value.encode("latin-1")
    try:
        struct.pack_into(kind.struct_format, buffer, offset, value)
    except struct.error as error:
        raise ValueError(f"cannot serialize {value!r} as {kind.name}: {error}") from error
    return offset + size


def deserialize_from(
    source: bytes | bytearray | memoryview, offset: int, kind: Kind
) -> tuple[Any, int]:
    """Read a ``kind`` from ``source`` at ``offset``; return the value and the next offset."""
    size = _require_serializable(kind)
    if offset < 0 or offset + size > len(source):
        raise ValueError(f"{size} bytes are not available in the source at offset {offset}")
    if isinstance(kind, Layout):
        return kind._read(source, offset)
    (value,) = struct.unpack_from(kind.struct_format, source, offset)
    if kind is ScalarType.CHAR:
        value = value.decode("latin-1")
    return value, offset + size


def serialize(value: Any, kind: Kind) -> bytes:
    """Serialize ``value`` as ``kind`` into a new buffer of exactly its serial size."""
    buffer = bytearray(_require_serializable(kind))
    serialize_to(buffer, 0, value, kind)
    return bytes(buffer)


def deserialize(source: bytes | bytearray | memoryview, kind: Kind) -> Any:
    """Deserialize a ``kind`` from a buffer of exactly its serial size."""
    _check_length(source, _require_serializable(kind))
    value, _ = deserialize_from(source, 0, kind)
    return value


def type_safe_zero(kind: ScalarType) -> int:
    """The zero value of a fixed-width integer type."""
    if not isinstance(kind, ScalarType) or not kind.is_integer:
        raise TypeError(f"not a fixed-width integer type: {kind!r}")
    return 0