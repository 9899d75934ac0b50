"""Complete writes and reads over byte-oriented communication interfaces."""

from __future__ import annotations

from typing import NamedTuple, Union

BytesLike = Union[bytes, bytearray, memoryview]


class Answer(NamedTuple):
    """The reply to a combined write and read."""

    received: int
    text: str


class CommunicationInterface:
    """A byte transport such as a UART or an SPI.

    This implementation loops the transmit line back to the receive line:
    bytes written can be read again, and a combined write and read answers
    with the bytes just written, as a bus with shorted data lines does.
    ``chunk_size`` limits how many bytes a single call moves. Transports for
    real devices override :meth:`write`, :meth:`read` and :meth:`write_read`.
    """

    def __init__(self, chunk_size: int | None = None) -> None:
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk size must be at least 1, got {chunk_size}")
        self._chunk_size = chunk_size
        self._pending = bytearray()

    def _limit(self, size: int) -> int:
        return size if self._chunk_size is None else min(size, self._chunk_size)

    def write(self, data: BytesLike) -> int:
        """Send some of ``data`` and return how many bytes were sent."""
        count = self._limit(len(data))
        self._pending += bytes(data[:count])
        return count

    def read(self, size: int) -> bytes:
        """Receive at most ``size`` bytes."""
        if not self._pending:
            raise EOFError("no data is waiting on the interface")
        count = self._limit(min(size, len(self._pending)))
        received = bytes(self._pending[:count])
        del self._pending[:count]
        return received

    def write_read(self, data: BytesLike, capacity: int) -> bytes:
        """Send ``data`` and return at most ``capacity`` bytes received meanwhile."""
        return bytes(data[:capacity])


def _as_bytes(data: str | BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def write_to(interface: CommunicationInterface, data: str | BytesLike) -> None:
    """Write all of ``data``, calling the interface until every byte is sent."""
    payload = _as_bytes(data)
    sent = 0
    while sent < len(payload):
        remaining = len(payload) - sent
        count = interface.write(payload[sent:])
        if not 0 <= count <= remaining:
            raise ValueError(f"interface reported {count} bytes sent out of {remaining}")
        sent += count


def read_from(interface: CommunicationInterface, size: int) -> bytes:
    """Read exactly ``size`` bytes, calling the interface until all have arrived."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    received = bytearray()
    while len(received) < size:
        chunk = interface.read(size - len(received))
        if len(chunk) > size - len(received):
            raise ValueError("interface returned more bytes than requested")
        received += chunk
    return bytes(received)


def write_to_read_from(
    interface: CommunicationInterface, message: str | BytesLike, capacity: int
) -> Answer:
    """Send ``message`` and receive an answer of at most ``capacity`` characters.

    The answer text ends at the first NUL character.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    reply = interface.write_read(_as_bytes(message), capacity)
    if len(reply) > capacity:
        raise ValueError(f"interface returned {len(reply)} bytes for a capacity of {capacity}")
    text = reply.split(b"\x00", 1)[0].decode("latin-1")
    return Answer(received=len(reply), text=text)


def exchange(interface: CommunicationInterface, data: BytesLike) -> bytes:
    """Send ``data`` and return as many bytes received, zero-filled if fewer arrived."""
    payload = bytes(data)
    reply = interface.write_read(payload, len(payload))
    if len(reply) > len(payload):
        raise ValueError(f"interface returned {len(reply)} bytes for {len(payload)} sent")
    return reply + bytes(len(payload) - len(reply))