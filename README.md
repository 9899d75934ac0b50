# cobcsw

Small, dependency-free building blocks for on-board computer software.

## Modules

- `cobcsw.serial`: little-endian (de)serialization of fixed-width scalar
  types (`ScalarType`) and of records made of named fields (`Layout`).
  `serialize` and `deserialize` work on buffers of exactly the serial size;
  `serialize_to` and `deserialize_from` write into or read from a buffer at an
  offset and return the offset just past the data. Also `serial_size`,
  `total_serial_size`, `is_trivially_serializable` and `type_safe_zero`.
  Out-of-range values, short buffers and unserializable kinds raise
  `ValueError` or `TypeError`.
- `cobcsw.crc32`: `crc32(data)`, the CRC-32/MPEG-2 checksum (polynomial
  `0x04C11DB7`, initial value `0xFFFFFFFF`, no reflection, no final XOR).
- `cobcsw.rodos_time`: conversion between Unix seconds (32-bit) and system
  time in nanoseconds since 2000-01-01 UTC: `unix_to_rodos_time`,
  `rodos_to_unix_time`, `format_time`, `print_time`. Called without a time,
  the last three use the host clock.
- `cobcsw.communication`: `write_to`, `read_from`, `write_to_read_from` and
  `exchange` call an interface's `write`, `read` and `write_read` until a whole
  message is sent or received. `CommunicationInterface` is a loopback
  transport: written bytes can be read back, and `write_read` answers with the
  bytes sent. Its optional `chunk_size` limits how many bytes one call moves.
  Subclasses for other transports override the three methods.
- `cobcsw.gpio`: `GpioPin` on top of a `PinDriver` register model, with
  `PinDirection`, `PinState`, the board's pin indices (`PA0` … `PD2`), what
  they are wired to (`LED_PIN`, `EDU_UART_INDEX`, `FLASH_SPI_SCK_PIN`, …) and
  `pin_name`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from cobcsw.serial import Layout, ScalarType, deserialize, serialize

buffer = serialize(-2, ScalarType.INT32)  # b"\xfe\xff\xff\xff"
assert deserialize(buffer, ScalarType.INT32) == -2

record = Layout((("u16", ScalarType.UINT16), ("i32", ScalarType.INT32)))
data = record.serialize({"u16": 0xABCD, "i32": 0x12345678})
assert data == bytes([0xCD, 0xAB, 0x78, 0x56, 0x34, 0x12])
assert record.deserialize(data) == {"u16": 0xABCD, "i32": 0x12345678}
```

Pass `factory=` to `Layout` to have `deserialize` build an object from the
fields instead of a dict.

```python
from cobcsw.crc32 import crc32

checksum = crc32(b"123456789")
```

```python
from cobcsw.rodos_time import format_time, unix_to_rodos_time

t = unix_to_rodos_time(1_672_531_200)
print(format_time(t))  # DateUTC(DD/MM/YYYY HH:MIN:SS) : 01/01/2023 00:00:00
```

```python
from cobcsw.communication import CommunicationInterface, read_from, write_to, write_to_read_from

interface = CommunicationInterface(chunk_size=2)
write_to(interface, "hello")
assert read_from(interface, 5) == b"hello"

answer = write_to_read_from(interface, "Hello from SPI1!", 16)
assert answer.received == 16 and answer.text == "Hello from SPI1!"
```

```python
from cobcsw.gpio import LED_PIN, GpioPin, PinDirection, PinState, pin_name

pin = GpioPin(LED_PIN)
pin.direction(PinDirection.OUT)
pin.set()
assert pin.read() is PinState.SET
assert pin_name(LED_PIN) == "pa13"
```

## What it does not do

The package does not talk to real hardware. `CommunicationInterface` and
`PinDriver` are in-memory models; driving an actual UART, SPI bus or GPIO line
needs subclasses written for that device. There is no command-line program.