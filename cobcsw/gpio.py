"""General-purpose I/O pins, the names of the board's pins and what they are wired to."""

from __future__ import annotations

from enum import Enum, IntEnum


class PinDirection(Enum):
    IN = "in"
    OUT = "out"


class PinState(Enum):
    SET = "set"
    RESET = "reset"


class UartIndex(IntEnum):
    UART_IDX1 = 1
    UART_IDX2 = 2


class SpiIndex(IntEnum):
    SPI_IDX1 = 1
    SPI_IDX2 = 2
    SPI_IDX3 = 3
    SPI_IDX4 = 4


PA0 = 0
PA1 = 1
PA2 = 2
PA3 = 3
PA5 = 5
PA6 = 6
PA7 = 7
PA8 = 8
PA9 = 9
PA10 = 10
PA11 = 11
PA12 = 12
PA13 = 13
PA14 = 14
PA15 = 15

PB0 = 16
PB1 = 17
PB3 = 19
PB4 = 20
PB5 = 21
PB6 = 22
PB7 = 23
PB8 = 24
PB9 = 25
PB12 = 28
PB13 = 29
PB14 = 30
PB15 = 31

PC0 = 32
PC1 = 33
PC2 = 34
PC3 = 35
PC4 = 36
PC5 = 37
PC6 = 38
PC7 = 39
PC9 = 41
PC10 = 42
PC11 = 43
PC12 = 44
PC13 = 45
PC14 = 46
PC15 = 47

PD2 = 50

_PIN_NAMES = {
    index: name
    for name, index in {
        "pa0": PA0, "pa1": PA1, "pa2": PA2, "pa3": PA3, "pa5": PA5, "pa6": PA6,
        "pa7": PA7, "pa8": PA8, "pa9": PA9, "pa10": PA10, "pa11": PA11, "pa12": PA12,
        "pa13": PA13, "pa14": PA14, "pa15": PA15,
        "pb0": PB0, "pb1": PB1, "pb3": PB3, "pb4": PB4, "pb5": PB5, "pb6": PB6,
        "pb7": PB7, "pb8": PB8, "pb9": PB9, "pb12": PB12, "pb13": PB13, "pb14": PB14,
        "pb15": PB15,
        "pc0": PC0, "pc1": PC1, "pc2": PC2, "pc3": PC3, "pc4": PC4, "pc5": PC5,
        "pc6": PC6, "pc7": PC7, "pc9": PC9, "pc10": PC10, "pc11": PC11, "pc12": PC12,
        "pc13": PC13, "pc14": PC14, "pc15": PC15,
        "pd2": PD2,
    }.items()
}

LED_PIN = PA13

EPS_BATTERY_GOOD_PIN = PC15
EPS_CHARGING_PIN = PC14

EDU_ENABLED_PIN = PB0
EDU_HEARTBEAT_PIN = PC5
EDU_UPDATE_PIN = PB1

EDU_UART_INDEX = UartIndex.UART_IDX1
EDU_UART_RX_PIN = PA10
EDU_UART_TX_PIN = PA15

UCI_UART_INDEX = UartIndex.UART_IDX2
UCI_UART_TX_PIN = PA2
UCI_UART_RX_PIN = PA3

FLASH_SPI_INDEX = SpiIndex.SPI_IDX1
FLASH_SPI_SCK_PIN = PA5
FLASH_SPI_MISO_PIN = PA6
FLASH_SPI_MOSI_PIN = PA7
FLASH_CS_PIN = PB9
FLASH_WRITE_PROTECTION_PIN = PC4

FRAM_SPI_INDEX = SpiIndex.SPI_IDX2
FRAM_SPI_SCK_PIN = PC7
FRAM_SPI_MISO_PIN = PC2
FRAM_SPI_MOSI_PIN = PC3
FRAM_CS_PIN = PB9  # shared with the flash chip select on purpose

COBC_SPI_INDEX = SpiIndex.SPI_IDX3
COBC_SPI_SCK_PIN = PC10
COBC_SPI_MISO_PIN = PC11
COBC_SPI_MOSI_PIN = PC12

RF_SPI_INDEX = SpiIndex.SPI_IDX4
RF_SPI_SCK_PIN = PB13
RF_SPI_MISO_PIN = PA11
RF_SPI_MOSI_PIN = PA1


def pin_name(pin_index: int) -> str:
    """The board name of a pin index, such as ``"pa13"``."""
    try:
        return _PIN_NAMES[pin_index]
    except KeyError:
        raise ValueError(f"no board pin has index {pin_index!r}") from None


class PinDriver:
    """Register-level model of a group of GPIO lines starting at one pin.

    Output lines read back what was last written to them; input lines read
    ``external_level``, the level applied from outside.
    """

    def __init__(self, pin_index: int) -> None:
        if pin_index < 0:
            raise ValueError(f"pin index must not be negative, got {pin_index}")
        self.pin_index = pin_index
        self.external_level = 0
        self._configured = False
        self._is_output = False
        self._mask = 0
        self._value = 0

    def reset(self) -> None:
        """Return the lines to their unconfigured state."""
        self._configured = False
        self._is_output = False
        self._mask = 0
        self._value = 0

    def init(self, is_output: bool, number_of_pins: int, initial_value: int) -> None:
        """Configure ``number_of_pins`` lines as outputs or inputs."""
        if number_of_pins < 1:
            raise ValueError(f"at least one pin is needed, got {number_of_pins}")
        self._configured = True
        self._is_output = bool(is_output)
        self._mask = (1 << number_of_pins) - 1
        self._value = initial_value & self._mask if self._is_output else 0

    def set_pins(self, value: int) -> None:
        """Drive the output lines; has no effect on inputs or unconfigured lines."""
        if self._configured and self._is_output:
            self._value = value & self._mask

    def read_pins(self) -> int:
        """Read the current level of the lines."""
        if not self._configured:
            return 0
        if self._is_output:
            return self._value
        return self.external_level & self._mask


class GpioPin:
    """A single GPIO pin."""

    def __init__(self, pin_index: int, driver: PinDriver | None = None) -> None:
        self.pin_index = pin_index
        self.driver = PinDriver(pin_index) if driver is None else driver

    def direction(self, pin_direction: PinDirection) -> None:
        """Configure the pin as input or output, initially low."""
        self.driver.reset()
        self.driver.init(pin_direction is PinDirection.OUT, 1, 0)

    def set(self) -> None:
        self.driver.set_pins(1)

    def reset(self) -> None:
        self.driver.set_pins(0)

    def read(self) -> PinState:
        return PinState.RESET if self.driver.read_pins() == 0 else PinState.SET