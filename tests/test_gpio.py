import pytest

from cobcsw.gpio import (
    EDU_UPDATE_PIN,
    FLASH_CS_PIN,
    FRAM_CS_PIN,
    LED_PIN,
    GpioPin,
    PinDirection,
    PinDriver,
    PinState,
    pin_name,
)


def test_output_pin_reads_back_set_and_reset():
    pin = GpioPin(LED_PIN)
    pin.direction(PinDirection.OUT)
    assert pin.read() is PinState.RESET
    pin.set()
    assert pin.read() is PinState.SET
    pin.reset()
    assert pin.read() is PinState.RESET


def test_input_pin_follows_external_level():
    pin = GpioPin(EDU_UPDATE_PIN)
    pin.direction(PinDirection.IN)
    pin.driver.external_level = 1
    assert pin.read() is PinState.SET
    pin.driver.external_level = 0
    pin.set()
    assert pin.read() is PinState.RESET


def test_changing_direction_clears_output():
    pin = GpioPin(LED_PIN)
    pin.direction(PinDirection.OUT)
    pin.set()
    pin.direction(PinDirection.OUT)
    assert pin.read() is PinState.RESET


def test_unconfigured_pin_reads_reset():
    pin = GpioPin(LED_PIN)
    pin.set()
    assert pin.read() is PinState.RESET


def test_driver_masks_to_pin_count():
    driver = PinDriver(0)
    driver.init(True, 2, 7)
    assert driver.read_pins() == 3
    driver.set_pins(1)
    assert driver.read_pins() == 1
    driver.reset()
    assert driver.read_pins() == 0


def test_driver_rejects_invalid_configuration():
    with pytest.raises(ValueError):
        PinDriver(0).init(True, 0, 0)
    with pytest.raises(ValueError):
        PinDriver(-1)


def test_pin_names():
    assert pin_name(LED_PIN) == "pa13"
    assert pin_name(FLASH_CS_PIN) == "pb9"


def test_fram_and_flash_share_chip_select():
    assert pin_name(FRAM_CS_PIN) == "pb9"
    assert pin_name(FRAM_CS_PIN) == pin_name(FLASH_CS_PIN)


def test_unknown_pin_name_raises():
    with pytest.raises(ValueError):
        pin_name(4)