import pytest

from bouffalo.hal.glb_common import Drive, Pull
from bouffalo.hal.glb_v1 import (
    Function,
    GpioConfig,
    GpioInterruptMode,
    InterruptMode,
    RegisterBlock,
)

_ORDER = [
    "gpio_config",
    "gpio_input_value",
    "gpio_output_value",
    "gpio_output_enable",
    "gpio_interrupt_mask",
    "gpio_interrupt_state",
    "gpio_interrupt_clear",
    "gpio_interrupt_mode",
]


def test_gpio_config_offset():
    assert RegisterBlock.offset_of("gpio_config") == 0x100


def test_offsets_follow_declaration_order():
    offsets = [RegisterBlock.offset_of(name) for name in _ORDER]
    assert offsets == sorted(offsets)
    assert all(b - a >= 4 for a, b in zip(offsets, offsets[1:]))
    assert all(offset % 4 == 0 for offset in offsets)


def test_gpio_config_array_fits_before_input_value():
    span = RegisterBlock.offset_of("gpio_input_value") - RegisterBlock.offset_of(
        "gpio_config"
    )
    assert span >= 16 * 4


def test_unknown_register_raises():
    with pytest.raises(KeyError):
        RegisterBlock.offset_of("uart_config")


@pytest.mark.parametrize("idx", [0, 1])
def test_input_enable_round_trip(idx):
    val = GpioConfig().enable_input(idx)
    assert val.is_input_enabled(idx)
    assert not val.is_input_enabled(1 - idx)
    assert val.disable_input(idx) == GpioConfig()


@pytest.mark.parametrize("idx", [0, 1])
def test_schmitt_round_trip(idx):
    val = GpioConfig().enable_schmitt(idx)
    assert val.is_schmitt_enabled(idx)
    assert not val.is_schmitt_enabled(1 - idx)
    assert val.disable_schmitt(idx) == GpioConfig()


def test_input_enable_of_pin_zero_is_lowest_bit():
    assert GpioConfig().enable_input(0).value == 1


@pytest.mark.parametrize("idx", [0, 1])
def test_drive_round_trip(idx):
    for drive in Drive:
        val = GpioConfig().set_drive(idx, drive)
        assert val.drive(idx) == drive
        assert val.drive(1 - idx) == Drive.DRIVE0


@pytest.mark.parametrize("idx", [0, 1])
def test_pull_round_trip(idx):
    for pull in Pull:
        val = GpioConfig().set_pull(idx, pull)
        assert val.pull(idx) == pull
        assert val.pull(1 - idx) == Pull.NONE


@pytest.mark.parametrize("idx", [0, 1])
def test_function_round_trip(idx):
    for function in Function:
        val = GpioConfig().set_function(idx, function)
        assert val.function(idx) == function
        assert val.function(1 - idx) == Function.CLK_OUT


def test_function_gpio_on_pin_zero():
    assert GpioConfig().set_function(0, Function.GPIO).value == 0x00000B00


def test_pins_are_independent():
    val = (
        GpioConfig()
        .set_function(0, Function.UART)
        .set_function(1, Function.SPI)
        .set_pull(0, Pull.UP)
        .set_drive(1, Drive.DRIVE3)
    )
    assert val.function(0) == Function.UART
    assert val.function(1) == Function.SPI
    assert val.pull(0) == Pull.UP
    assert val.pull(1) == Pull.NONE
    assert val.drive(0) == Drive.DRIVE0
    assert val.drive(1) == Drive.DRIVE3


def test_overwriting_field_replaces_value():
    val = GpioConfig().set_drive(0, Drive.DRIVE3).set_drive(0, Drive.DRIVE1)
    assert val.drive(0) == Drive.DRIVE1
    assert val == GpioConfig().set_drive(0, Drive.DRIVE1)


def test_invalid_function_field_raises():
    with pytest.raises(ValueError):
        GpioConfig(0x5 << 8).function(0)


def test_invalid_pull_field_raises():
    with pytest.raises(ValueError):
        GpioConfig(0x3 << 4).pull(0)


@pytest.mark.parametrize("idx", [-1, 2])
def test_pin_index_out_of_range_raises(idx):
    with pytest.raises(ValueError):
        GpioConfig().enable_input(idx)


def test_interrupt_mode_round_trip():
    for idx in range(10):
        for mode in InterruptMode:
            val = GpioInterruptMode().set_interrupt_mode(idx, mode)
            assert val.interrupt_mode(idx) == mode
            others = [i for i in range(10) if i != idx]
            assert all(
                val.interrupt_mode(i) == InterruptMode.SYNC_FALLING_EDGE
                for i in others
            )


def test_interrupt_mode_slots_are_independent():
    val = (
        GpioInterruptMode()
        .set_interrupt_mode(0, InterruptMode.ASYNC_HIGH_LEVEL)
        .set_interrupt_mode(1, InterruptMode.SYNC_RISING_EDGE)
        .set_interrupt_mode(0, InterruptMode.SYNC_LOW_LEVEL)
    )
    assert val.interrupt_mode(0) == InterruptMode.SYNC_LOW_LEVEL
    assert val.interrupt_mode(1) == InterruptMode.SYNC_RISING_EDGE


def test_interrupt_mode_index_out_of_range_raises():
    with pytest.raises(ValueError):
        GpioInterruptMode().interrupt_mode(11)