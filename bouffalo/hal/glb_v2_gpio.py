"""GPIO configuration register of the BL808 and BL616 series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

from .glb_common import Drive, Pull

_U32 = 0xFFFFFFFF

_E = TypeVar("_E", bound=IntEnum)


class Function(IntEnum):
    """Pin alternate function."""

    SDH = 0
    SPI0 = 1
    FLASH = 2
    I2S = 3
    PDM = 4
    I2C0 = 5
    I2C1 = 6
    UART = 7
    EMAC = 8
    CAM = 9
    ANALOG = 10
    GPIO = 11
    PWM0 = 16
    PWM1 = 17
    SPI1 = 18
    I2C2 = 19
    I2C3 = 20
    MM_UART = 21
    DBI_B = 22
    DBI_C = 23
    DPI = 24
    JTAG_LP = 25
    JTAG_M0 = 26
    JTAG_D0 = 27
    CLOCK_OUT = 31


class InterruptMode(IntEnum):
    """Pin interrupt mode."""

    SYNC_FALLING_EDGE = 0
    SYNC_RISING_EDGE = 1
    SYNC_LOW_LEVEL = 2
    SYNC_HIGH_LEVEL = 3
    SYNC_BOTH_EDGES = 4
    ASYNC_FALLING_EDGE = 8
    ASYNC_RISING_EDGE = 9
    ASYNC_LOW_LEVEL = 10
    ASYNC_HIGH_LEVEL = 11


class Mode(IntEnum):
    """Pin mode as GPIO."""

    NORMAL = 0
    SET_CLEAR = 1
    PROGRAMMABLE = 2
    BUFFERED_SET_CLEAR = 3


def _decode(enum_type: type[_E], field: int) -> _E:
    try:
        return enum_type(field)
    except ValueError:
        raise ValueError(
            f"field value {field} is not a valid {enum_type.__name__}"
        ) from None


@dataclass(frozen=True)
class GpioConfig:
    """Generic Purpose Input/Output configuration register."""

    value: int = 0

    _INPUT_ENABLE = 1 << 0
    _SCHMITT = 1 << 1
    _DRIVE = 0x3 << 2
    _PULL = 0x3 << 4
    _OUTPUT_ENABLE = 1 << 6
    _FUNCTION = 0x1F << 8
    _INTERRUPT_MODE = 0xF << 16
    _CLEAR_INTERRUPT = 1 << 20
    _HAS_INTERRUPT = 1 << 21
    _INTERRUPT_MASK = 1 << 22
    _OUTPUT = 1 << 24
    _SET = 1 << 25
    _CLEAR = 1 << 26
    _INPUT = 1 << 28
    _MODE = 0x3 << 30

    def _with(self, mask: int, bits: int) -> GpioConfig:
        return GpioConfig(((self.value & ~mask) | bits) & _U32)

    def _flag(self, mask: int) -> bool:
        return self.value & mask != 0

    def _field(self, mask: int, shift: int) -> int:
        return (self.value & mask) >> shift

    def enable_input(self) -> GpioConfig:
        return self._with(self._INPUT_ENABLE, self._INPUT_ENABLE)

    def disable_input(self) -> GpioConfig:
        return self._with(self._INPUT_ENABLE, 0)

    def is_input_enabled(self) -> bool:
        return self._flag(self._INPUT_ENABLE)

    def enable_schmitt(self) -> GpioConfig:
        return self._with(self._SCHMITT, self._SCHMITT)

    def disable_schmitt(self) -> GpioConfig:
        return self._with(self._SCHMITT, 0)

    def is_schmitt_enabled(self) -> bool:
        return self._flag(self._SCHMITT)

    def enable_output(self) -> GpioConfig:
        return self._with(self._OUTPUT_ENABLE, self._OUTPUT_ENABLE)

    def disable_output(self) -> GpioConfig:
        return self._with(self._OUTPUT_ENABLE, 0)

    def is_output_enabled(self) -> bool:
        return self._flag(self._OUTPUT_ENABLE)

    def mask_interrupt(self) -> GpioConfig:
        return self._with(self._INTERRUPT_MASK, self._INTERRUPT_MASK)

    def unmask_interrupt(self) -> GpioConfig:
        return self._with(self._INTERRUPT_MASK, 0)

    def is_interrupt_masked(self) -> bool:
        return self._flag(self._INTERRUPT_MASK)

    def output(self) -> bool:
        """Output level of the pin."""
        return self._flag(self._OUTPUT)

    def input(self) -> bool:
        """Input level of the pin."""
        return self._flag(self._INPUT)

    def has_interrupt(self) -> bool:
        return self._flag(self._HAS_INTERRUPT)

    def set(self) -> GpioConfig:
        """Request the pin output to go high."""
        return GpioConfig((self.value | self._SET) & _U32)

    def clear(self) -> GpioConfig:
        """Request the pin output to go low."""
        return GpioConfig((self.value | self._CLEAR) & _U32)

    def clear_interrupt(self) -> GpioConfig:
        return GpioConfig((self.value | self._CLEAR_INTERRUPT) & _U32)

    def drive(self) -> Drive:
        return Drive(self._field(self._DRIVE, 2))

    def set_drive(self, val: Drive) -> GpioConfig:
        return self._with(self._DRIVE, int(val) << 2)

    def function(self) -> Function:
        return _decode(Function, self._field(self._FUNCTION, 8))

    def set_function(self, val: Function) -> GpioConfig:
        return self._with(self._FUNCTION, int(val) << 8)

    def interrupt_mode(self) -> InterruptMode:
        return _decode(InterruptMode, self._field(self._INTERRUPT_MODE, 16))

    def set_interrupt_mode(self, val: InterruptMode) -> GpioConfig:
        return self._with(self._INTERRUPT_MODE, int(val) << 16)

    def mode(self) -> Mode:
        return Mode(self._field(self._MODE, 30))

    def set_mode(self, val: Mode) -> GpioConfig:
        return self._with(self._MODE, int(val) << 30)

    def pull(self) -> Pull:
        return _decode(Pull, self._field(self._PULL, 4))

    def set_pull(self, val: Pull) -> GpioConfig:
        return self._with(self._PULL, int(val) << 4)