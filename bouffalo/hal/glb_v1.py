"""Global configuration registers of the BL602 and BL702 series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

from .glb_common import Drive, Pull

_U32 = 0xFFFFFFFF

_E = TypeVar("_E", bound=IntEnum)


class RegisterBlock:
    """Register layout of the global configuration peripheral."""

    _OFFSETS = {
        "gpio_config": 0x100,
        "gpio_input_value": 0x180,
        "gpio_output_value": 0x188,
        "gpio_output_enable": 0x190,
        "gpio_interrupt_mask": 0x194,
        "gpio_interrupt_state": 0x1A8,
        "gpio_interrupt_clear": 0x1B0,
        "gpio_interrupt_mode": 0x1C0,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        try:
            return cls._OFFSETS[name]
        except KeyError:
            raise KeyError(f"no register named {name!r}") from None


class Function(IntEnum):
    """Pin alternate function."""

    CLK_OUT = 0
    BT_COEXIST = 1
    FLASH = 2
    I2S = 3
    SPI = 4
    I2C = 6
    UART = 7
    PWM = 8
    CAM = 9
    ANALOG = 10
    GPIO = 11
    RF_TEST = 12
    SCAN = 13
    E21_JTAG = 14
    DEBUG = 15
    EXTERNAL_PA = 16
    USB_TRANCEIVER = 17
    USB_CONTROLLER = 18
    EMAC = 19
    QDEC = 20
    KEY_SCAN_IN = 21
    KEY_SCAN_DRIVE = 22
    CAM_MISC = 23


class InterruptMode(IntEnum):
    """Pin interrupt mode."""

    SYNC_FALLING_EDGE = 0
    SYNC_RISING_EDGE = 1
    SYNC_LOW_LEVEL = 2
    SYNC_HIGH_LEVEL = 3
    ASYNC_FALLING_EDGE = 4
    ASYNC_RISING_EDGE = 5
    ASYNC_LOW_LEVEL = 6
    ASYNC_HIGH_LEVEL = 7


def _decode(enum_type: type[_E], field: int) -> _E:
    try:
        return enum_type(field)
    except ValueError:
        raise ValueError(
            f"field value {field} is not a valid {enum_type.__name__}"
        ) from None


def _pin_shift(idx: int) -> int:
    if idx not in (0, 1):
        raise ValueError(f"pin index {idx} out of range 0..1")
    return idx * 16


@dataclass(frozen=True)
class GpioConfig:
    """Configuration register holding two pins, selected by ``idx``."""

    value: int = 0

    _INPUT_ENABLE = 1 << 0
    _SCHMITT = 1 << 1
    _DRIVE = 0x3 << 2
    _PULL = 0x3 << 4
    _FUNCTION = 0x1F << 8

    def _with(self, mask: int, bits: int) -> GpioConfig:
        return GpioConfig(((self.value & ~mask) | bits) & _U32)

    def _field(self, idx: int, mask: int, shift: int) -> int:
        return ((self.value >> _pin_shift(idx)) & mask) >> shift

    def enable_input(self, idx: int) -> GpioConfig:
        bit = self._INPUT_ENABLE << _pin_shift(idx)
        return self._with(bit, bit)

    def disable_input(self, idx: int) -> GpioConfig:
        return self._with(self._INPUT_ENABLE << _pin_shift(idx), 0)

    def is_input_enabled(self, idx: int) -> bool:
        return self.value & (self._INPUT_ENABLE << _pin_shift(idx)) != 0

    def enable_schmitt(self, idx: int) -> GpioConfig:
        bit = self._SCHMITT << _pin_shift(idx)
        return self._with(bit, bit)

    def disable_schmitt(self, idx: int) -> GpioConfig:
        return self._with(self._SCHMITT << _pin_shift(idx), 0)

    def is_schmitt_enabled(self, idx: int) -> bool:
        return self.value & (self._SCHMITT << _pin_shift(idx)) != 0

    def drive(self, idx: int) -> Drive:
        return Drive(self._field(idx, self._DRIVE, 2))

    def set_drive(self, idx: int, val: Drive) -> GpioConfig:
        shift = _pin_shift(idx)
        return self._with(self._DRIVE << shift, int(val) << (2 + shift))

    def pull(self, idx: int) -> Pull:
        return _decode(Pull, self._field(idx, self._PULL, 4))

    def set_pull(self, idx: int, val: Pull) -> GpioConfig:
        shift = _pin_shift(idx)
        return self._with(self._PULL << shift, int(val) << (4 + shift))

    def set_function(self, idx: int, val: Function) -> GpioConfig:
        shift = _pin_shift(idx)
        return self._with(self._FUNCTION << shift, int(val) << (8 + shift))

    def function(self, idx: int) -> Function:
        return _decode(Function, self._field(idx, self._FUNCTION, 8))


@dataclass(frozen=True)
class GpioInterruptMode:
    """Interrupt mode register holding three bits per pin."""

    value: int = 0

    _INTERRUPT_MODE = 0x7

    @staticmethod
    def _shift(idx: int) -> int:
        if idx < 0 or idx * 3 >= 32:
            raise ValueError(f"pin index {idx} out of range 0..10")
        return idx * 3

    def set_interrupt_mode(self, idx: int, val: InterruptMode) -> GpioInterruptMode:
        shift = self._shift(idx)
        cleared = self.value & ~(self._INTERRUPT_MODE << shift)
        return GpioInterruptMode((cleared | (int(val) << shift)) & _U32)

    def interrupt_mode(self, idx: int) -> InterruptMode:
        return InterruptMode((self.value >> self._shift(idx)) & self._INTERRUPT_MODE)