"""Global configuration registers of the BL808 and BL616 series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_U32 = 0xFFFFFFFF


class RegisterBlock:
    """Register layout of the global configuration peripheral."""

    _OFFSETS = {
        "uart_config": 0x150,
        "uart_mux_group": 0x154,
        "i2c_config": 0x180,
        "spi_config": 0x1B0,
        "pwm_config": 0x1D0,
        "sdh_config": 0x430,
        "param_config": 0x510,
        "clock_config_1": 0x584,
        "ldo12uhs_config": 0x6D0,
        "gpio_config": 0x8C4,
        "gpio_input": 0xAC4,
        "gpio_output": 0xAE4,
        "gpio_set": 0xAEC,
        "gpio_clear": 0xAF4,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        try:
            return cls._OFFSETS[name]
        except KeyError:
            raise KeyError(f"no register named {name!r}") from None


@dataclass(frozen=True)
class UartConfig:
    """UART clock and mode configuration register."""

    value: int = 0

    _CLOCK_DIVIDE = 0x7
    _CLOCK_ENABLE = 0x1 << 4

    def set_clock_divide(self, val: int) -> UartConfig:
        cleared = self.value & ~self._CLOCK_DIVIDE
        return UartConfig((cleared | (val & self._CLOCK_DIVIDE)) & _U32)

    def clock_divide(self) -> int:
        return self.value & self._CLOCK_DIVIDE

    def enable_clock(self) -> UartConfig:
        return UartConfig((self.value | self._CLOCK_ENABLE) & _U32)

    def disable_clock(self) -> UartConfig:
        return UartConfig(self.value & ~self._CLOCK_ENABLE & _U32)

    def is_clock_enabled(self) -> bool:
        return self.value & self._CLOCK_ENABLE != 0


class UartSignal(IntEnum):
    """Signal routed through a UART multiplexer slot."""

    RTS0 = 0
    CTS0 = 1
    TXD0 = 2
    RXD0 = 3
    RTS1 = 4
    CTS1 = 5
    TXD1 = 6
    RXD1 = 7
    RTS2 = 8
    CTS2 = 9
    TXD2 = 10
    RXD2 = 11


def _check_slot(idx: int) -> int:
    if not 0 <= idx <= 7:
        raise ValueError(f"multiplexer slot {idx} out of range 0..7")
    return idx


@dataclass(frozen=True)
class UartMuxGroup:
    """UART signal multiplexer group configuration register."""

    value: int = 0

    _SIGNAL = 0xF

    def set_signal(self, idx: int, val: UartSignal) -> UartMuxGroup:
        shift = _check_slot(idx) * 4
        cleared = self.value & ~(self._SIGNAL << shift)
        return UartMuxGroup((cleared | (int(val) << shift)) & _U32)

    def signal(self, idx: int) -> UartSignal:
        shift = _check_slot(idx) * 4
        field = (self.value >> shift) & self._SIGNAL
        try:
            return UartSignal(field)
        except ValueError:
            raise ValueError(f"invalid UART signal field {field:#x}") from None