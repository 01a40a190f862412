"""Peripheral clock and signal configuration registers of the BL808 and BL616 series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_U8 = 0xFF
_U32 = 0xFFFFFFFF


class I2cClockSource(IntEnum):
    """Inter-Integrated Circuit clock source."""

    BCLK = 0
    XCLK = 1


@dataclass(frozen=True)
class I2cConfig:
    """Inter-Integrated Circuit configuration register."""

    value: int = 0

    _CLOCK_DIVIDE = 0xFF << 16
    _CLOCK_ENABLE = 1 << 24
    _CLOCK_SELECT = 1 << 25

    def _with(self, mask: int, bits: int) -> I2cConfig:
        return I2cConfig(((self.value & ~mask) | bits) & _U32)

    def set_clock_divide(self, val: int) -> I2cConfig:
        """Set the peripheral clock divide factor."""
        return self._with(self._CLOCK_DIVIDE, (val & _U8) << 16)

    def clock_divide(self) -> int:
        """Peripheral clock divide factor."""
        return (self.value & self._CLOCK_DIVIDE) >> 16

    def enable_clock(self) -> I2cConfig:
        return self._with(self._CLOCK_ENABLE, self._CLOCK_ENABLE)

    def disable_clock(self) -> I2cConfig:
        return self._with(self._CLOCK_ENABLE, 0)

    def is_clock_enabled(self) -> bool:
        return self.value & self._CLOCK_ENABLE != 0

    def set_clock_source(self, val: I2cClockSource) -> I2cConfig:
        return self._with(self._CLOCK_SELECT, (int(val) << 25) & self._CLOCK_SELECT)

    def clock_source(self) -> I2cClockSource:
        return I2cClockSource((self.value & self._CLOCK_SELECT) >> 25)


class SpiClockSource(IntEnum):
    """Serial Peripheral Interface clock source."""

    MUX_PLL_160M = 0
    XCLK = 1


@dataclass(frozen=True)
class SpiConfig:
    """Serial Peripheral Interface configuration register."""

    value: int = 0

    _CLOCK_DIVIDE = 0xFF
    _CLOCK_ENABLE = 1 << 8
    _CLOCK_SELECT = 1 << 9

    def _with(self, mask: int, bits: int) -> SpiConfig:
        return SpiConfig(((self.value & ~mask) | bits) & _U32)

    def set_clock_divide(self, val: int) -> SpiConfig:
        """Set the peripheral clock divide factor."""
        return self._with(self._CLOCK_DIVIDE, val & _U8)

    def clock_divide(self) -> int:
        """Peripheral clock divide factor."""
        return self.value & self._CLOCK_DIVIDE

    def enable_clock(self) -> SpiConfig:
        return self._with(self._CLOCK_ENABLE, self._CLOCK_ENABLE)

    def disable_clock(self) -> SpiConfig:
        return self._with(self._CLOCK_ENABLE, 0)

    def is_clock_enabled(self) -> bool:
        return self.value & self._CLOCK_ENABLE != 0

    def set_clock_source(self, val: SpiClockSource) -> SpiConfig:
        return self._with(self._CLOCK_SELECT, (int(val) << 9) & self._CLOCK_SELECT)

    def clock_source(self) -> SpiClockSource:
        return SpiClockSource((self.value & self._CLOCK_SELECT) >> 9)


class PwmSignal0(IntEnum):
    """Signal group 0 source for Pulse Width Modulation."""

    SINGLE_END = 0
    DIFFERENTIAL_END = 1


class PwmSignal1(IntEnum):
    """Signal group 1 source for Pulse Width Modulation."""

    SINGLE_END = 0
    BRUSHLESS_DC_MOTOR = 1


@dataclass(frozen=True)
class PwmConfig:
    """Pulse Width Modulation configuration register."""

    value: int = 0

    _SIGNAL_0_SELECT = 1 << 0
    _SIGNAL_1_SELECT = 1 << 1

    def set_signal_0(self, val: PwmSignal0) -> PwmConfig:
        """Set the source for signal group 0."""
        cleared = self.value & ~self._SIGNAL_0_SELECT
        return PwmConfig((cleared | (int(val) & self._SIGNAL_0_SELECT)) & _U32)

    def signal_0(self) -> PwmSignal0:
        """Source for signal group 0."""
        return PwmSignal0(self.value & self._SIGNAL_0_SELECT)

    def set_signal_1(self, val: PwmSignal1) -> PwmConfig:
        """Set the source for signal group 1."""
        cleared = self.value & ~self._SIGNAL_1_SELECT
        return PwmConfig((cleared | ((int(val) << 1) & self._SIGNAL_1_SELECT)) & _U32)

    def signal_1(self) -> PwmSignal1:
        """Source for signal group 1."""
        return PwmSignal1((self.value & self._SIGNAL_1_SELECT) >> 1)