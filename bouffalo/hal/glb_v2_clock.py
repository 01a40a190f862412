"""Clock gate, mode and power registers of the BL808 and BL616 series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class SpiMode(IntEnum):
    """Mode of a Serial Peripheral Interface bus."""

    MASTER = 0
    SLAVE = 1


@dataclass(frozen=True)
class ParamConfig:
    """Parameter configuration register."""

    value: int = 0

    _SPI_MASTER_MODE = {0: 0x1 << 12, 1: 0x1 << 27}

    @classmethod
    def _spi_bit(cls, index: int) -> int:
        try:
            return cls._SPI_MASTER_MODE[index]
        except KeyError:
            raise ValueError(f"no SPI peripheral with index {index}") from None

    def set_spi_mode(self, index: int, mode: SpiMode) -> ParamConfig:
        """Set the mode of SPI peripheral ``index``."""
        bit = self._spi_bit(index)
        if mode == SpiMode.MASTER:
            return ParamConfig((self.value | bit) & _U32)
        return ParamConfig(self.value & ~bit & _U32)

    def spi_mode(self, index: int) -> SpiMode:
        """Mode of SPI peripheral ``index``."""
        if self.value & self._spi_bit(index):
            return SpiMode.MASTER
        return SpiMode.SLAVE


@dataclass(frozen=True)
class SdhConfig:
    """SD host configuration register (16 bits)."""

    value: int = 0

    _SDH_CLK_EN = 0x1 << 13
    _SDH_CLK_SEL = 0x1 << 12
    _SDH_CLK_DIV_LEN = 0x7 << 9

    def _with(self, mask: int, bits: int) -> SdhConfig:
        return SdhConfig(((self.value & ~mask) | (bits & mask)) & _U16)

    def enable_sdh_clk(self) -> SdhConfig:
        return self._with(self._SDH_CLK_EN, self._SDH_CLK_EN)

    def disable_sdh_clk(self) -> SdhConfig:
        return self._with(self._SDH_CLK_EN, 0)

    def is_sdh_clk_enabled(self) -> bool:
        return (self.value & self._SDH_CLK_EN) >> 13 == 1

    def set_sdh_clk_sel(self, val: int) -> SdhConfig:
        return self._with(self._SDH_CLK_SEL, (val & _U8) << 12)

    def sdh_clk_sel(self) -> int:
        return (self.value & self._SDH_CLK_SEL) >> 12

    def set_sdh_clk_div_len(self, val: int) -> SdhConfig:
        return self._with(self._SDH_CLK_DIV_LEN, (val & _U8) << 9)

    def sdh_clk_div_len(self) -> int:
        return (self.value & self._SDH_CLK_DIV_LEN) >> 9


@dataclass(frozen=True)
class ClockConfig1:
    """Clock generation configuration register 1."""

    value: int = 0

    _UART = {0: 0x1 << 16, 1: 0x1 << 17, 2: 0x1 << 26}
    _I2C = 0x1 << 19
    _PWM = 0x1 << 20
    _LZ4D = 0x1 << 29

    @classmethod
    def _uart_bit(cls, index: int) -> int:
        try:
            return cls._UART[index]
        except KeyError:
            raise ValueError(f"no UART clock gate with index {index}") from None

    def _set(self, bit: int) -> ClockConfig1:
        return ClockConfig1((self.value | bit) & _U32)

    def _clear(self, bit: int) -> ClockConfig1:
        return ClockConfig1(self.value & ~bit & _U32)

    def enable_uart(self, index: int) -> ClockConfig1:
        return self._set(self._uart_bit(index))

    def disable_uart(self, index: int) -> ClockConfig1:
        return self._clear(self._uart_bit(index))

    def is_uart_enabled(self, index: int) -> bool:
        return self.value & self._uart_bit(index) != 0

    def enable_i2c(self) -> ClockConfig1:
        return self._set(self._I2C)

    def disable_i2c(self) -> ClockConfig1:
        return self._clear(self._I2C)

    def is_i2c_enabled(self) -> bool:
        return self.value & self._I2C != 0

    def enable_pwm(self) -> ClockConfig1:
        return self._set(self._PWM)

    def disable_pwm(self) -> ClockConfig1:
        return self._clear(self._PWM)

    def is_pwm_enabled(self) -> bool:
        return self.value & self._PWM != 0

    def enable_lz4d(self) -> ClockConfig1:
        return self._set(self._LZ4D)

    def disable_lz4d(self) -> ClockConfig1:
        return self._clear(self._LZ4D)

    def is_lz4d_enabled(self) -> bool:
        return self.value & self._LZ4D != 0


@dataclass(frozen=True)
class Ldo12uhsConfig:
    """LDO12UHS configuration register."""

    value: int = 0

    _POWER = 0x1
    _VOUT_SEL = 0xF << 20

    def power_up(self) -> Ldo12uhsConfig:
        return Ldo12uhsConfig((self.value | self._POWER) & _U32)

    def power_down(self) -> Ldo12uhsConfig:
        return Ldo12uhsConfig(self.value & ~self._POWER & _U32)

    def is_powered_up(self) -> bool:
        return self.value & self._POWER != 0

    def set_output_voltage(self, val: int) -> Ldo12uhsConfig:
        cleared = self.value & ~self._VOUT_SEL
        return Ldo12uhsConfig((cleared | ((val & _U8) << 20)) & _U32)

    def get_output_voltage(self) -> int:
        return (self.value & self._VOUT_SEL) >> 20