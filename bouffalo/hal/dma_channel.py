"""DMA channel configuration register and the values it holds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

_U32 = 0xFFFFFFFF

_E = TypeVar("_E", bound=IntEnum)


class DMAMode(IntEnum):
    """Transfer direction and the side that controls the flow."""

    MEM2MEM = 0
    MEM2PERIPH = 1
    PERIPH2MEM = 2
    PERIPH2PERIPH = 3
    PERIPH2PERIPH_CTRL_BY_DST = 4
    MEM2PERIPH_CTRL_BY_PERIPH = 5
    PERIPH2MEM_CTRL_BY_PERIPH = 6
    PERIPH2PERIPH_CTRL_BY_SRC = 7


class Periph4DMA01(IntEnum):
    """Peripheral request lines of DMA 0 and 1."""

    UART0_RX = 0
    UART0_TX = 1
    UART1_RX = 2
    UART1_TX = 3
    UART2_RX = 4
    UART2_TX = 5
    I2C0_RX = 6
    I2C0_TX = 7
    IR_TX = 8
    GPIO_TX = 9
    SPI0_RX = 10
    SPI0_TX = 11
    AUDIO_RX = 12
    AUDIO_TX = 13
    I2C1_RX = 14
    I2C1_TX = 15
    I2S_RX = 16
    I2S_TX = 17
    PDM_RX = 18
    GP_ADC = 22
    GP_DAC = 23


class Periph4DMA2(IntEnum):
    """Peripheral request lines of DMA 2."""

    UART3_RX = 0
    UART3_TX = 1
    SPI1_RX = 2
    SPI1_TX = 3
    I2C2_RX = 6
    I2C2_TX = 7
    I2C3_RX = 8
    I2C3_TX = 9
    DSI_RX = 10
    DSI_TX = 11
    DBI_TX = 22


def _decode(enum_type: type[_E], field: int) -> _E:
    try:
        return enum_type(field)
    except ValueError:
        raise ValueError(
            f"field value {field} is not a valid {enum_type.__name__}"
        ) from None


@dataclass(frozen=True)
class ChannelConfig:
    """Channel configuration register."""

    value: int = 0

    _LLI_CNT = 0x3FF << 20
    _HALT = 0x1 << 18
    _ACTIVE = 0x1 << 17
    _LOCK = 0x1 << 16
    _CPLT_INT_EN = 0x1 << 15
    _ERR_INT_EN = 0x1 << 14
    _FLW_CTRL = 0x7 << 11
    _DST_PERIPH = 0x1F << 6
    _SRC_PERIPH = 0x1F << 1
    _CH_EN = 0x1

    def _with(self, mask: int, bits: int) -> ChannelConfig:
        return ChannelConfig(((self.value & ~mask) | bits) & _U32)

    def _flag(self, mask: int) -> bool:
        return self.value & mask != 0

    def _field(self, mask: int, shift: int) -> int:
        return (self.value & mask) >> shift

    def lli_cnt(self) -> int:
        """Number of linked list items."""
        return self._field(self._LLI_CNT, 20)

    def stop_dma(self) -> ChannelConfig:
        return self._with(self._HALT, self._HALT)

    def resume_dma(self) -> ChannelConfig:
        return self._with(self._HALT, 0)

    def is_dma_stopped(self) -> bool:
        return self._flag(self._HALT)

    def is_fifo_empty(self) -> bool:
        return not self._flag(self._ACTIVE)

    def lock_dma(self) -> ChannelConfig:
        return self._with(self._LOCK, self._LOCK)

    def unlock_dma(self) -> ChannelConfig:
        return self._with(self._LOCK, 0)

    def is_dma_locked(self) -> bool:
        return self._flag(self._LOCK)

    def enable_cplt_int(self) -> ChannelConfig:
        return self._with(self._CPLT_INT_EN, self._CPLT_INT_EN)

    def disable_cplt_int(self) -> ChannelConfig:
        return self._with(self._CPLT_INT_EN, 0)

    def is_cplt_int_enabled(self) -> bool:
        return self._flag(self._CPLT_INT_EN)

    def enable_err_int(self) -> ChannelConfig:
        return self._with(self._ERR_INT_EN, self._ERR_INT_EN)

    def disable_err_int(self) -> ChannelConfig:
        return self._with(self._ERR_INT_EN, 0)

    def is_err_int_enabled(self) -> bool:
        return self._flag(self._ERR_INT_EN)

    def set_dma_mode(self, mode: DMAMode) -> ChannelConfig:
        return self._with(self._FLW_CTRL, int(mode) << 11)

    def dma_mode(self) -> DMAMode:
        return DMAMode(self._field(self._FLW_CTRL, 11))

    def set_dst_periph4dma01(self, periph: Periph4DMA01) -> ChannelConfig:
        return self._with(self._DST_PERIPH, self._DST_PERIPH & (int(periph) << 6))

    def set_dst_periph4dma2(self, periph: Periph4DMA2) -> ChannelConfig:
        return self._with(self._DST_PERIPH, self._DST_PERIPH & (int(periph) << 6))

    def dst_periph4dma01(self) -> Periph4DMA01:
        return _decode(Periph4DMA01, self._field(self._DST_PERIPH, 6))

    def dst_periph4dma2(self) -> Periph4DMA2:
        return _decode(Periph4DMA2, self._field(self._DST_PERIPH, 6))

    def set_src_periph4dma01(self, periph: Periph4DMA01) -> ChannelConfig:
        return self._with(self._SRC_PERIPH, int(periph) << 1)

    def set_src_periph4dma2(self, periph: Periph4DMA2) -> ChannelConfig:
        return self._with(self._SRC_PERIPH, int(periph) << 1)

    def src_periph4dma01(self) -> Periph4DMA01:
        return _decode(Periph4DMA01, self._field(self._SRC_PERIPH, 1))

    def src_periph4dma2(self) -> Periph4DMA2:
        return _decode(Periph4DMA2, self._field(self._SRC_PERIPH, 1))

    def enable_ch(self) -> ChannelConfig:
        return self._with(self._CH_EN, self._CH_EN)

    def disable_ch(self) -> ChannelConfig:
        return self._with(self._CH_EN, 0)

    def is_ch_enabled(self) -> bool:
        return self._flag(self._CH_EN)