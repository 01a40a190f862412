"""Direct Memory Access peripheral registers and register values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping

_U8 = 0xFF
_U32 = 0xFFFFFFFF
_CHANNEL_COUNT = 8


def _lookup(offsets: Mapping[str, int], name: str) -> int:
    try:
        return offsets[name]
    except KeyError:
        raise KeyError(f"no register named {name!r}") from None


def _check_channel(ch: int) -> int:
    if not 0 <= ch < _CHANNEL_COUNT:
        raise ValueError(f"channel index {ch} out of range 0..{_CHANNEL_COUNT - 1}")
    return ch


class RegisterBlock:
    """Register layout of the DMA peripheral."""

    _OFFSETS = {
        "interrupts": 0x00,
        "enabled_channels": 0x1C,
        "soft_burst_request": 0x20,
        "soft_single_request": 0x24,
        "soft_last_burst_request": 0x28,
        "soft_last_single_request": 0x2C,
        "global_config": 0x30,
        "dma_sync": 0x34,
        "channels": 0x100,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        return _lookup(cls._OFFSETS, name)


class InterruptRegisters:
    """Register layout of the DMA interrupt block."""

    _OFFSETS = {
        "global_state": 0x00,
        "transfer_complete_state": 0x04,
        "transfer_complete_clear": 0x08,
        "error_state": 0x0C,
        "error_clear": 0x10,
        "raw_transfer_complete": 0x14,
        "raw_error": 0x18,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        return _lookup(cls._OFFSETS, name)


class ChannelRegisters:
    """Register layout of one DMA channel."""

    _OFFSETS = {
        "source_address": 0x00,
        "destination_address": 0x04,
        "linked_list_item": 0x08,
        "control": 0x0C,
        "config": 0x10,
    }
    _SIZE = 0x100

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        return _lookup(cls._OFFSETS, name)

    @classmethod
    def size(cls) -> int:
        """Size in bytes of one channel register block."""
        return cls._SIZE


@dataclass(frozen=True)
class GlobalState:
    """Global interrupt state after masking."""

    value: int = 0

    def is_int_enabled(self, ch: int) -> bool:
        """Check if the interrupt of channel ``ch`` is enabled."""
        return (self.value >> _check_channel(ch)) & 1 != 0


@dataclass(frozen=True)
class TransferCompleteState:
    """Transfer complete interrupt state."""

    value: int = 0

    def if_cplt_int_occurs(self, ch: int) -> bool:
        """Check if the complete interrupt of channel ``ch`` occurred."""
        return (self.value >> _check_channel(ch)) & 1 != 0


@dataclass(frozen=True)
class TransferCompleteClear:
    """Clear transfer complete interrupt."""

    value: int = 0

    def clear_cplt_int(self, ch: int) -> TransferCompleteClear:
        """Request clearing of the complete interrupt of channel ``ch``."""
        return TransferCompleteClear((self.value | (1 << _check_channel(ch))) & _U8)


@dataclass(frozen=True)
class ErrorState:
    """Error interrupt state."""

    value: int = 0

    def if_err_int_occurs(self, ch: int) -> bool:
        """Check if the error interrupt of channel ``ch`` occurred."""
        return (self.value >> _check_channel(ch)) & 1 != 0


@dataclass(frozen=True)
class ErrorClear:
    """Clear error interrupt."""

    value: int = 0

    def clear_err_int(self, ch: int) -> ErrorClear:
        """Request clearing of the error interrupt of channel ``ch``."""
        return ErrorClear((self.value | (1 << _check_channel(ch))) & _U8)


@dataclass(frozen=True)
class RawTransferComplete:
    """Transfer complete interrupt state before masking."""

    value: int = 0

    def if_raw_cplt_int_occurs(self, ch: int) -> bool:
        """Check if the raw complete interrupt of channel ``ch`` occurred."""
        return (self.value >> _check_channel(ch)) & 1 != 0


@dataclass(frozen=True)
class RawError:
    """Error interrupt state before masking."""

    value: int = 0

    def if_raw_error_occurs(self, ch: int) -> bool:
        """Check if the raw error interrupt of channel ``ch`` occurred."""
        return (self.value >> _check_channel(ch)) & 1 != 0


@dataclass(frozen=True)
class EnabledChannels:
    """Channel enable states."""

    value: int = 0

    def is_ch_enabled(self, ch: int) -> bool:
        """Check if channel ``ch`` is enabled."""
        return (self.value >> _check_channel(ch)) & 1 != 0


class EndianMode(IntEnum):
    """AHB master endian mode."""

    LITTLE_ENDIAN = 0
    BIG_ENDIAN = 1


@dataclass(frozen=True)
class GlobalConfig:
    """Peripheral configuration register."""

    value: int = 0

    _AHB_MASTER_ENDIAN_CFG = 0x1 << 1
    _SMDMA = 0x1

    def set_ahb_master_endian_mode(self, mode: EndianMode) -> GlobalConfig:
        cleared = self.value & ~self._AHB_MASTER_ENDIAN_CFG
        bits = self._AHB_MASTER_ENDIAN_CFG & (int(mode) << 1)
        return GlobalConfig((cleared | bits) & _U32)

    def ahb_master_endian_mode(self) -> EndianMode:
        if (self.value & self._AHB_MASTER_ENDIAN_CFG) >> 1 == 0:
            return EndianMode.LITTLE_ENDIAN
        return EndianMode.BIG_ENDIAN

    def enable_smdma(self) -> GlobalConfig:
        return GlobalConfig((self.value | self._SMDMA) & _U32)

    def disable_smdma(self) -> GlobalConfig:
        return GlobalConfig(self.value & ~self._SMDMA & _U32)

    def is_smdma_enabled(self) -> bool:
        return self.value & self._SMDMA != 0


class TransferWidth(IntEnum):
    """DMA transfer width."""

    BYTE = 0
    HALF_WORD = 1
    WORD = 2
    DOUBLE_WORD = 3


class BurstSize(IntEnum):
    """DMA burst size in data units."""

    INCR1 = 0
    INCR4 = 1
    INCR8 = 2
    INCR16 = 3


@dataclass(frozen=True)
class LliControl:
    """Control register in a linked list item."""

    value: int = 0

    _CPLT_INT_EN = 0x1 << 31
    _DST_ADDR_INC_EN = 0x1 << 27
    _SRC_ADDR_INC_EN = 0x1 << 26
    _FIX_CNT = 0x7 << 23
    _DST_TRANSFER_WIDTH = 0x3 << 21
    _SRC_TRANSFER_WIDTH = 0x3 << 18
    _DST_ADD_MODE = 0x1 << 17
    _DST_BST_SIZE = 0x3 << 15
    _DST_MIN_MODE = 0x1 << 14
    _SRC_BST_SIZE = 0x3 << 12
    _TRANSFER_SIZE = 0xFFF

    def _with(self, mask: int, bits: int) -> LliControl:
        return LliControl(((self.value & ~mask) | bits) & _U32)

    def _flag(self, mask: int) -> bool:
        return self.value & mask != 0

    def _field(self, mask: int, shift: int) -> int:
        return (self.value & mask) >> shift

    def enable_cplt_int(self) -> LliControl:
        return self._with(self._CPLT_INT_EN, self._CPLT_INT_EN)

    def disable_cplt_int(self) -> LliControl:
        return self._with(self._CPLT_INT_EN, 0)

    def is_cplt_int_enabled(self) -> bool:
        return self._flag(self._CPLT_INT_EN)

    def enable_dst_addr_inc(self) -> LliControl:
        return self._with(self._DST_ADDR_INC_EN, self._DST_ADDR_INC_EN)

    def disable_dst_addr_inc(self) -> LliControl:
        return self._with(self._DST_ADDR_INC_EN, 0)

    def is_dst_addr_inc_enabled(self) -> bool:
        return self._flag(self._DST_ADDR_INC_EN)

    def enable_src_addr_inc(self) -> LliControl:
        return self._with(self._SRC_ADDR_INC_EN, self._SRC_ADDR_INC_EN)

    def disable_src_addr_inc(self) -> LliControl:
        return self._with(self._SRC_ADDR_INC_EN, 0)

    def is_src_addr_inc_enabled(self) -> bool:
        return self._flag(self._SRC_ADDR_INC_EN)

    def set_fix_cnt(self, cnt: int) -> LliControl:
        return self._with(self._FIX_CNT, (cnt & _U8) << 23)

    def fix_cnt(self) -> int:
        return self._field(self._FIX_CNT, 23)

    def set_dst_transfer_width(self, width: TransferWidth) -> LliControl:
        return self._with(self._DST_TRANSFER_WIDTH, int(width) << 21)

    def dst_transfer_width(self) -> TransferWidth:
        return TransferWidth(self._field(self._DST_TRANSFER_WIDTH, 21))

    def set_src_transfer_width(self, width: TransferWidth) -> LliControl:
        return self._with(self._SRC_TRANSFER_WIDTH, int(width) << 18)

    def src_transfer_width(self) -> TransferWidth:
        return TransferWidth(self._field(self._SRC_TRANSFER_WIDTH, 18))

    def enable_dst_add_mode(self) -> LliControl:
        return self._with(self._DST_ADD_MODE, self._DST_ADD_MODE)

    def disable_dst_add_mode(self) -> LliControl:
        return self._with(self._DST_ADD_MODE, 0)

    def is_dst_add_mode_enabled(self) -> bool:
        return self._flag(self._DST_ADD_MODE)

    def set_dst_bst_size(self, size: BurstSize) -> LliControl:
        return self._with(self._DST_BST_SIZE, int(size) << 15)

    def dst_bst_size(self) -> BurstSize:
        return BurstSize(self._field(self._DST_BST_SIZE, 15))

    def enable_dst_min_mode(self) -> LliControl:
        return self._with(self._DST_MIN_MODE, self._DST_MIN_MODE)

    def disable_dst_min_mode(self) -> LliControl:
        return self._with(self._DST_MIN_MODE, 0)

    def is_dst_min_mode_enabled(self) -> bool:
        return self._flag(self._DST_MIN_MODE)

    def set_src_bst_size(self, size: BurstSize) -> LliControl:
        return self._with(self._SRC_BST_SIZE, int(size) << 12)

    def src_bst_size(self) -> BurstSize:
        return BurstSize(self._field(self._SRC_BST_SIZE, 12))

    def set_transfer_size(self, size: int) -> LliControl:
        return self._with(self._TRANSFER_SIZE, size & 0xFFFF)

    def transfer_size(self) -> int:
        return self._field(self._TRANSFER_SIZE, 0)


@dataclass(frozen=True)
class LliItemPool:
    """Linked list item descriptor as stored in memory."""

    source_address: int = 0
    destination_address: int = 0
    linked_list_item: int = 0
    control: LliControl = field(default_factory=LliControl)