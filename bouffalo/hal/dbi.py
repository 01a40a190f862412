"""Display bus interface registers and register values."""

from __future__ import annotations

from dataclasses import dataclass

_U8 = 0xFF
_U32 = 0xFFFFFFFF


class RegisterBlock:
    """Register layout of the display bus interface."""

    _OFFSETS = {
        "config": 0x00,
        "fifo_config_0": 0x80,
        "fifo_config_1": 0x84,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        try:
            return cls._OFFSETS[name]
        except KeyError:
            raise KeyError(f"no register named {name!r}") from None


@dataclass(frozen=True)
class Config:
    """Function configuration register."""

    value: int = 0

    _MASTER_ENABLE = 1 << 0
    _SELECT_TYPE = 1 << 1
    _COMMAND_ENABLE = 1 << 2
    _DATA_ENABLE = 1 << 3
    _DATA_PHASE = 1 << 4
    _DATA_TYPE = 1 << 5
    _DATA_BYTE_COUNT = 3 << 6
    _COMMAND = 0xFF << 8
    _SCL_POLARITY = 1 << 16
    _SCL_PHASE = 1 << 17
    _CONTINUOUS_TRANSFER = 1 << 18
    _DUMMY_ENABLE = 1 << 19
    _DUMMY_CYCLE = 0xF << 20
    _THREE_WIRE_MODE = 1 << 27
    _DEGLITCH_ENABLE = 1 << 28
    _DEGLITCH_CYCLE = 0x7 << 29

    def _with(self, mask: int, bits: int) -> Config:
        return Config(((self.value & ~mask) | bits) & _U32)

    def _flag(self, mask: int) -> bool:
        return self.value & mask != 0

    def _field(self, mask: int, shift: int) -> int:
        return (self.value & mask) >> shift

    def enable_master(self) -> Config:
        return self._with(self._MASTER_ENABLE, self._MASTER_ENABLE)

    def disable_master(self) -> Config:
        return self._with(self._MASTER_ENABLE, 0)

    def is_master_enabled(self) -> bool:
        return self._flag(self._MASTER_ENABLE)

    def set_type_b(self) -> Config:
        return self._with(self._SELECT_TYPE, 0)

    def set_type_c(self) -> Config:
        return self._with(self._SELECT_TYPE, self._SELECT_TYPE)

    def is_type_c(self) -> bool:
        return self._flag(self._SELECT_TYPE)

    def is_type_b(self) -> bool:
        return not self._flag(self._SELECT_TYPE)

    def enable_command(self) -> Config:
        return self._with(self._COMMAND_ENABLE, self._COMMAND_ENABLE)

    def disable_command(self) -> Config:
        return self._with(self._COMMAND_ENABLE, 0)

    def is_command_enabled(self) -> bool:
        return self._flag(self._COMMAND_ENABLE)

    def enable_data(self) -> Config:
        return self._with(self._DATA_ENABLE, self._DATA_ENABLE)

    def disable_data(self) -> Config:
        return self._with(self._DATA_ENABLE, 0)

    def is_data_enabled(self) -> bool:
        return self._flag(self._DATA_ENABLE)

    def set_data_read(self) -> Config:
        return self._with(self._DATA_PHASE, self._DATA_PHASE)

    def set_data_write(self) -> Config:
        return self._with(self._DATA_PHASE, 0)

    def is_data_read(self) -> bool:
        return self._flag(self._DATA_PHASE)

    def is_data_write(self) -> bool:
        return not self._flag(self._DATA_PHASE)

    def set_data_normal(self) -> Config:
        return self._with(self._DATA_TYPE, 0)

    def set_data_pixel(self) -> Config:
        return self._with(self._DATA_TYPE, self._DATA_TYPE)

    def is_data_normal(self) -> bool:
        return not self._flag(self._DATA_TYPE)

    def is_data_pixel(self) -> bool:
        return self._flag(self._DATA_TYPE)

    def set_data_byte_count(self, count: int) -> Config:
        return self._with(self._DATA_BYTE_COUNT, (count & _U8) << 6)

    def data_byte_count(self) -> int:
        return self._field(self._DATA_BYTE_COUNT, 6)

    def set_command(self, command: int) -> Config:
        return self._with(self._COMMAND, (command & _U8) << 8)

    def command(self) -> int:
        return self._field(self._COMMAND, 8)

    def set_scl_polarity(self, polarity: bool) -> Config:
        return self._with(self._SCL_POLARITY, self._SCL_POLARITY if polarity else 0)

    def scl_polarity(self) -> bool:
        return self._flag(self._SCL_POLARITY)

    def set_scl_phase(self, phase: bool) -> Config:
        return self._with(self._SCL_PHASE, self._SCL_PHASE if phase else 0)

    def scl_phase(self) -> bool:
        return self._flag(self._SCL_PHASE)

    def enable_continuous_transfer(self) -> Config:
        return self._with(self._CONTINUOUS_TRANSFER, self._CONTINUOUS_TRANSFER)

    def disable_continuous_transfer(self) -> Config:
        return self._with(self._CONTINUOUS_TRANSFER, 0)

    def is_continuous_transfer_enabled(self) -> bool:
        return self._flag(self._CONTINUOUS_TRANSFER)

    def enable_dummy_cycle(self) -> Config:
        return self._with(self._DUMMY_ENABLE, self._DUMMY_ENABLE)

    def disable_dummy_cycle(self) -> Config:
        return self._with(self._DUMMY_ENABLE, 0)

    def is_dummy_cycle_enabled(self) -> bool:
        return self._flag(self._DUMMY_ENABLE)

    def set_dummy_cycle_count(self, count: int) -> Config:
        return self._with(self._DUMMY_CYCLE, (count & _U8) << 20)

    def dummy_cycle_count(self) -> int:
        return self._field(self._DUMMY_CYCLE, 20)

    def set_type_c_3_wire_mode(self) -> Config:
        return self._with(self._THREE_WIRE_MODE, self._THREE_WIRE_MODE)

    def set_type_c_4_wire_mode(self) -> Config:
        return self._with(self._THREE_WIRE_MODE, 0)

    def is_type_c_3_wire_mode(self) -> bool:
        return self._flag(self._THREE_WIRE_MODE)

    def is_type_c_4_wire_mode(self) -> bool:
        return not self._flag(self._THREE_WIRE_MODE)

    def enable_deglitch(self) -> Config:
        return self._with(self._DEGLITCH_ENABLE, self._DEGLITCH_ENABLE)

    def disable_deglitch(self) -> Config:
        return self._with(self._DEGLITCH_ENABLE, 0)

    def is_deglitch_enabled(self) -> bool:
        return self._flag(self._DEGLITCH_ENABLE)

    def set_deglitch_cycle_count(self, count: int) -> Config:
        return self._with(self._DEGLITCH_CYCLE, (count & _U8) << 29)

    def deglitch_cycle_count(self) -> int:
        return self._field(self._DEGLITCH_CYCLE, 29)


@dataclass(frozen=True)
class FifoConfig0:
    """First-in first-out queue configuration 0."""

    value: int = 0

    _DMA_TRANSMIT_ENABLE = 1 << 0
    _TRANSMIT_FIFO_CLEAR = 1 << 2
    _TRANSMIT_FIFO_OVERFLOW = 1 << 4
    _TRANSMIT_FIFO_UNDERFLOW = 1 << 5

    def enable_dma_transmit(self) -> FifoConfig0:
        return FifoConfig0((self.value | self._DMA_TRANSMIT_ENABLE) & _U32)

    def disable_dma_transmit(self) -> FifoConfig0:
        return FifoConfig0(self.value & ~self._DMA_TRANSMIT_ENABLE & _U32)

    def is_dma_transmit_enabled(self) -> bool:
        return self.value & self._DMA_TRANSMIT_ENABLE != 0

    def clear_transmit_fifo(self) -> FifoConfig0:
        return FifoConfig0((self.value | self._TRANSMIT_FIFO_CLEAR) & _U32)

    def is_transmit_fifo_overflow(self) -> bool:
        return self.value & self._TRANSMIT_FIFO_OVERFLOW != 0

    def is_transmit_fifo_underflow(self) -> bool:
        return self.value & self._TRANSMIT_FIFO_UNDERFLOW != 0


@dataclass(frozen=True)
class FifoConfig1:
    """First-in first-out queue configuration 1."""

    value: int = 0

    _TRANSMIT_COUNT = 0xF
    _TRANSMIT_THRESHOLD = 0x7 << 16

    def transmit_available_bytes(self) -> int:
        """Number of empty places left in the transmit queue."""
        return self.value & self._TRANSMIT_COUNT

    def set_transmit_threshold(self, val: int) -> FifoConfig1:
        cleared = self.value & ~self._TRANSMIT_THRESHOLD
        return FifoConfig1((cleared | ((val & _U8) << 16)) & _U32)

    def transmit_threshold(self) -> int:
        return (self.value & self._TRANSMIT_THRESHOLD) >> 16