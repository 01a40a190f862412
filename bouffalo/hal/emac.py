"""Ethernet Media Access Control peripheral registers."""

from __future__ import annotations


class RegisterBlock:
    """Register layout of the Ethernet MAC peripheral."""

    _OFFSETS = {
        "mode": 0x00,
        "interrupt_source": 0x04,
        "interrupt_mask": 0x08,
        "backed_gap": 0x0C,
        "frame_length": 0x18,
        "collision": 0x1C,
        "transmit_buffer": 0x20,
        "mii_mode": 0x28,
        "mii_command": 0x2C,
        "mii_address": 0x30,
        "control_write": 0x34,
        "control_read": 0x38,
        "mii_state": 0x3C,
        "mac_address": 0x40,
        "hash": 0x48,
        "transmit_control": 0x50,
    }

    @classmethod
    def offset_of(cls, name: str) -> int:
        """Byte offset of register ``name`` within the block."""
        try:
            return cls._OFFSETS[name]
        except KeyError:
            raise KeyError(f"no register named {name!r}") from None