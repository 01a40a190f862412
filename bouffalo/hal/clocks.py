"""System-on-Chip clock configuration."""

from dataclasses import dataclass

_UART_CLOCKS = {
    0: 80_000_000,
    1: 80_000_000,
    2: 80_000_000,
    3: 160_000_000,
    4: 160_000_000,
}


@dataclass(frozen=True)
class Clocks:
    """Clock settings for the current chip, in hertz."""

    xtal: int

    def xclk(self) -> int:
        """Crystal oscillator clock frequency."""
        return self.xtal

    def uart_clock(self, index: int) -> int:
        """Clock frequency of the UART peripheral ``index``."""
        try:
            return _UART_CLOCKS[index]
        except KeyError:
            raise ValueError(f"no UART peripheral with index {index}") from None