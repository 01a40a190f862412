# bouffalo

Register models for the peripherals of Bouffalo chips (BL602, BL702, BL808,
BL616 series).

Each register value is an immutable object holding an integer in `value`. Its
methods read fields out of that integer, or return a changed copy with a field
set, so settings can be chained. Each `RegisterBlock` class gives the byte offset
of a register within its peripheral with the class method `offset_of(name)`, and
raises `KeyError` for a name it does not know.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. Install the `test`
extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

All modules live in `bouffalo.hal`:

- `clocks`: `Clocks`, with the crystal frequency (`xclk()`) and the clock of each
  UART peripheral (`uart_clock(index)`, indices 0 to 4; other indices raise
  `ValueError`).
- `dma`: DMA register layout (`RegisterBlock`, `InterruptRegisters`,
  `ChannelRegisters`), the interrupt state and clear registers, `EnabledChannels`,
  `GlobalConfig`, `LliControl` with `TransferWidth` and `BurstSize`, and the
  `LliItemPool` descriptor.
- `dma_channel`: `ChannelConfig`, with `DMAMode`, `Periph4DMA01` and `Periph4DMA2`.
- `dbi`: display bus interface layout, `Config`, `FifoConfig0` and `FifoConfig1`.
- `emac`: Ethernet MAC register layout.
- `glb_common`: `Pull` and `Drive`, shared by the GPIO registers.
- `glb_mm`: multi-media subsystem layout, `CpuConfig0` and `CpuConfig1`.
- `glb_v1`: BL602/BL702 global configuration layout, `GpioConfig` (two pins per
  register, chosen by `idx` 0 or 1) and `GpioInterruptMode`.
- `glb_v2`: BL808/BL616 global configuration layout, `UartConfig`, `UartSignal`
  and `UartMuxGroup`.
- `glb_v2_periph`: `I2cConfig`, `SpiConfig` and `PwmConfig` with their source
  enumerations.
- `glb_v2_clock`: `ParamConfig`, `SdhConfig`, `ClockConfig1` and `Ldo12uhsConfig`.
- `glb_v2_gpio`: `GpioConfig` with `Function`, `InterruptMode` and `Mode`.

Reading a field whose bits hold no valid value, or passing a channel, slot or
peripheral index out of range, raises `ValueError`.

## Example

```python
from bouffalo.hal.clocks import Clocks
from bouffalo.hal.dma import BurstSize, LliControl, TransferWidth
from bouffalo.hal.glb_common import Pull
from bouffalo.hal.glb_v2 import RegisterBlock
from bouffalo.hal.glb_v2_gpio import Function, GpioConfig

ctrl = (
    LliControl(0)
    .enable_cplt_int()
    .set_dst_transfer_width(TransferWidth.WORD)
    .set_src_bst_size(BurstSize.INCR4)
    .set_transfer_size(0x100)
)
print(hex(ctrl.value), ctrl.dst_transfer_width())

gpio = GpioConfig(0).set_function(Function.GPIO).set_pull(Pull.UP)
print(gpio.function(), gpio.pull())

print(hex(RegisterBlock.offset_of("gpio_config")))  # 0x8c4
print(Clocks(xtal=40_000_000).uart_clock(3))        # 160000000
```

## What this package does not do

It models register values and layouts only. It does not touch hardware or
memory. It has no command line, and it does not check, patch or flash firmware
images.