import pytest

from bouffalo.hal.glb_v2_periph import (
    I2cClockSource,
    I2cConfig,
    PwmConfig,
    PwmSignal0,
    PwmSignal1,
    SpiClockSource,
    SpiConfig,
)


@pytest.mark.parametrize(
    "initial, divide, expected_value, expected_divide",
    [
        (0x0, 1, 0x00010000, 1),
        (0x0, 0xFF, 0x00FF0000, 0xFF),
        (0x8, 1, 0x00010008, 1),
        (0x10, 0x0F, 0x000F0010, 0x0F),
    ],
)
def test_i2c_clock_divide(initial, divide, expected_value, expected_divide):
    config = I2cConfig(initial).set_clock_divide(divide)
    assert config.value == expected_value
    assert config.clock_divide() == expected_divide


def test_i2c_clock_enable():
    config = I2cConfig(0x0).enable_clock()
    assert config.value == 0x01000000
    assert config.is_clock_enabled()
    config = config.disable_clock()
    assert config.value == 0x00000000
    assert not config.is_clock_enabled()


def test_i2c_clock_source():
    config = I2cConfig(0x0).set_clock_source(I2cClockSource.BCLK)
    assert config.value == 0x00000000
    assert config.clock_source() == I2cClockSource.BCLK

    config = I2cConfig(0x0).set_clock_source(I2cClockSource.XCLK)
    assert config.value == 0x02000000
    assert config.clock_source() == I2cClockSource.XCLK


def test_i2c_divide_keeps_other_bits():
    config = I2cConfig(0x03000000).set_clock_divide(0x20)
    assert config.is_clock_enabled()
    assert config.clock_source() == I2cClockSource.XCLK
    assert config.clock_divide() == 0x20


@pytest.mark.parametrize(
    "divide, expected_value",
    [(1, 0x00000001), (0xFF, 0x000000FF), (0x0F, 0x0000000F)],
)
def test_spi_clock_divide(divide, expected_value):
    config = SpiConfig(0x0).set_clock_divide(divide)
    assert config.value == expected_value
    assert config.clock_divide() == divide


def test_spi_clock_enable():
    config = SpiConfig(0x0).enable_clock()
    assert config.value == 0x00000100
    assert config.is_clock_enabled()
    config = config.disable_clock()
    assert config.value == 0x00000000
    assert not config.is_clock_enabled()


def test_spi_clock_source():
    config = SpiConfig(0x0).set_clock_source(SpiClockSource.MUX_PLL_160M)
    assert config.value == 0x00000000
    assert config.clock_source() == SpiClockSource.MUX_PLL_160M

    config = SpiConfig(0x0).set_clock_source(SpiClockSource.XCLK)
    assert config.value == 0x00000200
    assert config.clock_source() == SpiClockSource.XCLK


def test_pwm_signal_0():
    config = PwmConfig(0x0).set_signal_0(PwmSignal0.SINGLE_END)
    assert config.value == 0x00000000
    assert config.signal_0() == PwmSignal0.SINGLE_END

    config = PwmConfig(0x0).set_signal_0(PwmSignal0.DIFFERENTIAL_END)
    assert config.value == 0x00000001
    assert config.signal_0() == PwmSignal0.DIFFERENTIAL_END


def test_pwm_signal_1():
    config = PwmConfig(0x0).set_signal_1(PwmSignal1.SINGLE_END)
    assert config.value == 0x00000000
    assert config.signal_1() == PwmSignal1.SINGLE_END

    config = PwmConfig(0x0).set_signal_1(PwmSignal1.BRUSHLESS_DC_MOTOR)
    assert config.value == 0x00000002
    assert config.signal_1() == PwmSignal1.BRUSHLESS_DC_MOTOR


def test_pwm_signals_independent():
    config = (
        PwmConfig(0x0)
        .set_signal_0(PwmSignal0.DIFFERENTIAL_END)
        .set_signal_1(PwmSignal1.BRUSHLESS_DC_MOTOR)
        .set_signal_0(PwmSignal0.SINGLE_END)
    )
    assert config.value == 0x00000002
    assert config.signal_1() == PwmSignal1.BRUSHLESS_DC_MOTOR