import pytest

from bouffalo.hal.dma_channel import ChannelConfig, DMAMode, Periph4DMA01, Periph4DMA2

P01 = Periph4DMA01
P2 = Periph4DMA2

DMA_MODE_CASES = [
    (DMAMode.MEM2MEM, 0x00000000),
    (DMAMode.MEM2PERIPH, 0x00000800),
    (DMAMode.PERIPH2MEM, 0x00001000),
    (DMAMode.PERIPH2PERIPH, 0x00001800),
    (DMAMode.PERIPH2PERIPH_CTRL_BY_DST, 0x00002000),
    (DMAMode.MEM2PERIPH_CTRL_BY_PERIPH, 0x00002800),
    (DMAMode.PERIPH2MEM_CTRL_BY_PERIPH, 0x00003000),
    (DMAMode.PERIPH2PERIPH_CTRL_BY_SRC, 0x00003800),
]

DST_DMA01_CASES = [
    (P01.UART0_RX, 0x00000000),
    (P01.UART0_TX, 0x00000040),
    (P01.UART1_RX, 0x00000080),
    (P01.UART1_TX, 0x000000C0),
    (P01.UART2_RX, 0x00000100),
    (P01.UART2_TX, 0x00000140),
    (P01.I2C0_RX, 0x00000180),
    (P01.I2C0_TX, 0x000001C0),
    (P01.IR_TX, 0x00000200),
    (P01.GPIO_TX, 0x00000240),
    (P01.SPI0_RX, 0x00000280),
    (P01.SPI0_TX, 0x000002C0),
    (P01.AUDIO_RX, 0x00000300),
    (P01.AUDIO_TX, 0x00000340),
    (P01.I2C1_RX, 0x00000380),
    (P01.I2C1_TX, 0x000003C0),
    (P01.I2S_RX, 0x00000400),
    (P01.I2S_TX, 0x00000440),
    (P01.PDM_RX, 0x00000480),
    (P01.GP_ADC, 0x00000580),
    (P01.GP_DAC, 0x000005C0),
]

DST_DMA2_CASES = [
    (P2.UART3_RX, 0x00000000),
    (P2.UART3_TX, 0x00000040),
    (P2.SPI1_RX, 0x00000080),
    (P2.SPI1_TX, 0x000000C0),
    (P2.I2C2_RX, 0x00000180),
    (P2.I2C2_TX, 0x000001C0),
    (P2.I2C3_RX, 0x00000200),
    (P2.I2C3_TX, 0x00000240),
    (P2.DSI_RX, 0x00000280),
    (P2.DSI_TX, 0x000002C0),
    (P2.DBI_TX, 0x00000580),
]

SRC_DMA01_CASES = [
    (P01.UART0_RX, 0x00000000),
    (P01.UART0_TX, 0x00000002),
    (P01.UART1_RX, 0x00000004),
    (P01.UART1_TX, 0x00000006),
    (P01.UART2_RX, 0x00000008),
    (P01.UART2_TX, 0x0000000A),
    (P01.I2C0_RX, 0x0000000C),
    (P01.I2C0_TX, 0x0000000E),
    (P01.IR_TX, 0x00000010),
    (P01.GPIO_TX, 0x00000012),
    (P01.SPI0_RX, 0x00000014),
    (P01.SPI0_TX, 0x00000016),
    (P01.AUDIO_RX, 0x00000018),
    (P01.AUDIO_TX, 0x0000001A),
    (P01.I2C1_RX, 0x0000001C),
    (P01.I2C1_TX, 0x0000001E),
    (P01.I2S_RX, 0x00000020),
    (P01.I2S_TX, 0x00000022),
    (P01.PDM_RX, 0x00000024),
    (P01.GP_ADC, 0x0000002C),
    (P01.GP_DAC, 0x0000002E),
]

SRC_DMA2_CASES = [
    (P2.UART3_RX, 0x00000000),
    (P2.UART3_TX, 0x00000002),
    (P2.SPI1_RX, 0x00000004),
    (P2.SPI1_TX, 0x00000006),
    (P2.I2C2_RX, 0x0000000C),
    (P2.I2C2_TX, 0x0000000E),
    (P2.I2C3_RX, 0x00000010),
    (P2.I2C3_TX, 0x00000012),
    (P2.DSI_RX, 0x00000014),
    (P2.DSI_TX, 0x00000016),
    (P2.DBI_TX, 0x0000002C),
]


def test_lli_cnt():
    assert ChannelConfig(0x3FF00000).lli_cnt() == 0x3FF


def test_stop_and_resume():
    val = ChannelConfig(0).stop_dma()
    assert val.is_dma_stopped()
    assert val.value == 0x00040000
    val = val.resume_dma()
    assert not val.is_dma_stopped()
    assert val.value == 0


def test_fifo_empty():
    assert not ChannelConfig(0x00020000).is_fifo_empty()
    assert ChannelConfig(0).is_fifo_empty()


def test_lock_and_unlock():
    val = ChannelConfig(0).lock_dma()
    assert val.is_dma_locked()
    assert val.value == 0x00010000
    val = val.unlock_dma()
    assert not val.is_dma_locked()
    assert val.value == 0


def test_completion_interrupt():
    val = ChannelConfig(0).enable_cplt_int()
    assert val.is_cplt_int_enabled()
    assert val.value == 0x00008000
    val = val.disable_cplt_int()
    assert not val.is_cplt_int_enabled()
    assert val.value == 0


def test_error_interrupt():
    val = ChannelConfig(0).enable_err_int()
    assert val.is_err_int_enabled()
    assert val.value == 0x00004000
    val = val.disable_err_int()
    assert not val.is_err_int_enabled()
    assert val.value == 0


def test_dma_mode_sequence():
    val = ChannelConfig(0)
    for mode, expected in DMA_MODE_CASES:
        val = val.set_dma_mode(mode)
        assert val.dma_mode() == mode
        assert val.value == expected


def test_dst_periph4dma01_sequence():
    val = ChannelConfig(0)
    for periph, expected in DST_DMA01_CASES:
        val = val.set_dst_periph4dma01(periph)
        assert val.dst_periph4dma01() == periph
        assert val.value == expected


def test_dst_periph4dma2_sequence():
    val = ChannelConfig(0)
    for periph, expected in DST_DMA2_CASES:
        val = val.set_dst_periph4dma2(periph)
        assert val.dst_periph4dma2() == periph
        assert val.value == expected


def test_src_periph4dma01_sequence():
    val = ChannelConfig(0)
    for periph, expected in SRC_DMA01_CASES:
        val = val.set_src_periph4dma01(periph)
        assert val.src_periph4dma01() == periph
        assert val.value == expected


def test_src_periph4dma2_sequence():
    val = ChannelConfig(0)
    for periph, expected in SRC_DMA2_CASES:
        val = val.set_src_periph4dma2(periph)
        assert val.src_periph4dma2() == periph
        assert val.value == expected


@pytest.mark.parametrize("periph,expected", DST_DMA01_CASES)
def test_dst_periph4dma01_keeps_other_bits(periph, expected):
    val = ChannelConfig(0x1).set_dst_periph4dma01(periph)
    assert val.value == expected | 0x1
    assert val.is_ch_enabled()


def test_enable_and_disable_channel():
    val = ChannelConfig(0).enable_ch()
    assert val.is_ch_enabled()
    assert val.value == 0x00000001
    val = val.disable_ch()
    assert not val.is_ch_enabled()
    assert val.value == 0


def test_invalid_dst_periph_field_raises():
    with pytest.raises(ValueError):
        ChannelConfig(19 << 6).dst_periph4dma01()
    with pytest.raises(ValueError):
        ChannelConfig(4 << 6).dst_periph4dma2()


def test_invalid_src_periph_field_raises():
    with pytest.raises(ValueError):
        ChannelConfig(20 << 1).src_periph4dma01()
    with pytest.raises(ValueError):
        ChannelConfig(5 << 1).src_periph4dma2()


def test_setters_return_new_values():
    original = ChannelConfig(0)
    changed = original.lock_dma()
    assert original.value == 0
    assert changed.value == 0x00010000