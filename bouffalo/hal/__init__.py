"""Register values and register layouts of Bouffalo chip peripherals."""