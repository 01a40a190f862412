"""Register models for the peripherals of Bouffalo chips."""

__version__ = "0.1.0"