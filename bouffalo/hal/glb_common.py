"""Pin settings shared by the global configuration peripherals."""

from enum import IntEnum


class Pull(IntEnum):
    """Pin pull direction."""

    NONE = 0
    UP = 1
    DOWN = 2


class Drive(IntEnum):
    """Pin drive strength."""

    DRIVE0 = 0
    DRIVE1 = 1
    DRIVE2 = 2
    DRIVE3 = 3