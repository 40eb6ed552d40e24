"""Rounding enum for the fixed point math library."""

from enum import Enum


class Rounding(Enum):
    FLOOR = 0
    CEIL = 1
