from blend_estimates.libraries.constants import SCALAR_7, SCALAR_9, SCALAR_12, SECONDS_PER_YEAR
from blend_estimates.libraries.fixed_math import (
    div_ceil,
    div_floor,
    mul_ceil,
    mul_div,
    mul_floor,
    to_fixed,
    to_float,
)
from blend_estimates.libraries.rounding import Rounding
from blend_estimates.libraries.scaled_amount import ScaledAmount

__all__ = (
    "SCALAR_7",
    "SCALAR_9",
    "SCALAR_12",
    "SECONDS_PER_YEAR",
    "Rounding",
    "ScaledAmount",
    "div_ceil",
    "div_floor",
    "mul_ceil",
    "mul_div",
    "mul_floor",
    "to_fixed",
    "to_float",
)
