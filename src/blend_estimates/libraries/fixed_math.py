"""
Integer multiply-then-divide helpers that match the rounding of the on-chain fixed point library.

Every division in the protocol is a multiplication by one quantity and a division by another, so
the four public operations are built on two private helpers, `_div_floor` and `_div_ceil`. The
rounding adjustment is applied to the combined product, never to the operands.
"""

import math
from typing import overload

from blend_estimates.exceptions.math import InvalidDecimals, ZeroDenominator
from blend_estimates.libraries.rounding import Rounding


def _div_floor(r: int, z: int) -> int:
    if z == 0:
        raise ZeroDenominator
    return r // z


def _div_ceil(r: int, z: int) -> int:
    if z == 0:
        raise ZeroDenominator
    if z < 0:
        r, z = -r, -z
    # floor, bumped by one only when the division leaves a positive remainder
    return r // z + (1 if r % z != 0 else 0)


def mul_floor(x: int, y: int, denominator: int) -> int:
    """
    Calculate floor(x * y / denominator).
    """

    return _div_floor(x * y, denominator)


def mul_ceil(x: int, y: int, denominator: int) -> int:
    """
    Calculate ceil(x * y / denominator).
    """

    return _div_ceil(x * y, denominator)


def div_floor(x: int, y: int, denominator: int) -> int:
    """
    Calculate floor(x * denominator / y).
    """

    return mul_floor(x, denominator, y)


def div_ceil(x: int, y: int, denominator: int) -> int:
    """
    Calculate ceil(x * denominator / y).
    """

    return mul_ceil(x, denominator, y)


@overload
def mul_div(x: int, y: int, denominator: int) -> int: ...


@overload
def mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> int: ...


def mul_div(x: int, y: int, denominator: int, rounding: Rounding = Rounding.FLOOR) -> int:
    if rounding == Rounding.FLOOR:
        return mul_floor(x, y, denominator)
    return mul_ceil(x, y, denominator)


def to_fixed(value: float, decimals: int = 7) -> int:
    """
    Convert a float to a scaled integer, truncating toward negative infinity.
    """

    if decimals < 0:
        raise InvalidDecimals(decimals)
    return math.floor(value * 10**decimals)


def to_float(value: int, decimals: int = 7) -> float:
    """
    Convert a scaled integer to a float. The result is approximate and should only be displayed.
    """

    if decimals < 0:
        raise InvalidDecimals(decimals)
    return value / 10**decimals
