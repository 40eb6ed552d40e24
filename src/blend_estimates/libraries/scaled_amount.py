"""
A scaled integer that carries its own decimal width.

The plain helpers in `fixed_math` leave scale bookkeeping to the caller. `ScaledAmount` makes the
convention explicit: amounts at different widths cannot be added, subtracted or compared until
one side is rescaled.
"""

import dataclasses
from typing import Self

from blend_estimates.exceptions.math import InvalidDecimals, ScaleMismatch
from blend_estimates.libraries.fixed_math import mul_div, to_fixed, to_float
from blend_estimates.libraries.rounding import Rounding


@dataclasses.dataclass(slots=True, frozen=True)
class ScaledAmount:
    value: int
    decimals: int

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise InvalidDecimals(self.decimals)

    @classmethod
    def from_float(cls, value: float, decimals: int) -> Self:
        return cls(value=to_fixed(value, decimals), decimals=decimals)

    @property
    def scalar(self) -> int:
        return 10**self.decimals

    def _check_scale(self, other: "ScaledAmount") -> None:
        if other.decimals != self.decimals:
            raise ScaleMismatch(self.decimals, other.decimals)

    def __add__(self, other: "ScaledAmount") -> "ScaledAmount":
        self._check_scale(other)
        return ScaledAmount(self.value + other.value, self.decimals)

    def __sub__(self, other: "ScaledAmount") -> "ScaledAmount":
        self._check_scale(other)
        return ScaledAmount(self.value - other.value, self.decimals)

    def __neg__(self) -> "ScaledAmount":
        return ScaledAmount(-self.value, self.decimals)

    def __lt__(self, other: "ScaledAmount") -> bool:
        self._check_scale(other)
        return self.value < other.value

    def __le__(self, other: "ScaledAmount") -> bool:
        self._check_scale(other)
        return self.value <= other.value

    def __gt__(self, other: "ScaledAmount") -> bool:
        self._check_scale(other)
        return self.value > other.value

    def __ge__(self, other: "ScaledAmount") -> bool:
        self._check_scale(other)
        return self.value >= other.value

    def mul(self, other: "ScaledAmount", rounding: Rounding = Rounding.FLOOR) -> "ScaledAmount":
        """
        Multiply by another amount, keeping this amount's scale.
        """

        return ScaledAmount(
            mul_div(self.value, other.value, other.scalar, rounding),
            self.decimals,
        )

    def div(self, other: "ScaledAmount", rounding: Rounding = Rounding.FLOOR) -> "ScaledAmount":
        """
        Divide by another amount, keeping this amount's scale.
        """

        return ScaledAmount(
            mul_div(self.value, other.scalar, other.value, rounding),
            self.decimals,
        )

    def rescale(self, decimals: int, rounding: Rounding = Rounding.FLOOR) -> "ScaledAmount":
        """
        Express the amount at a different decimal width. Increasing the width is exact, reducing
        it rounds in the given direction.
        """

        if decimals < 0:
            raise InvalidDecimals(decimals)
        if decimals >= self.decimals:
            return ScaledAmount(self.value * 10 ** (decimals - self.decimals), decimals)
        return ScaledAmount(
            mul_div(self.value, 1, 10 ** (self.decimals - decimals), rounding),
            decimals,
        )

    def to_float(self) -> float:
        return to_float(self.value, self.decimals)
