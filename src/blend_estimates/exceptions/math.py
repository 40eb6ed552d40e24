from typing import Any

from blend_estimates.exceptions.base import BlendError


class FixedMathError(BlendError):
    """
    Exception raised inside the fixed point math helpers.
    """


class ZeroDenominator(FixedMathError, ZeroDivisionError):
    """
    Raised when a multiply-then-divide operation is given a zero divisor.
    """

    def __init__(self) -> None:
        super().__init__(message="Division by zero in fixed point operation.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, ()


class ScaleMismatch(FixedMathError):
    """
    Raised when two scaled amounts with different decimals are combined without an explicit
    rescale.
    """

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(message=f"Cannot combine amounts with {left} and {right} decimals.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.left, self.right)


class InvalidDecimals(FixedMathError):
    def __init__(self, decimals: int) -> None:
        self.decimals = decimals
        super().__init__(message=f"Decimals must be a non-negative integer, got {decimals}.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.decimals,)
