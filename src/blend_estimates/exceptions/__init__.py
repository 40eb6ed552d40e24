from blend_estimates.exceptions.base import BlendError, BlendValueError
from blend_estimates.exceptions.estimation import EstimationError, MissingPrice, MissingReserve
from blend_estimates.exceptions.ledger import LedgerEntryError, MalformedEntry
from blend_estimates.exceptions.math import (
    FixedMathError,
    InvalidDecimals,
    ScaleMismatch,
    ZeroDenominator,
)

from . import (
    estimation,
    ledger,
    math,
)

__all__ = (
    "BlendError",
    "BlendValueError",
    "EstimationError",
    "FixedMathError",
    "InvalidDecimals",
    "LedgerEntryError",
    "MalformedEntry",
    "MissingPrice",
    "MissingReserve",
    "ScaleMismatch",
    "ZeroDenominator",
    "estimation",
    "ledger",
    "math",
)
