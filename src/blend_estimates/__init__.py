from .config import settings
from .logging import logger
from .version import __version__

logger.setLevel(settings.log_level)

# isort: split

from .backstop import (
    BackstopPool,
    BackstopPoolEstimate,
    BackstopPoolUserEstimate,
    BackstopToken,
    PoolBalance,
    UserBalance,
)
from .emissions import EmissionConfig, EmissionData, Emissions, UserEmissions
from .libraries import (
    SCALAR_7,
    SCALAR_9,
    SCALAR_12,
    Rounding,
    ScaledAmount,
    div_ceil,
    div_floor,
    mul_ceil,
    mul_floor,
    to_fixed,
    to_float,
)
from .oracle import PoolOracle, PriceData
from .pool import (
    EmissionEstimate,
    PoolEstimate,
    Positions,
    PositionsEstimate,
    Reserve,
    ReserveConfig,
    ReserveData,
    ReserveEstimate,
)

__all__ = (
    "SCALAR_7",
    "SCALAR_9",
    "SCALAR_12",
    "BackstopPool",
    "BackstopPoolEstimate",
    "BackstopPoolUserEstimate",
    "BackstopToken",
    "EmissionConfig",
    "EmissionData",
    "EmissionEstimate",
    "Emissions",
    "PoolBalance",
    "PoolEstimate",
    "PoolOracle",
    "Positions",
    "PositionsEstimate",
    "PriceData",
    "Reserve",
    "ReserveConfig",
    "ReserveData",
    "ReserveEstimate",
    "Rounding",
    "ScaledAmount",
    "UserBalance",
    "UserEmissions",
    "__version__",
    "backstop",
    "div_ceil",
    "div_floor",
    "exceptions",
    "libraries",
    "logger",
    "mul_ceil",
    "mul_floor",
    "pool",
    "settings",
    "to_fixed",
    "to_float",
)
