from .emission_estimate import EmissionEstimate
from .pool_estimate import PoolEstimate
from .positions import Positions, b_token_id, d_token_id
from .positions_estimate import PositionsEstimate
from .reserve import Reserve, ReserveConfig, ReserveData, ReserveEstimate, ReserveLike

__all__ = (
    "EmissionEstimate",
    "PoolEstimate",
    "Positions",
    "PositionsEstimate",
    "Reserve",
    "ReserveConfig",
    "ReserveData",
    "ReserveEstimate",
    "ReserveLike",
    "b_token_id",
    "d_token_id",
)
