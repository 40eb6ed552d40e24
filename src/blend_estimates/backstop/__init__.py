from .backstop_pool import BackstopPool, BackstopPoolEstimate, PoolBalance
from .backstop_token import BackstopToken
from .backstop_user import BackstopPoolUserEstimate, Q4W, Q4WEstimate, UserBalance

__all__ = (
    "BackstopPool",
    "BackstopPoolEstimate",
    "BackstopPoolUserEstimate",
    "BackstopToken",
    "PoolBalance",
    "Q4W",
    "Q4WEstimate",
    "UserBalance",
)
