import dataclasses
import math
from typing import Self

from blend_estimates.backstop.backstop_pool import BACKSTOP_DECIMALS, BackstopPool
from blend_estimates.backstop.backstop_token import BackstopToken
from blend_estimates.emissions import UserEmissions
from blend_estimates.libraries.fixed_math import to_float
from blend_estimates.types.aliases import Timestamp


@dataclasses.dataclass(slots=True, frozen=True)
class Q4W:
    amount: int  # shares
    exp: Timestamp


@dataclasses.dataclass(slots=True, frozen=True)
class UserBalance:
    """
    A user's backstop deposit. `shares` excludes shares queued for withdrawal, `q4w` holds the
    pending queue entries and `unlocked_q4w` the queued shares whose lock has expired.
    """

    shares: int
    q4w: tuple[Q4W, ...] = ()
    unlocked_q4w: int = 0

    def split_q4w(self, timestamp: Timestamp) -> "UserBalance":
        """
        Move the queue entries that have expired by `timestamp` into `unlocked_q4w`.
        """

        unlocked = sum(entry.amount for entry in self.q4w if entry.exp <= timestamp)
        return dataclasses.replace(
            self,
            q4w=tuple(entry for entry in self.q4w if entry.exp > timestamp),
            unlocked_q4w=self.unlocked_q4w + unlocked,
        )


@dataclasses.dataclass(slots=True, frozen=True)
class Q4WEstimate:
    amount: float  # LP tokens
    exp: Timestamp


@dataclasses.dataclass(slots=True, frozen=True)
class BackstopPoolUserEstimate:
    """
    A user's backstop deposit in LP tokens, its BLND/USDC composition and spot value, queued
    withdrawals in LP tokens, and unclaimed emissions.
    """

    tokens: float
    blnd: float
    usdc: float
    total_spot_value: float
    q4w: tuple[Q4WEstimate, ...]
    total_unlocked_q4w: float
    total_q4w: float
    emissions: float

    @classmethod
    def build(
        cls,
        backstop_token: BackstopToken,
        pool: BackstopPool,
        user_balance: UserBalance,
        user_emissions: UserEmissions | None,
        timestamp: Timestamp,
    ) -> Self:
        shares_to_tokens = pool.pool_balance.shares_to_tokens()

        def to_tokens(shares: int) -> float:
            return to_float(shares, BACKSTOP_DECIMALS) * shares_to_tokens

        tokens = to_tokens(user_balance.shares)
        q4w = tuple(
            Q4WEstimate(amount=to_tokens(entry.amount), exp=entry.exp) for entry in user_balance.q4w
        )

        emissions = 0.0
        if pool.emissions is not None:
            if user_emissions is None and user_balance.shares > 0:
                # emissions started after the user deposited
                user_emissions = UserEmissions(index=0, accrued=0)
            if user_emissions is not None:
                emissions = user_emissions.estimate_accrual(
                    pool.emissions,
                    pool.pool_balance.non_queued_shares,
                    user_balance.shares,
                    timestamp,
                )

        return cls(
            tokens=tokens,
            blnd=tokens * backstop_token.blnd_per_lp_token,
            usdc=tokens * backstop_token.usdc_per_lp_token,
            total_spot_value=tokens * backstop_token.lp_token_price,
            q4w=q4w,
            total_unlocked_q4w=to_tokens(user_balance.unlocked_q4w),
            total_q4w=math.fsum(entry.amount for entry in q4w),
            emissions=emissions,
        )
