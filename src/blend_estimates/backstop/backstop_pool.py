import dataclasses
from collections.abc import Mapping
from typing import Any, Self

from blend_estimates.emissions import Emissions
from blend_estimates.ledger import read_native_map
from blend_estimates.libraries.fixed_math import to_float
from blend_estimates.types.aliases import ContractId, LedgerSequence

# Backstop shares and LP tokens are tracked with 7 decimals
BACKSTOP_DECIMALS = 7


@dataclasses.dataclass(slots=True, frozen=True)
class PoolBalance:
    """
    A pool's backstop deposit: total `shares`, the LP `tokens` they are backed by, and the shares
    queued for withdrawal (`q4w`).
    """

    shares: int
    tokens: int
    q4w: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map("PoolBalance", mapping, ("shares", "tokens", "q4w"))
        return cls(
            shares=int(values["shares"]),
            tokens=int(values["tokens"]),
            q4w=int(values["q4w"]),
        )

    @property
    def non_queued_shares(self) -> int:
        """
        The shares that earn emissions.
        """

        return self.shares - self.q4w

    def shares_to_tokens(self) -> float:
        if self.shares == 0:
            return 0.0
        return self.tokens / self.shares


@dataclasses.dataclass(slots=True, frozen=True)
class BackstopPoolEstimate:
    blnd: float
    usdc: float
    total_spot_value: float
    q4w_percentage: float

    @classmethod
    def build(
        cls,
        pool_balance: PoolBalance,
        blnd_per_lp_token: float,
        usdc_per_lp_token: float,
        lp_token_price: float,
    ) -> Self:
        """
        Project the pool's LP tokens onto their BLND and USDC composition and spot value.

        `q4w_percentage` is the ratio of queued shares to total shares; the scale cancels. A pool
        without shares has nothing queued.
        """

        tokens = to_float(pool_balance.tokens, BACKSTOP_DECIMALS)
        return cls(
            blnd=tokens * blnd_per_lp_token,
            usdc=tokens * usdc_per_lp_token,
            total_spot_value=tokens * lp_token_price,
            q4w_percentage=(
                pool_balance.q4w / pool_balance.shares if pool_balance.shares != 0 else 0.0
            ),
        )


@dataclasses.dataclass(slots=True, frozen=True)
class BackstopPool:
    """
    A pool's backstop deposit with its emissions and estimate.
    """

    pool_id: ContractId
    pool_balance: PoolBalance
    emissions: Emissions | None
    estimate: BackstopPoolEstimate
    latest_ledger: LedgerSequence = 0

    @classmethod
    def build(
        cls,
        pool_id: ContractId,
        pool_balance: PoolBalance,
        emissions: Emissions | None,
        blnd_per_lp_token: float,
        usdc_per_lp_token: float,
        lp_token_price: float,
        latest_ledger: LedgerSequence = 0,
    ) -> Self:
        return cls(
            pool_id=pool_id,
            pool_balance=pool_balance,
            emissions=emissions,
            estimate=BackstopPoolEstimate.build(
                pool_balance, blnd_per_lp_token, usdc_per_lp_token, lp_token_price
            ),
            latest_ledger=latest_ledger,
        )
