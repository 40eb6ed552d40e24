import dataclasses
import math
from collections.abc import Mapping
from typing import Self

from blend_estimates.libraries.fixed_math import to_float
from blend_estimates.logging import logger
from blend_estimates.oracle import PoolOracle
from blend_estimates.pool.reserve import ReserveLike
from blend_estimates.types.aliases import AssetId


@dataclasses.dataclass(slots=True, frozen=True)
class PoolEstimate:
    """
    Pool totals valued in the oracle's denomination.

    `total_supply` and `total_borrowed` are the values of all tokens supplied to and borrowed from
    the pool, and `avg_borrow_apy` the borrow APY weighted by borrowed value.
    """

    total_supply: float
    total_borrowed: float
    avg_borrow_apy: float

    @classmethod
    def build(cls, reserves: Mapping[AssetId, ReserveLike], oracle: PoolOracle) -> Self:
        """
        Value each priced reserve and total them.

        Reserves the oracle has no price for are skipped and contribute nothing to the totals or
        the APY weighting. Totals are summed with `math.fsum`, so the reserve order does not
        change the result beyond the rounding of each term.
        """

        supplied: list[float] = []
        borrowed: list[float] = []
        interest: list[float] = []

        for asset_id, reserve in reserves.items():
            price = oracle.get_price_float(asset_id)
            if price is None:
                logger.debug(f"Skipping reserve {asset_id}: no oracle price")
                continue

            borrowed_value = to_float(reserve.total_liabilities, reserve.decimals) * price
            supplied.append(to_float(reserve.total_supply, reserve.decimals) * price)
            borrowed.append(borrowed_value)
            interest.append(borrowed_value * reserve.est_borrow_apy)

        total_borrowed = math.fsum(borrowed)
        return cls(
            total_supply=math.fsum(supplied),
            total_borrowed=total_borrowed,
            avg_borrow_apy=math.fsum(interest) / total_borrowed if total_borrowed != 0 else 0.0,
        )
