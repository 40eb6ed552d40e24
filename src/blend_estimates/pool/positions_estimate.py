import dataclasses
import math
from collections.abc import Mapping
from typing import Self

from blend_estimates.exceptions.estimation import MissingPrice, MissingReserve
from blend_estimates.oracle import PoolOracle
from blend_estimates.pool.positions import Positions, reserves_by_index
from blend_estimates.pool.reserve import Reserve
from blend_estimates.types.aliases import AssetId, ReserveIndex


@dataclasses.dataclass(slots=True, frozen=True)
class PositionsEstimate:
    """
    A user's positions valued in the oracle's denomination.

    Effective values apply the reserve collateral and liability factors. `borrow_cap` is the
    additional effective liability the user can take on, and `borrow_limit` the ratio of
    effective liabilities to effective collateral.
    """

    total_borrowed: float
    total_supplied: float
    total_effective_liabilities: float
    total_effective_collateral: float
    borrow_cap: float
    borrow_limit: float
    net_apy: float
    supply_apy: float
    borrow_apy: float

    @classmethod
    def build(
        cls,
        reserves: Mapping[AssetId, Reserve],
        oracle: PoolOracle,
        positions: Positions,
    ) -> Self:
        """
        Value a user's positions.

        Every position must map to a loaded, priced reserve. A missing one raises instead of being
        skipped, since the user's borrow limit would otherwise be overstated.
        """

        by_index = reserves_by_index(reserves)

        def lookup(reserve_index: ReserveIndex) -> tuple[Reserve, float]:
            try:
                reserve = by_index[reserve_index]
            except KeyError:
                raise MissingReserve(reserve_index) from None
            price = oracle.get_price_float(reserve.asset_id)
            if price is None:
                raise MissingPrice(reserve.asset_id)
            return reserve, price

        borrowed: list[float] = []
        supplied: list[float] = []
        effective_liabilities: list[float] = []
        effective_collateral: list[float] = []
        borrow_interest: list[float] = []
        supply_interest: list[float] = []

        for reserve_index, d_tokens in positions.liabilities.items():
            reserve, price = lookup(reserve_index)
            base_liability = reserve.to_asset_from_d_token_float(d_tokens) * price
            borrowed.append(base_liability)
            effective_liabilities.append(
                reserve.to_effective_asset_from_d_token_float(d_tokens) * price
            )
            borrow_interest.append(base_liability * reserve.est_borrow_apy)

        for reserve_index, b_tokens in positions.collateral.items():
            reserve, price = lookup(reserve_index)
            base_collateral = reserve.to_asset_from_b_token_float(b_tokens) * price
            supplied.append(base_collateral)
            effective_collateral.append(
                reserve.to_effective_asset_from_b_token_float(b_tokens) * price
            )
            supply_interest.append(base_collateral * reserve.est_supply_apy)

        # uncollateralized supply earns interest but does not count toward the borrow limit
        for reserve_index, b_tokens in positions.supply.items():
            reserve, price = lookup(reserve_index)
            base_supply = reserve.to_asset_from_b_token_float(b_tokens) * price
            supplied.append(base_supply)
            supply_interest.append(base_supply * reserve.est_supply_apy)

        total_borrowed = math.fsum(borrowed)
        total_supplied = math.fsum(supplied)
        total_effective_liabilities = math.fsum(effective_liabilities)
        total_effective_collateral = math.fsum(effective_collateral)
        total_borrow_interest = math.fsum(borrow_interest)
        total_supply_interest = math.fsum(supply_interest)

        total_position = total_borrowed + total_supplied
        return cls(
            total_borrowed=total_borrowed,
            total_supplied=total_supplied,
            total_effective_liabilities=total_effective_liabilities,
            total_effective_collateral=total_effective_collateral,
            borrow_cap=total_effective_collateral - total_effective_liabilities,
            borrow_limit=(
                total_effective_liabilities / total_effective_collateral
                if total_effective_collateral != 0
                else 0.0
            ),
            net_apy=(
                (total_supply_interest - total_borrow_interest) / total_position
                if total_position != 0
                else 0.0
            ),
            supply_apy=total_supply_interest / total_supplied if total_supplied != 0 else 0.0,
            borrow_apy=total_borrow_interest / total_borrowed if total_borrowed != 0 else 0.0,
        )
