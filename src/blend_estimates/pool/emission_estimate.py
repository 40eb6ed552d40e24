import dataclasses
from collections.abc import Mapping
from typing import Self

from blend_estimates.emissions import Emissions, UserEmissions
from blend_estimates.pool.positions import Positions, b_token_id, d_token_id
from blend_estimates.pool.reserve import Reserve
from blend_estimates.types.aliases import AssetId, Timestamp

# A user with a balance but no emission record started their position before emissions began
_EMPTY_USER_EMISSIONS = UserEmissions(index=0, accrued=0)


def _estimate_token_accrual(
    emissions: Emissions | None,
    user_emissions: UserEmissions | None,
    supply: int,
    balance: int,
    timestamp: Timestamp,
) -> float:
    if emissions is None:
        return 0.0
    if user_emissions is None:
        if balance <= 0:
            return 0.0
        user_emissions = _EMPTY_USER_EMISSIONS
    return user_emissions.estimate_accrual(emissions, supply, balance, timestamp)


@dataclasses.dataclass(slots=True, frozen=True)
class EmissionEstimate:
    """
    A user's unclaimed pool emissions at `timestamp`.

    `emissions` maps each asset to its `(d_token, b_token)` accruals, and `token_ids_to_claim`
    lists the reserve token ids with a positive accrual.
    """

    emissions: Mapping[AssetId, tuple[float, float]]
    token_ids_to_claim: tuple[int, ...]
    total_emissions: float
    timestamp: Timestamp

    @classmethod
    def build(
        cls,
        reserves: Mapping[AssetId, Reserve],
        positions: Positions,
        user_emissions: Mapping[int, UserEmissions],
        timestamp: Timestamp,
    ) -> Self:
        accrued: dict[AssetId, tuple[float, float]] = {}
        token_ids: list[int] = []
        total = 0.0

        for reserve in reserves.values():
            reserve_index = reserve.config.index

            d_token = d_token_id(reserve_index)
            d_accrual = _estimate_token_accrual(
                reserve.borrow_emissions,
                user_emissions.get(d_token),
                reserve.data.d_supply,
                positions.liabilities.get(reserve_index, 0),
                timestamp,
            )

            b_token = b_token_id(reserve_index)
            b_accrual = _estimate_token_accrual(
                reserve.supply_emissions,
                user_emissions.get(b_token),
                reserve.data.b_supply,
                positions.collateral.get(reserve_index, 0) + positions.supply.get(reserve_index, 0),
                timestamp,
            )

            if d_accrual > 0:
                token_ids.append(d_token)
            if b_accrual > 0:
                token_ids.append(b_token)
            if d_accrual > 0 or b_accrual > 0:
                accrued[reserve.asset_id] = (d_accrual, b_accrual)
                total += d_accrual + b_accrual

        return cls(
            emissions=accrued,
            token_ids_to_claim=tuple(token_ids),
            total_emissions=total,
            timestamp=timestamp,
        )
