import dataclasses
from collections.abc import Mapping

from blend_estimates.pool.reserve import Reserve
from blend_estimates.types.aliases import AssetId, ReserveIndex


@dataclasses.dataclass(slots=True, frozen=True)
class Positions:
    """
    A user's positions in a pool, keyed by reserve index. Liabilities are d token balances,
    collateral and supply are b token balances.
    """

    liabilities: Mapping[ReserveIndex, int] = dataclasses.field(default_factory=dict)
    collateral: Mapping[ReserveIndex, int] = dataclasses.field(default_factory=dict)
    supply: Mapping[ReserveIndex, int] = dataclasses.field(default_factory=dict)


def d_token_id(reserve_index: ReserveIndex) -> int:
    return reserve_index * 2


def b_token_id(reserve_index: ReserveIndex) -> int:
    return reserve_index * 2 + 1


def reserves_by_index(reserves: Mapping[AssetId, Reserve]) -> dict[ReserveIndex, Reserve]:
    return {reserve.config.index: reserve for reserve in reserves.values()}
