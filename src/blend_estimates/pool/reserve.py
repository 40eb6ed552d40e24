import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, Self

from blend_estimates.emissions import Emissions
from blend_estimates.ledger import read_native_map
from blend_estimates.libraries.constants import SCALAR_7, SCALAR_12, SECONDS_PER_YEAR
from blend_estimates.libraries.fixed_math import div_ceil, mul_ceil, mul_floor, to_float
from blend_estimates.types.aliases import AssetId, ReserveIndex, Timestamp

# Utilization above which the steepest rate segment applies
MAX_RATE_UTIL = 0.95


class ReserveLike(Protocol):
    """
    The view of a reserve needed to value it: supplied and borrowed amounts as fixed point
    numbers with the reserve's decimals, and an estimated borrow APY.
    """

    @property
    def asset_id(self) -> AssetId: ...
    @property
    def decimals(self) -> int: ...
    @property
    def total_supply(self) -> int: ...
    @property
    def total_liabilities(self) -> int: ...
    @property
    def est_borrow_apy(self) -> float: ...


@dataclasses.dataclass(slots=True, frozen=True)
class ReserveConfig:
    """
    Reserve configuration. Factors and rates are fixed point numbers with 7 decimals.
    """

    index: ReserveIndex
    decimals: int
    c_factor: int
    l_factor: int
    util: int
    max_util: int
    r_base: int
    r_one: int
    r_two: int
    r_three: int
    reactivity: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map(
            "ReserveConfig",
            mapping,
            (field.name for field in dataclasses.fields(cls)),
        )
        return cls(**{key: int(value) for key, value in values.items()})


@dataclasses.dataclass(slots=True, frozen=True)
class ReserveData:
    """
    Reserve ledger data. `d_rate` and `b_rate` have 12 decimals, `ir_mod` has 7 decimals, and the
    supplies and backstop credit use the reserve's decimals.
    """

    d_rate: int
    b_rate: int
    ir_mod: int
    d_supply: int
    b_supply: int
    backstop_credit: int
    last_time: Timestamp

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map(
            "ReserveData",
            mapping,
            (field.name for field in dataclasses.fields(cls)),
        )
        return cls(**{key: int(value) for key, value in values.items()})


@dataclasses.dataclass(slots=True, frozen=True)
class ReserveEstimate:
    """
    Reserve data projected to `timestamp`.

    This is an approximation using floating point math and may not match the contract's
    calculations exactly.
    """

    d_rate: float
    b_rate: float
    supplied: float
    borrowed: float
    available: float
    apy: float
    supply_apy: float
    util: float
    timestamp: Timestamp

    @classmethod
    def build(
        cls,
        config: ReserveConfig,
        data: ReserveData,
        pool_balance: int,
        backstop_take_rate: int,
        timestamp: Timestamp,
    ) -> Self:
        """
        Project the reserve to `timestamp`.

        `pool_balance` is the pool's balance of the underlying token and `backstop_take_rate` the
        share of interest credited to the backstop, with 7 decimals.
        """

        r_base = config.r_base / SCALAR_7
        r_one = config.r_one / SCALAR_7
        r_two = config.r_two / SCALAR_7
        r_three = config.r_three / SCALAR_7
        take_rate = backstop_take_rate / SCALAR_7

        d_rate = to_float(data.d_rate, 12)
        d_supply = to_float(data.d_supply, config.decimals)
        borrowed = d_supply * d_rate
        b_rate = to_float(data.b_rate, 12)
        b_supply = to_float(data.b_supply, config.decimals)
        supplied = b_supply * b_rate

        cur_util = 0.0
        cur_apy = r_base
        cur_supply_apy = 0.0
        if supplied != 0 and borrowed != 0:
            ir_mod = data.ir_mod / SCALAR_7
            cur_util = borrowed / supplied
            target_util = config.util / SCALAR_7
            if cur_util <= target_util:
                cur_apy = ((cur_util / target_util) * r_one + r_base) * ir_mod
            elif cur_util <= MAX_RATE_UTIL:
                cur_apy = (
                    (cur_util - target_util) / (MAX_RATE_UTIL - target_util) * r_two
                    + r_one
                    + r_base
                ) * ir_mod
            else:
                cur_apy = (cur_util - MAX_RATE_UTIL) / (1 - MAX_RATE_UTIL) * r_three + ir_mod * (
                    r_one + r_two + r_base
                )
            cur_supply_apy = cur_apy * (1 - take_rate) * cur_util

            accrual = max(timestamp - data.last_time, 0) / SECONDS_PER_YEAR * cur_apy + 1
            d_rate *= accrual
            new_borrowed = d_supply * d_rate
            accrued_interest = new_borrowed - borrowed
            if accrued_interest > 0:
                supplied += accrued_interest * (1 - take_rate)
                b_rate = supplied / b_supply
            borrowed = new_borrowed

        return cls(
            d_rate=d_rate,
            b_rate=b_rate,
            supplied=supplied,
            borrowed=borrowed,
            available=to_float(pool_balance, config.decimals),
            apy=cur_apy,
            supply_apy=cur_supply_apy,
            util=cur_util,
            timestamp=timestamp,
        )


@dataclasses.dataclass(slots=True, frozen=True)
class Reserve:
    asset_id: AssetId
    config: ReserveConfig
    data: ReserveData
    estimate: ReserveEstimate
    supply_emissions: Emissions | None = None
    borrow_emissions: Emissions | None = None

    @classmethod
    def build(
        cls,
        asset_id: AssetId,
        config: ReserveConfig,
        data: ReserveData,
        pool_balance: int,
        backstop_take_rate: int,
        timestamp: Timestamp,
        supply_emissions: Emissions | None = None,
        borrow_emissions: Emissions | None = None,
    ) -> Self:
        return cls(
            asset_id=asset_id,
            config=config,
            data=data,
            estimate=ReserveEstimate.build(
                config, data, pool_balance, backstop_take_rate, timestamp
            ),
            supply_emissions=supply_emissions,
            borrow_emissions=borrow_emissions,
        )

    @property
    def decimals(self) -> int:
        return self.config.decimals

    @property
    def total_supply(self) -> int:
        return self.to_asset_from_b_token(self.data.b_supply)

    @property
    def total_liabilities(self) -> int:
        return self.to_asset_from_d_token(self.data.d_supply)

    @property
    def est_borrow_apy(self) -> float:
        return self.estimate.apy

    @property
    def est_supply_apy(self) -> float:
        return self.estimate.supply_apy

    def to_asset_from_b_token(self, b_tokens: int) -> int:
        """
        Convert b tokens to the underlying asset, rounding down.
        """

        return mul_floor(b_tokens, self.data.b_rate, SCALAR_12)

    def to_asset_from_d_token(self, d_tokens: int) -> int:
        """
        Convert d tokens to the underlying asset, rounding up.
        """

        return mul_ceil(d_tokens, self.data.d_rate, SCALAR_12)

    def to_effective_asset_from_b_token(self, b_tokens: int) -> int:
        return mul_floor(self.to_asset_from_b_token(b_tokens), self.config.c_factor, SCALAR_7)

    def to_effective_asset_from_d_token(self, d_tokens: int) -> int:
        return div_ceil(self.to_asset_from_d_token(d_tokens), self.config.l_factor, SCALAR_7)

    def to_asset_from_b_token_float(self, b_tokens: int) -> float:
        return to_float(self.to_asset_from_b_token(b_tokens), self.decimals)

    def to_asset_from_d_token_float(self, d_tokens: int) -> float:
        return to_float(self.to_asset_from_d_token(d_tokens), self.decimals)

    def to_effective_asset_from_b_token_float(self, b_tokens: int) -> float:
        return to_float(self.to_effective_asset_from_b_token(b_tokens), self.decimals)

    def to_effective_asset_from_d_token_float(self, d_tokens: int) -> float:
        return to_float(self.to_effective_asset_from_d_token(d_tokens), self.decimals)
