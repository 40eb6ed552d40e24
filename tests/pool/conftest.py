import dataclasses
from collections.abc import Callable

import pytest

from blend_estimates.emissions import EmissionConfig, EmissionData, Emissions
from blend_estimates.oracle import PoolOracle, PriceData
from blend_estimates.pool.reserve import Reserve, ReserveConfig, ReserveData

USDC = "CAQCFVLOBK5GIULPNZRGATJJMIZL5BSP7X5YJVMGCPTUEPFM4AVSRCJU"
XLM = "CAS3J7GYLGXMF6TDJBBYYSE3HQ6BBSMLNUQ34T6TZMYMW2EVH34XOWMA"
TIMESTAMP = 1699888478
BACKSTOP_TAKE_RATE = 1_000_000  # 10%


@pytest.fixture
def timestamp() -> int:
    return TIMESTAMP


@pytest.fixture
def make_reserve() -> Callable[..., Reserve]:
    """
    Build a reserve with 7 decimals, b and d rates of 1.0 and a 50% target utilization, last
    updated at `TIMESTAMP`. Keyword arguments replace the matching ledger data fields.
    """

    def _make_reserve(
        asset_id: str,
        index: int,
        b_supply: int,
        d_supply: int,
        timestamp: int = TIMESTAMP,
        supply_emissions: Emissions | None = None,
        borrow_emissions: Emissions | None = None,
        **data_overrides: int,
    ) -> Reserve:
        config = ReserveConfig(
            index=index,
            decimals=7,
            c_factor=9_000_000,
            l_factor=8_000_000,
            util=5_000_000,
            max_util=9_500_000,
            r_base=100_000,
            r_one=500_000,
            r_two=5_000_000,
            r_three=15_000_000,
            reactivity=200,
        )
        data = ReserveData(
            d_rate=1_000_000_000_000,
            b_rate=1_000_000_000_000,
            ir_mod=10_000_000,
            d_supply=d_supply,
            b_supply=b_supply,
            backstop_credit=0,
            last_time=TIMESTAMP,
        )
        return Reserve.build(
            asset_id=asset_id,
            config=config,
            data=dataclasses.replace(data, **data_overrides),
            pool_balance=b_supply - d_supply,
            backstop_take_rate=BACKSTOP_TAKE_RATE,
            timestamp=timestamp,
            supply_emissions=supply_emissions,
            borrow_emissions=borrow_emissions,
        )

    return _make_reserve


@pytest.fixture
def usdc_reserve(make_reserve: Callable[..., Reserve]) -> Reserve:
    # 25% utilization
    return make_reserve(USDC, 0, b_supply=1000_0000000, d_supply=250_0000000)


@pytest.fixture
def xlm_reserve(make_reserve: Callable[..., Reserve]) -> Reserve:
    # 75% utilization
    return make_reserve(XLM, 1, b_supply=1000_0000000, d_supply=750_0000000)


@pytest.fixture
def oracle() -> PoolOracle:
    return PoolOracle(
        oracle_id="CATKK5ZNJCKQQWTUWIUFZMY6V6MOQUGSTFSXMNQZHVJHYF7GVV36FB3Y",
        prices={
            USDC: PriceData(price=1_0000000, timestamp=TIMESTAMP),
            XLM: PriceData(price=1000000, timestamp=TIMESTAMP),
        },
        decimals=7,
        latest_ledger=49_000_000,
    )


@pytest.fixture
def emissions() -> Emissions:
    return Emissions(
        config=EmissionConfig(eps=900000, expiration=1700159660),
        data=EmissionData(index=38968575, last_time=1699885727),
    )
