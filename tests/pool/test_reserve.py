import dataclasses
from collections.abc import Callable

import pytest

from blend_estimates.exceptions import MalformedEntry
from blend_estimates.libraries.constants import SECONDS_PER_YEAR
from blend_estimates.pool.reserve import Reserve, ReserveConfig, ReserveData

MakeReserve = Callable[..., Reserve]

ASSET = "CAQCFVLOBK5GIULPNZRGATJJMIZL5BSP7X5YJVMGCPTUEPFM4AVSRCJU"


def test_token_conversions(make_reserve: MakeReserve) -> None:
    reserve = make_reserve(
        ASSET,
        0,
        b_supply=1000_0000000,
        d_supply=250_0000000,
        b_rate=1_100_000_000_000,
        d_rate=1_000_000_000_001,
    )

    assert reserve.to_asset_from_b_token(100_0000000) == 110_0000000
    # liabilities round up
    assert reserve.to_asset_from_d_token(50_0000000) == 500000001
    assert reserve.to_effective_asset_from_b_token(100_0000000) == 99_0000000
    assert reserve.to_effective_asset_from_d_token(50_0000000) == 625000002

    assert reserve.to_asset_from_b_token_float(100_0000000) == 110.0
    assert reserve.to_asset_from_d_token_float(50_0000000) == 50.0000001
    assert reserve.to_effective_asset_from_b_token_float(100_0000000) == 99.0
    assert reserve.to_effective_asset_from_d_token_float(50_0000000) == 62.5000002

    assert reserve.decimals == 7
    assert reserve.total_supply == 1100_0000000
    assert reserve.total_liabilities == 250_0000001


def test_estimate_below_target_utilization(make_reserve: MakeReserve, timestamp: int) -> None:
    reserve = make_reserve(ASSET, 0, b_supply=1000_0000000, d_supply=250_0000000)
    estimate = reserve.estimate
    assert estimate.util == 0.25
    assert estimate.apy == pytest.approx(0.035)
    assert estimate.supply_apy == pytest.approx(0.035 * 0.9 * 0.25)
    assert estimate.supplied == 1000.0
    assert estimate.borrowed == 250.0
    assert estimate.available == 750.0
    assert estimate.d_rate == 1.0
    assert estimate.b_rate == 1.0
    assert estimate.timestamp == timestamp

    assert reserve.est_borrow_apy == estimate.apy
    assert reserve.est_supply_apy == estimate.supply_apy


def test_estimate_above_target_utilization(make_reserve: MakeReserve) -> None:
    estimate = make_reserve(ASSET, 0, b_supply=1000_0000000, d_supply=750_0000000).estimate
    assert estimate.util == 0.75
    assert estimate.apy == pytest.approx(0.25 / 0.45 * 0.5 + 0.05 + 0.01)


def test_estimate_above_max_rate_utilization(make_reserve: MakeReserve) -> None:
    estimate = make_reserve(ASSET, 0, b_supply=1000_0000000, d_supply=980_0000000).estimate
    assert estimate.util == pytest.approx(0.98)
    assert estimate.apy == pytest.approx(0.03 / 0.05 * 1.5 + 0.56)


def test_estimate_without_borrows(make_reserve: MakeReserve) -> None:
    estimate = make_reserve(ASSET, 0, b_supply=1000_0000000, d_supply=0).estimate
    assert estimate.util == 0.0
    assert estimate.apy == 0.01
    assert estimate.supply_apy == 0.0
    assert estimate.borrowed == 0.0
    assert estimate.available == 1000.0


def test_estimate_accrues_interest(make_reserve: MakeReserve, timestamp: int) -> None:
    estimate = make_reserve(
        ASSET,
        0,
        b_supply=1000_0000000,
        d_supply=250_0000000,
        timestamp=timestamp + SECONDS_PER_YEAR,
    ).estimate
    assert estimate.d_rate == pytest.approx(1.035)
    assert estimate.borrowed == pytest.approx(258.75)
    # the backstop takes 10% of the interest
    assert estimate.supplied == pytest.approx(1000 + 8.75 * 0.9)
    assert estimate.b_rate == pytest.approx(1.007875)


def test_estimate_ignores_earlier_timestamp(make_reserve: MakeReserve, timestamp: int) -> None:
    estimate = make_reserve(
        ASSET,
        0,
        b_supply=1000_0000000,
        d_supply=250_0000000,
        timestamp=timestamp - 100,
    ).estimate
    assert estimate.d_rate == 1.0
    assert estimate.borrowed == 250.0


def test_reserve_from_mappings(make_reserve: MakeReserve) -> None:
    reserve = make_reserve(ASSET, 3, b_supply=1, d_supply=2)

    assert ReserveConfig.from_mapping(dataclasses.asdict(reserve.config)) == reserve.config
    assert (
        ReserveData.from_mapping(
            {key: str(value) for key, value in dataclasses.asdict(reserve.data).items()}
        )
        == reserve.data
    )

    with pytest.raises(MalformedEntry):
        ReserveData.from_mapping({"d_rate": 1})
