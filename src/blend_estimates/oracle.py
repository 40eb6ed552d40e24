import dataclasses
from collections.abc import Mapping

from blend_estimates.libraries.fixed_math import to_float
from blend_estimates.types.aliases import AssetId, ContractId, LedgerSequence, Timestamp


@dataclasses.dataclass(slots=True, frozen=True)
class PriceData:
    price: int  # fixed point, at the oracle's decimals
    timestamp: Timestamp


@dataclasses.dataclass(slots=True, frozen=True)
class PoolOracle:
    """
    A snapshot of the prices a pool's oracle reports, valid as of `latest_ledger`.

    All prices share the same decimal width.
    """

    oracle_id: ContractId
    prices: Mapping[AssetId, PriceData]
    decimals: int
    latest_ledger: LedgerSequence

    def get_price(self, asset_id: AssetId) -> int | None:
        """
        Get the price of an asset as a fixed point number with the oracle's decimals, or None if
        the oracle has no price for the asset.
        """

        price_data = self.prices.get(asset_id)
        return None if price_data is None else price_data.price

    def get_price_float(self, asset_id: AssetId) -> float | None:
        price = self.get_price(asset_id)
        if price is None:
            return None
        return to_float(price, self.decimals)

    def stale_assets(self, timestamp: Timestamp, max_age: int) -> list[AssetId]:
        """
        List the assets whose last price is more than `max_age` seconds older than `timestamp`.
        """

        return [
            asset_id
            for asset_id, price_data in self.prices.items()
            if timestamp - price_data.timestamp > max_age
        ]
