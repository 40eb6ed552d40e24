"""
Emission (reward) state and accrual estimates.

Emitted tokens are tracked with 7 decimals. The emission index is the cumulative number of emitted
token units per unit of stake, scaled by `SCALAR_9`. Stake balances and total supply share the
staked token's decimals, so the index does not depend on them.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Self

from blend_estimates.ledger import read_native_map
from blend_estimates.libraries.constants import SCALAR_9, SECONDS_PER_YEAR
from blend_estimates.libraries.fixed_math import div_floor, mul_floor, to_float
from blend_estimates.logging import logger
from blend_estimates.types.aliases import LedgerSequence, Timestamp

EMISSION_DECIMALS = 7


@dataclasses.dataclass(slots=True, frozen=True)
class EmissionConfig:
    eps: int  # emitted tokens per second, 7 decimals
    expiration: Timestamp

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map("EmissionConfig", mapping, ("eps", "expiration"))
        return cls(eps=int(values["eps"]), expiration=int(values["expiration"]))


@dataclasses.dataclass(slots=True, frozen=True)
class EmissionData:
    index: int  # 9 decimals
    last_time: Timestamp

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map("EmissionData", mapping, ("index", "last_time"))
        return cls(index=int(values["index"]), last_time=int(values["last_time"]))


def _index_delta(
    config: EmissionConfig,
    data: EmissionData,
    supply: int,
    timestamp: Timestamp,
) -> int:
    """
    The amount the emission index advances between the last update and `timestamp`, rounded down.
    """

    if timestamp <= data.last_time or supply == 0:
        return 0
    elapsed = max(min(timestamp, config.expiration) - data.last_time, 0)
    return div_floor(elapsed * config.eps, supply, SCALAR_9)


@dataclasses.dataclass(slots=True, frozen=True)
class Emissions:
    """
    Emission config and data for a single emission source, as read at `latest_ledger`.
    """

    config: EmissionConfig
    data: EmissionData
    latest_ledger: LedgerSequence = 0

    def accrue(self, supply: int, timestamp: Timestamp) -> "Emissions":
        """
        Return a copy with the emission index advanced to `timestamp`.

        The index is left as-is if the emissions have expired, the data is already current,
        nothing is being emitted, or there is no supply to emit to.
        """

        if (
            self.data.last_time >= self.config.expiration
            or self.data.last_time >= timestamp
            or self.config.eps == 0
            or supply == 0
        ):
            return self

        return dataclasses.replace(
            self,
            data=EmissionData(
                index=self.data.index + _index_delta(self.config, self.data, supply, timestamp),
                last_time=timestamp,
            ),
        )

    def emissions_per_year_per_token(self, supply: int, decimals: int = 7) -> float:
        """
        Calculate the tokens emitted per year for each whole token of supply.
        """

        supply_float = to_float(supply, decimals)
        if supply_float == 0:
            return 0.0
        total_emissions = to_float(self.config.eps, EMISSION_DECIMALS) * SECONDS_PER_YEAR
        return total_emissions / supply_float


@dataclasses.dataclass(slots=True, frozen=True)
class UserEmissions:
    """
    Emission data for a user.

    `index` is the last emission index the user accrued to, and `accrued` the unclaimed emissions
    with 7 decimals.
    """

    index: int
    accrued: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        values = read_native_map("UserEmissions", mapping, ("index", "accrued"))
        return cls(index=int(values["index"]), accrued=int(values["accrued"]))

    def estimate_accrual(
        self,
        emissions: Emissions,
        supply: int,
        balance: int,
        timestamp: Timestamp,
    ) -> float:
        """
        Estimate the user's total unclaimed emissions at `timestamp`, as a float for display.

        Nothing is advanced if no time has passed since the last update or the supply is empty;
        the stored accrued amount is returned.
        """

        if timestamp <= emissions.data.last_time or supply == 0:
            logger.debug(
                f"Emission index not advanced (last update {emissions.data.last_time}, "
                f"timestamp {timestamp}, supply {supply})"
            )
            return to_float(self.accrued, EMISSION_DECIMALS)

        new_index = emissions.data.index + _index_delta(
            emissions.config, emissions.data, supply, timestamp
        )

        # newly earned emissions are floored to the token scale, as the contract credits them
        accrued = self.accrued + mul_floor(balance, new_index - self.index, SCALAR_9)
        return to_float(accrued, EMISSION_DECIMALS)

    def accrue(
        self,
        emissions: Emissions,
        supply: int,
        balance: int,
        timestamp: Timestamp,
    ) -> "UserEmissions":
        """
        Return the user's emission data as the contract would store it after accruing to
        `timestamp`. Newly earned emissions are rounded down to 7 decimals.
        """

        new_index = emissions.accrue(supply, timestamp).data.index
        if new_index == self.index:
            return self
        return UserEmissions(
            index=new_index,
            accrued=self.accrued + mul_floor(balance, new_index - self.index, SCALAR_9),
        )
