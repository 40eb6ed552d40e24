import dataclasses
from typing import Self

from blend_estimates.exceptions.base import BlendValueError
from blend_estimates.types.aliases import ContractId

# The backstop token is an 80/20 weighted BLND/USDC LP; USDC holds this share of the pool value
USDC_WEIGHT = 0.2


@dataclasses.dataclass(slots=True, frozen=True)
class BackstopToken:
    """
    Ledger data for the BLND/USDC LP token deposited into the backstop.

    `blnd`, `usdc` and `shares` are the LP's token balances and total shares, all with 7 decimals.
    The per-token figures are floats derived from them, with `lp_token_price` in USDC.
    """

    id: ContractId
    blnd: int
    usdc: int
    shares: int
    blnd_per_lp_token: float
    usdc_per_lp_token: float
    lp_token_price: float

    @classmethod
    def build(cls, id: ContractId, blnd: int, usdc: int, shares: int) -> Self:  # noqa: A002
        if shares <= 0:
            raise BlendValueError(message=f"LP token {id} has no shares.")

        usdc_per_lp_token = usdc / shares
        return cls(
            id=id,
            blnd=blnd,
            usdc=usdc,
            shares=shares,
            blnd_per_lp_token=blnd / shares,
            usdc_per_lp_token=usdc_per_lp_token,
            lp_token_price=usdc_per_lp_token / USDC_WEIGHT,
        )
