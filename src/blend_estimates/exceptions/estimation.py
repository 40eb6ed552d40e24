from blend_estimates.exceptions.base import BlendError


class EstimationError(BlendError):
    """
    Exception raised while building an estimate from ledger values.
    """


class MissingReserve(EstimationError):
    """
    Raised when a user position references a reserve index that is not loaded for the pool.
    """

    def __init__(self, reserve_index: int) -> None:
        self.reserve_index = reserve_index
        super().__init__(message=f"Unable to find reserve for index {reserve_index}.")

    def __reduce__(self) -> tuple[object, ...]:
        return self.__class__, (self.reserve_index,)


class MissingPrice(EstimationError):
    """
    Raised when a user position is held in an asset the oracle has no price for.
    """

    def __init__(self, asset_id: str) -> None:
        self.asset_id = asset_id
        super().__init__(message=f"Unable to find price for asset {asset_id}.")

    def __reduce__(self) -> tuple[object, ...]:
        return self.__class__, (self.asset_id,)
