from typing import Any

from blend_estimates.exceptions.base import BlendError


class LedgerEntryError(BlendError):
    """
    Exception raised while reading already-decoded ledger entry values.
    """


class MalformedEntry(LedgerEntryError):
    """
    Raised when a native ledger map contains an unexpected key, or is missing a required one.
    """

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(message=f"Malformed {entry} entry: {reason}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.entry, self.reason)
