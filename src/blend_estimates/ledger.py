"""
Validation for ledger values that an external reader has already decoded into native maps.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from blend_estimates.exceptions.ledger import MalformedEntry


def read_native_map(
    entry: str,
    mapping: Mapping[str, Any],
    keys: Iterable[str],
) -> dict[str, Any]:
    """
    Check that `mapping` holds exactly the expected keys and return a copy.

    The contracts store these structs as maps keyed by field name, so an unknown key means the
    reader is pointed at the wrong entry rather than at a newer version of the struct.
    """

    expected = set(keys)
    for key in mapping:
        if key not in expected:
            raise MalformedEntry(entry, f"should not contain {key!r}")
    missing = expected.difference(mapping)
    if missing:
        raise MalformedEntry(entry, f"missing {', '.join(sorted(missing))}")
    return dict(mapping)
