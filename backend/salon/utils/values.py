"""Lenient readers for stored values.

Records are persisted exactly as given, so numbers and id lists read back
from the store may hold anything. Reducers read them through these helpers.
"""

from collections.abc import Hashable
from numbers import Real
from typing import Any, List


def as_amount(value: Any) -> float:
    """The value when it is a real number, otherwise 0 (booleans included)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0
    return value


def as_id_list(value: Any) -> List[Any]:
    """Hashable entries of a stored id list; anything but a list or tuple is empty."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Hashable)]
