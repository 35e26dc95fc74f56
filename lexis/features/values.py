"""Feature values and input shape normalization.

A feature's data can be given in three shapes:

    "value"                                  single value, sort order 1
    ["value1", "value2", ...]                sort order = position, from 1
    [("value1", 2), ("value2", 1), ...]      explicit sort orders

from_single/from_list/from_pairs build each shape explicitly. from_input
accepts any of them and picks one by structure.
"""
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache

from lexis.core.errors import empty_value, raise_error

DEFAULT_SORT_ORDER = 1
JOIN_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class FeatureValue:
    """A single feature value with its sort order."""
    value: str
    sort_order: int = DEFAULT_SORT_ORDER


def _is_sequence(data: object) -> bool:
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes))


def _parse_sort_order(raw: object) -> int:
    if isinstance(raw, bool):
        return DEFAULT_SORT_ORDER
    try:
        return int(raw)
    except (TypeError, ValueError):
        return DEFAULT_SORT_ORDER


def _require_value(value):
    """Raises EmptyValue for a missing or empty value."""
    if is_empty_input(value):
        raise_error(empty_value("value", "Feature values should not be empty.", origin="feature_value"))
    return value


def from_single(value: str, sort_order: int = DEFAULT_SORT_ORDER) -> list[FeatureValue]:
    return [FeatureValue(_require_value(value), _parse_sort_order(sort_order))]


def from_list(values: Iterable[str]) -> list[FeatureValue]:
    return [FeatureValue(_require_value(v), i) for i, v in enumerate(values, start=1)]


def from_pairs(pairs: Iterable[Sequence]) -> list[FeatureValue]:
    """Build values from (value, sort_order) pairs.

    A missing or non-integer sort order becomes the default sort order.
    """
    result = []
    for pair in pairs:
        if not _is_sequence(pair) or not pair:
            raise TypeError(f"Expected a (value, sort_order) pair, got {pair!r}")
        sort_order = pair[1] if len(pair) > 1 else None
        result.append(FeatureValue(_require_value(pair[0]), _parse_sort_order(sort_order)))
    return result


def from_input(data) -> list[FeatureValue]:
    """Normalize any accepted input shape to a list of FeatureValue."""
    if isinstance(data, FeatureValue):
        return [data]
    if not _is_sequence(data):
        return from_single(data)
    if data and isinstance(data[0], FeatureValue):
        return list(data)
    if data and _is_sequence(data[0]):
        return from_pairs(data)
    return from_list(data)


def is_empty_input(data) -> bool:
    """True for None, an empty string, and an empty sequence."""
    if data is None:
        return True
    if isinstance(data, str) or _is_sequence(data):
        return len(data) == 0
    return False


@lru_cache(maxsize=4096)
def collation_key(value: str) -> str:
    """Primary collation key: base letters, case-folded, marks removed."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def sort_key(fv: FeatureValue) -> tuple:
    """Sort by sort order, then alphabetically; raw value breaks remaining ties."""
    return fv.sort_order, collation_key(str(fv.value)), str(fv.value)
