"""
models/property_filter.py
-------------------------
Search criteria for property listings.
Parses a caller's option bag (e.g. query-string values) into typed,
optional filter fields.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]

# camelCase spellings some callers send, mapped to the canonical field names.
_ALIASES = {
    "ownerId": "owner_id",
    "minimumPricePerNight": "minimum_price_per_night",
    "maximumPricePerNight": "maximum_price_per_night",
    "minimumRating": "minimum_rating",
}


@dataclass(frozen=True)
class PropertyFilter:
    """
    Optional property search criteria. Unset (falsy) fields are ignored.

    Attributes:
        city: Substring to match against the city column, sigil already removed.
        owner_id: Exact owner match.
        minimum_price_per_night: Lower price bound, major currency units.
        maximum_price_per_night: Upper price bound, major currency units.
        minimum_rating: Lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> "PropertyFilter":
        """
        Build a filter from an option bag.

        Unrecognized keys are ignored. Numeric fields accept numbers or
        numeric strings; empty strings count as unset.

        Raises:
            ValueError: If a numeric field holds a non-numeric string or a
                non-finite number, or owner_id is not a whole number.
        """
        values: dict = {}
        for key, value in (options or {}).items():
            values[_ALIASES.get(key, key)] = value

        return cls(
            city=parse_city_filter(values.get("city")),
            owner_id=_to_id(values.get("owner_id")),
            minimum_price_per_night=_to_number(values.get("minimum_price_per_night")),
            maximum_price_per_night=_to_number(values.get("maximum_price_per_night")),
            minimum_rating=_to_number(values.get("minimum_rating")),
        )


def parse_city_filter(raw: Optional[str]) -> Optional[str]:
    """
    Strip the leading filter-type sigil the search form prepends to the city.

    The value is trimmed and its first character dropped unconditionally,
    so "#Vancouver" becomes "Vancouver". Returns None when nothing is left.
    """
    if not raw:
        return None
    city = raw.strip()[1:]
    return city or None


def _to_number(value: Any) -> Optional[Number]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            number = float(text)
    # float() accepts "inf" and "nan"; neither converts to cents
    if not math.isfinite(number):
        raise ValueError(f"Filter value must be a finite number: {value!r}")
    return number


def _to_id(value: Any) -> Optional[int]:
    number = _to_number(value)
    if number is None:
        return None
    if number != int(number):
        raise ValueError(f"owner_id must be a whole number: {value!r}")
    return int(number)
