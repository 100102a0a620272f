"""
models/property.py
------------------
Domain model for rental properties, plus the validation applied
to new property records before they are inserted.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Optional, Union


class PropertyValidationError(ValueError):
    """Raised when a new property record is incomplete or malformed."""


# Insert order for the properties table. Only these columns may be written.
PROPERTY_COLUMNS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province_code",
    "postal_code",
    "active",
)

REQUIRED_PROPERTY_COLUMNS: frozenset[str] = frozenset({
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province_code",
    "postal_code",
})


@dataclass
class Property:
    """
    A property listed for rent.

    Attributes:
        owner_id: The User that owns the listing.
        cost_per_night: Nightly price in cents.
        active: Whether the listing is visible.
        average_rating: Mean review rating; only set on search results.
    """
    owner_id: int
    title: str
    cost_per_night: int
    city: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: Optional[str] = None
    street: Optional[str] = None
    province_code: Optional[str] = None
    postal_code: Optional[str] = None
    active: bool = False
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> float:
        """Nightly price in major currency units."""
        return self.cost_per_night / 100

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Property":
        """Build a Property from a RealDictCursor row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in row.items() if k in known}
        rating: Union[Decimal, float, None] = data.get("average_rating")
        if rating is not None:
            data["average_rating"] = float(rating)
        return cls(**data)

    def __str__(self) -> str:
        rating = f"{self.average_rating:.2f}" if self.average_rating is not None else "-"
        return f"#{self.id} {self.title} | {self.city} | {self.price_per_night:.2f}/night | rating {rating}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_new_property(data: Mapping[str, Any]) -> dict:
    """
    Check a new property record and return it in insert column order.

    Args:
        data: Column name to value mapping, e.g. a submitted form.

    Returns:
        A dict with the same values, keyed in PROPERTY_COLUMNS order.

    Raises:
        PropertyValidationError: On unknown columns, missing required
            columns, or empty values.
    """
    unknown = sorted(set(data) - set(PROPERTY_COLUMNS))
    if unknown:
        raise PropertyValidationError(f"Unknown property fields: {', '.join(unknown)}")

    missing = sorted(REQUIRED_PROPERTY_COLUMNS - set(data))
    if missing:
        raise PropertyValidationError(f"Missing property fields: {', '.join(missing)}")

    empty = [column for column in PROPERTY_COLUMNS if column in data and _is_blank(data[column])]
    if empty:
        raise PropertyValidationError(f"Property fields must not be empty: {', '.join(empty)}")

    return {column: data[column] for column in PROPERTY_COLUMNS if column in data}
