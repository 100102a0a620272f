"""
repositories/property_query.py
------------------------------
Builds the filtered, paginated property search statement.

The output is a (sql, params) pair for `cursor.execute`. Every value is
bound through a positional `%s` placeholder, and the n-th placeholder in
the text binds to the n-th element of the params list.
"""

from typing import Any, Mapping, Union

from config import DEFAULT_RESULT_LIMIT
from models.property_filter import PropertyFilter

PROPERTY_SEARCH_SQL = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON properties.id = property_reviews.property_id
"""

SearchOptions = Union[PropertyFilter, Mapping[str, Any], None]


def to_cents(amount: Union[int, float]) -> int:
    """Convert a major-unit price to the cents stored in cost_per_night."""
    return round(amount * 100)


def build_property_search(
    options: SearchOptions = None,
    limit: int = DEFAULT_RESULT_LIMIT,
    base_query: str = PROPERTY_SEARCH_SQL,
) -> tuple[str, list]:
    """
    Translate optional search criteria into one parameterized SELECT.

    Predicates are ANDed together in a fixed order: city, owner, minimum
    price, maximum price. Results are grouped per property, optionally
    filtered on average rating, cheapest first.

    Args:
        options: A PropertyFilter, or an option bag parsed with
            PropertyFilter.from_dict. Falsy fields add no predicate.
        limit: Maximum number of rows to return.
        base_query: SELECT ... FROM ... JOIN template to extend.

    Returns:
        Tuple of (sql, params).
    """
    criteria = options if isinstance(options, PropertyFilter) else PropertyFilter.from_dict(options)

    params: list = []
    predicates: list[str] = []

    if criteria.city:
        params.append(f"%{criteria.city}%")
        predicates.append("properties.city LIKE %s")

    if criteria.owner_id:
        params.append(criteria.owner_id)
        predicates.append("properties.owner_id = %s")

    if criteria.minimum_price_per_night:
        params.append(to_cents(criteria.minimum_price_per_night))
        predicates.append("properties.cost_per_night >= %s")

    if criteria.maximum_price_per_night:
        params.append(to_cents(criteria.maximum_price_per_night))
        predicates.append("properties.cost_per_night <= %s")

    lines = [base_query.strip()]
    for index, predicate in enumerate(predicates):
        keyword = "WHERE" if index == 0 else "AND"
        lines.append(f"{keyword} {predicate}")

    lines.append("GROUP BY properties.id")

    if criteria.minimum_rating:
        params.append(criteria.minimum_rating)
        lines.append("HAVING avg(property_reviews.rating) >= %s")

    params.append(limit)
    lines.append("ORDER BY properties.cost_per_night ASC")
    lines.append("LIMIT %s;")

    return "\n".join(lines), params
