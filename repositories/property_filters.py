"""
repositories/property_filters.py
--------------------------------
Builds the parameterized SQL for property search.

Each present search option contributes one predicate and one positional
parameter. Plain column predicates go into WHERE; the rating predicate is
an aggregate and goes into HAVING. LIMIT is always the last parameter.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from config import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from utils.money import dollars_to_cents

SEARCH_SELECT = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""


@dataclass
class PropertySearchOptions:
    """
    Optional filters for property search. Prices are in dollars.

    Attributes:
        city: Substring match on the city name.
        owner_id: Only properties owned by this user.
        minimum_price_per_night: Lowest nightly price, in dollars.
        maximum_price_per_night: Highest nightly price, in dollars.
        minimum_rating: Lowest acceptable average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "PropertySearchOptions":
        """Build options from a dict, ignoring keys that are not search filters."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in known})


SearchOptions = Union[PropertySearchOptions, Mapping[str, Any], None]


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def normalize_limit(limit: Union[int, str, None]) -> int:
    """Coerce to int, fall back to the default below 1 and cap at MAX_QUERY_LIMIT."""
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_QUERY_LIMIT
    if limit < 1:
        return DEFAULT_QUERY_LIMIT
    return min(limit, MAX_QUERY_LIMIT)


def build_filter_clauses(options: SearchOptions) -> tuple[list[str], list[str], list]:
    """
    Translate search options into WHERE predicates, HAVING predicates and params.

    Args:
        options: PropertySearchOptions, a plain mapping, or None.

    Returns:
        (where_predicates, having_predicates, params) with params ordered
        WHERE first, then HAVING, matching placeholder order in the SQL.
    """
    if options is None:
        options = PropertySearchOptions()
    elif not isinstance(options, PropertySearchOptions):
        options = PropertySearchOptions.from_mapping(options)

    where: list[str] = []
    having: list[str] = []
    params: list = []

    if _is_present(options.city):
        where.append("properties.city LIKE %s")
        params.append(f"%{str(options.city).strip()}%")

    if _is_present(options.owner_id):
        where.append("properties.owner_id = %s")
        params.append(int(options.owner_id))

    if _is_present(options.minimum_price_per_night):
        where.append("properties.cost_per_night >= %s")
        params.append(dollars_to_cents(options.minimum_price_per_night))

    if _is_present(options.maximum_price_per_night):
        where.append("properties.cost_per_night <= %s")
        params.append(dollars_to_cents(options.maximum_price_per_night))

    if _is_present(options.minimum_rating):
        having.append("AVG(property_reviews.rating) >= %s")
        params.append(float(options.minimum_rating))

    return where, having, params


def build_property_search(
    options: SearchOptions = None, limit: Optional[int] = None
) -> tuple[str, list]:
    """
    Assemble the full property search statement.

    Returns:
        (sql, params) ready for ``cursor.execute``.
    """
    where, having, params = build_filter_clauses(options)

    sql = SEARCH_SELECT
    if where:
        sql += f"    WHERE {' AND '.join(where)}\n"
    sql += "    GROUP BY properties.id\n"
    if having:
        sql += f"    HAVING {' AND '.join(having)}\n"
    sql += "    ORDER BY properties.cost_per_night\n    LIMIT %s;"

    params.append(normalize_limit(limit))
    return sql, params
