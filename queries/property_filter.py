"""
queries/property_filter.py
--------------------------
Builds the property listing query from a FilterOptions record.

Predicates are first collected as ``(clause, values)`` pairs and then
rendered in one pass: the first predicate opens the ``WHERE``, the rest are
joined with ``AND``, and each value is appended to the parameter list right
before its ``$n`` placeholder is emitted. Because the store binds by
position, the parameter list is never reordered after that.
"""

from dataclasses import dataclass
from typing import Any, Optional

from models.filters import FilterOptions
from utils.money import to_minor_units

DEFAULT_LIMIT = 10

_BASE_SELECT = (
    "SELECT properties.*, AVG(property_reviews.rating) AS average_rating",
    "FROM properties",
    "JOIN property_reviews ON properties.id = property_reviews.property_id",
)


@dataclass(frozen=True)
class Predicate:
    """A WHERE fragment with one ``{}`` slot per bound value."""
    clause: str
    values: tuple


def collect_predicates(options: FilterOptions) -> list[Predicate]:
    """
    List the WHERE predicates for ``options`` in rendering order:
    owner, city, then the price range.
    """
    predicates = []

    if options.owner_id is not None:
        predicates.append(Predicate("properties.owner_id = {}", (options.owner_id,)))
    if options.city and options.city.strip():
        predicates.append(Predicate("properties.city LIKE {}", (f"%{options.city}%",)))

    low, high = options.min_price, options.max_price
    if low is not None and high is not None:
        predicates.append(Predicate(
            "properties.cost_per_night BETWEEN {} AND {}",
            (to_minor_units(low), to_minor_units(high)),
        ))
    elif low is not None:
        predicates.append(Predicate("properties.cost_per_night >= {}", (to_minor_units(low),)))
    elif high is not None:
        predicates.append(Predicate("properties.cost_per_night <= {}", (to_minor_units(high),)))

    return predicates


def build_property_query(
    options: FilterOptions, limit: Optional[int] = DEFAULT_LIMIT
) -> tuple[str, list[Any]]:
    """
    Build the filtered, rated and paginated property listing statement.

    Args:
        options: Optional owner, city, price and rating filters.
        limit: Maximum number of rows to return; None means the default of 10.

    Returns:
        ``(sql, params)`` where ``$k`` in ``sql`` binds ``params[k-1]``.
        ``limit`` is always the last parameter.
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    params: list[Any] = []

    def bind(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    lines = list(_BASE_SELECT)

    for position, predicate in enumerate(collect_predicates(options)):
        connective = "WHERE" if position == 0 else "AND"
        placeholders = [bind(value) for value in predicate.values]
        lines.append(f"{connective} {predicate.clause.format(*placeholders)}")

    lines.append("GROUP BY properties.id")

    if options.min_rating is not None:
        lines.append(f"HAVING AVG(property_reviews.rating) >= {bind(options.min_rating)}")

    lines.append("ORDER BY properties.cost_per_night")
    lines.append(f"LIMIT {bind(limit)};")

    return "\n".join(lines), params
