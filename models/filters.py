"""
models/filters.py
-----------------
Optional predicates a caller may apply to a property listing query.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class FilterOptions:
    """
    Filters for the property listing.

    Every field is independently optional; ``None`` means "no constraint".
    A zero price or rating is a real bound.

    Attributes:
        owner_id: Only properties owned by this user.
        city: Case-sensitive substring of the property's city.
        min_price: Lowest nightly cost, in major currency units.
        max_price: Highest nightly cost, in major currency units.
        min_rating: Lowest acceptable average review rating.
    """
    owner_id: Optional[int] = None
    city: Optional[str] = None
    min_price: Optional[Number] = None
    max_price: Optional[Number] = None
    min_rating: Optional[Number] = None

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "FilterOptions":
        """
        Build options from search-form style keys.

        Recognised keys are ``owner_id``, ``city``,
        ``minimum_price_per_night``, ``maximum_price_per_night`` and
        ``minimum_rating``. Missing keys and empty strings are absent.

        Raises:
            ValueError: If a numeric field holds a non-numeric value.
        """
        owner_id = _blank_to_none(query.get("owner_id"))
        if owner_id is not None:
            try:
                owner_id = int(owner_id)
            except (TypeError, ValueError) as e:
                raise ValueError(f"owner_id must be an integer, got {owner_id!r}") from e

        return cls(
            owner_id=owner_id,
            city=_blank_to_none(query.get("city")),
            min_price=_decimal_or_none(query, "minimum_price_per_night"),
            max_price=_decimal_or_none(query, "maximum_price_per_night"),
            min_rating=_decimal_or_none(query, "minimum_rating"),
        )


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _decimal_or_none(query: Mapping[str, Any], key: str) -> Optional[Decimal]:
    raw = _blank_to_none(query.get(key))
    if raw is None:
        return None
    try:
        return Decimal(str(raw))
    except InvalidOperation as e:
        raise ValueError(f"{key} must be numeric, got {raw!r}") from e
