"""
models/property.py
------------------
Domain model for rental property listings.
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from utils.money import to_minor_units


@dataclass
class Property:
    """
    Represents a property listing as stored in the ``properties`` table.

    Attributes:
        owner_id: ID of the user who lists the property.
        title: Listing headline.
        cost_per_night: Nightly cost in minor units (cents).
        average_rating: Mean review rating; only set by listing queries.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    description: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    average_rating: Optional[Decimal] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Property":
        """Convert a database row mapping to a Property, ignoring unknown columns."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in row.items() if k in names})

    @classmethod
    def from_listing(cls, listing: Mapping[str, Any]) -> "Property":
        """
        Build a new property from a listing form.

        ``cost_per_night`` is given in major units and stored in cents.

        Raises:
            ValueError: If the cost is not numeric or has fractions of a cent.
            KeyError: If a required field is missing.
        """
        raw_cost = listing["cost_per_night"]
        try:
            cents = to_minor_units(raw_cost)
        except InvalidOperation as e:
            raise ValueError(f"cost_per_night must be numeric, got {raw_cost!r}") from e
        if not cents.is_finite() or cents != cents.to_integral_value():
            raise ValueError(f"cost_per_night must be a whole number of cents, got {raw_cost!r}")

        return cls(
            owner_id=int(listing["owner_id"]),
            title=listing["title"],
            description=listing.get("description"),
            thumbnail_photo_url=listing["thumbnail_photo_url"],
            cover_photo_url=listing["cover_photo_url"],
            cost_per_night=int(cents),
            street=listing["street"],
            city=listing["city"],
            province=listing["province"],
            post_code=listing["post_code"],
            country=listing["country"],
            parking_spaces=int(listing.get("parking_spaces") or 0),
            number_of_bathrooms=int(listing.get("number_of_bathrooms") or 0),
            number_of_bedrooms=int(listing.get("number_of_bedrooms") or 0),
        )

    def cost_in_major_units(self) -> Decimal:
        """Nightly cost converted back to dollars."""
        return Decimal(self.cost_per_night) / 100

    def __str__(self) -> str:
        rating = f" | ★ {self.average_rating:.2f}" if self.average_rating is not None else ""
        return f"{self.title} ({self.city}) | {self.cost_in_major_units():.2f}/night{rating}"
