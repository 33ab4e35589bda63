"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
"""

from typing import Optional

from db.executor import StatementExecutor
from models.filters import FilterOptions
from models.property import Property
from queries.property_filter import DEFAULT_LIMIT, build_property_query
from utils.logger import get_logger

logger = get_logger(__name__)

_INSERT_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class PropertyRepository:
    """Repository for listing and inserting properties."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    # ── READ ──────────────────────────────────────────────

    def get_all(
        self, options: Optional[FilterOptions] = None, limit: int = DEFAULT_LIMIT
    ) -> list[Property]:
        """
        List properties matching ``options``, cheapest first.

        Args:
            options: Owner, city, price and rating filters; None for no filter.
            limit: Maximum number of properties.

        Returns:
            Properties with ``average_rating`` populated.

        Raises:
            StorageError: If the query fails.
        """
        sql, params = build_property_query(options or FilterOptions(), limit)
        logger.debug(f"Listing properties with {len(params)} parameters")
        return [Property.from_row(r) for r in self.executor.execute(sql, params)]

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The listing to persist; ``cost_per_night`` already in cents.

        Returns:
            The stored Property, with its ``id`` populated.
        """
        placeholders = ", ".join(f"${i}" for i in range(1, len(_INSERT_COLUMNS) + 1))
        sql = (
            f"INSERT INTO properties ({', '.join(_INSERT_COLUMNS)}) "
            f"VALUES ({placeholders}) "
            "RETURNING *;"
        )
        row = self.executor.fetch_one(sql, [getattr(prop, c) for c in _INSERT_COLUMNS])
        stored = Property.from_row(row)
        logger.info(f"Added property #{stored.id} for owner {stored.owner_id}")
        return stored
