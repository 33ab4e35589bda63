"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

from db.executor import StatementExecutor

DEFAULT_LIMIT = 10


class ReservationRepository:
    """Repository for reading a guest's reservations."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def get_all(self, guest_id: int, limit: int = DEFAULT_LIMIT) -> list[dict]:
        """
        Fetch a guest's reservations with their property and its rating.

        Reservations starting today are left out.

        Args:
            guest_id: ID of the guest user.
            limit: Maximum number of reservations.

        Returns:
            Rows ordered by start date. Property columns that share a name
            with a reservation column (``id``) hold the property's value.
        """
        sql = """
            SELECT reservations.*, properties.*, AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = $1 AND reservations.start_date != now()::date
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT $2;
        """
        return self.executor.execute(sql, [guest_id, limit])
