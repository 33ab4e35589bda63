"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.executor import StatementExecutor
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def get_by_email(self, email: str) -> Optional[dict]:
        """
        Fetch a user by email, ignoring case.

        Returns:
            User dict or None.
        """
        sql = """
            SELECT *
            FROM users
            WHERE LOWER(users.email) = LOWER($1);
        """
        return self.executor.fetch_one(sql, [email])

    def get_by_id(self, user_id: int) -> Optional[dict]:
        """Fetch a user by primary key, or None."""
        sql = "SELECT * FROM users WHERE users.id = $1;"
        return self.executor.fetch_one(sql, [user_id])

    def add(self, name: str, email: str, password: str) -> dict:
        """
        Insert a new user.

        Args:
            name: Display name.
            email: Login email.
            password: Password hash; this layer stores it as given.

        Returns:
            The inserted row, including its generated ``id``.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES ($1, $2, $3)
            RETURNING *;
        """
        user = self.executor.fetch_one(sql, [name, email, password])
        logger.info(f"Added user #{user['id']}")
        return user
