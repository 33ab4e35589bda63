"""
db/executor.py
--------------
Submits parameterized statements to PostgreSQL.

Statements are written with positional ``$1, $2, ...`` placeholders, where
``$k`` binds ``params[k-1]``. psycopg2 only understands ``%s`` /
``%(name)s`` markers, so each ``$k`` is rewritten to ``%(pk)s`` and the
parameter list becomes a ``{"pk": value}`` mapping. Literal ``%`` in the
statement text is doubled so the driver leaves it alone.
"""

import re
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import extras

from db.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def to_pyformat(sql: str, params: Sequence[Any]) -> tuple[str, Optional[dict]]:
    """
    Rewrite a ``$n``-style statement into psycopg2's named pyformat.

    Args:
        sql: Statement text with ``$1..$n`` placeholders.
        params: Values in placeholder order.

    Returns:
        ``(sql, bound)`` ready for ``cursor.execute``. ``bound`` is None when
        there are no parameters, in which case the text is left untouched.

    Raises:
        StorageError: If a placeholder refers to a parameter that was not given.
    """
    if not params:
        if _PLACEHOLDER_RE.search(sql):
            raise StorageError("Statement has placeholders but no parameters were bound.")
        return sql, None

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise StorageError(
                f"Placeholder ${index} has no bound parameter ({len(params)} given)."
            )
        return f"%(p{index})s"

    converted = _PLACEHOLDER_RE.sub(_replace, sql.replace("%", "%%"))
    bound = {f"p{i}": value for i, value in enumerate(params, start=1)}
    return converted, bound


class StatementExecutor:
    """Runs statements on connections borrowed from an injected pool."""

    def __init__(self, conn_pool):
        self.pool = conn_pool

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Execute one statement and return its rows.

        Args:
            sql: Statement text with ``$n`` placeholders.
            params: Values bound positionally.

        Returns:
            Rows as dicts keyed by column name, in column order. Statements
            that produce no result set return an empty list.

        Raises:
            StorageError: If the pool or the database rejects the statement.
        """
        query, bound = to_pyformat(sql, params)
        try:
            conn = self.pool.getconn()
        except psycopg2.Error as e:
            logger.error(f"Could not acquire a connection: {e}")
            raise StorageError(_describe(e)) from e

        broken = False
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(query, bound)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            conn.commit()
            return rows
        except psycopg2.Error as e:
            logger.error(f"Statement failed: {e}")
            broken = not _rollback(conn)
            raise StorageError(_describe(e)) from e
        finally:
            # a connection that could not be rolled back is discarded
            self.pool.putconn(conn, close=broken)

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Execute a statement and return its first row, or None."""
        rows = self.execute(sql, params)
        return rows[0] if rows else None

    def execute_script(self, sql: str) -> None:
        """Run a parameterless script such as schema DDL."""
        self.execute(sql)


def _describe(error: psycopg2.Error) -> str:
    message = str(error).strip()
    return message or error.__class__.__name__


def _rollback(conn) -> bool:
    """Roll back ``conn``; False when the connection is closed or unusable."""
    if conn.closed:
        return False
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed, discarding connection: {e}")
        return False
    return True
