"""
db/connection.py
----------------
Builds and tears down PostgreSQL connection pools.
Uses psycopg2's ThreadedConnectionPool so independent statements can be
submitted from several threads. The pool is returned to the caller and
passed explicitly to a StatementExecutor; nothing is kept at module level.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


def create_pool(
    dsn: str = DATABASE_URL,
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
) -> pool.ThreadedConnectionPool:
    """
    Open a new connection pool.

    Args:
        dsn: libpq connection string.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        A ready ThreadedConnectionPool.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn_pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")
    return conn_pool


def close_pool(conn_pool: pool.AbstractConnectionPool) -> None:
    """Close all connections in the pool."""
    if conn_pool.closed:
        return
    conn_pool.closeall()
    logger.info("Database connection pool closed.")
