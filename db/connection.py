"""
db/connection.py
----------------
Owns the single psycopg2 pool that every LightBnB query borrows from.
Rows are read as dicts (RealDictCursor) so repositories map columns by name.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool, extras
from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def _safe_dsn(dsn: str) -> str:
    """Hide the password in a postgresql:// URL before it reaches the log."""
    scheme, sep, rest = dsn.partition("://")
    if not sep or "@" not in rest:
        return dsn
    credentials, _, location = rest.rpartition("@")
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{location}"


def init_pool(
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
    dsn: str = DATABASE_URL,
) -> None:
    """
    Open the LightBnB pool. Calling it again while a pool is open does nothing.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
        logger.info(f"Opened pool ({min_conn}-{max_conn}) to {_safe_dsn(dsn)}")
    except psycopg2.OperationalError as e:
        logger.error(f"Cannot reach {_safe_dsn(dsn)}: {e}")
        raise


def get_connection():
    """
    Borrow a connection. Pair every call with release_connection().

    Raises:
        RuntimeError: If init_pool() has not been called.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    if _pool is not None:
        _pool.putconn(conn)


@contextmanager
def connection_scope() -> Iterator:
    """
    Borrow a connection for one unit of work.

    Commits when the block finishes, rolls back and re-raises when it fails,
    and always hands the connection back.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        release_connection(conn)


def dict_cursor(conn):
    """Open a cursor whose rows come back as dicts keyed by column name."""
    return conn.cursor(cursor_factory=extras.RealDictCursor)


def close_pool() -> None:
    """Close every pooled connection and forget the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Closed LightBnB connection pool.")
