"""
In‑memory SQLite store and simple migration system.

The catalog lives in a single SQLite ``:memory:`` database that exists
for the lifetime of the process.  Because every new connection to
``:memory:`` would open a separate, empty database, this module keeps
one shared connection and hands it out through ``get_connection`` and
the ``get_cursor`` context manager.  Nothing is written to disk, so
all data is lost on restart.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

DATABASE_URI = ":memory:"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: products table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price REAL NOT NULL,
            sku TEXT UNIQUE NOT NULL
        );
        """,
    ),
    # Migration 2: index backing the default list ordering
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_products_name ON products(name COLLATE CASEFOLD);
        """,
    ),
]

_connection: Optional[sqlite3.Connection] = None


def _casefold_collation(left: str, right: str) -> int:
    left, right = left.casefold(), right.casefold()
    return (left > right) - (left < right)


def _connect() -> sqlite3.Connection:
    # The ASGI server and the test client may call in from a worker
    # thread, so the connection must not be pinned to its creator.
    conn = sqlite3.connect(DATABASE_URI, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    # NOCASE only folds ASCII; names are ordered with full Unicode case folding.
    conn.create_collation("CASEFOLD", _casefold_collation)
    return conn


def get_connection() -> sqlite3.Connection:
    """Return the shared connection, creating and migrating it on first use."""
    global _connection
    if _connection is None:
        _connection = _connect()
        init_db(_connection)
    return _connection


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on the shared connection.

    The statement is committed when the block exits normally and rolled
    back when it raises.  The connection itself stays open.
    """
    conn = get_connection()
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()


def init_db(conn: Optional[sqlite3.Connection] = None) -> None:
    """Apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  Safe to call repeatedly.
    """
    conn = conn or get_connection()
    cursor = conn.cursor()
    try:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.debug("Applied migration %s", version)
        conn.commit()
    finally:
        cursor.close()


def reset_db() -> None:
    """Drop the in‑memory database and start again from an empty store."""
    global _connection
    if _connection is not None:
        _connection.close()
    _connection = None
    get_connection()
