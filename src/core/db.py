"""
SQLite foundation - connection-per-call access and bootstrap of the students table.
"""

import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional

from util.logging import logger
from .config import get_db_path, ensure_db_directory, STUDENTS_TABLE
from .errors import StoreUnavailable

SCHEMA_SQL = f'''
    CREATE TABLE IF NOT EXISTS {STUDENTS_TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        roll_number TEXT UNIQUE NOT NULL,
        course TEXT NOT NULL,
        email TEXT UNIQUE NOT NULL
    )
'''


@contextmanager
def get_db(db_path: Optional[str] = None) -> Generator[sqlite3.Connection, None, None]:
    """Get a SQLite database connection, closed on every exit path."""
    path = db_path or get_db_path()
    logger.debug(f"Opening SQLite connection: {path}")
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as e:
        raise StoreUnavailable(f"Cannot open database '{path}': {e}") from e
    try:
        yield conn
    finally:
        conn.close()


def ensure_schema(db_path: Optional[str] = None) -> None:
    """
    Create the students table if it is absent. Safe to call on every startup.

    Raises:
        StoreUnavailable: the database directory or file cannot be created or opened.
    """
    path = db_path or get_db_path()
    try:
        ensure_db_directory(path)
        with get_db(path) as conn:
            conn.execute(SCHEMA_SQL)
            conn.commit()
    except (OSError, sqlite3.Error) as e:
        logger.log_schema_bootstrap(STUDENTS_TABLE, path, status="failed", error=str(e))
        raise StoreUnavailable(f"Error initializing database: {e}") from e
    except StoreUnavailable as e:
        logger.log_schema_bootstrap(STUDENTS_TABLE, path, status="failed", error=str(e))
        raise

    logger.log_schema_bootstrap(STUDENTS_TABLE, path)


def health_check(db_path: Optional[str] = None) -> bool:
    """Check that the database opens and the students table exists."""
    try:
        with get_db(db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name = ?",
                (STUDENTS_TABLE,)
            )
            return cursor.fetchone() is not None
    except (sqlite3.Error, StoreUnavailable) as e:
        logger.warning(f"Database health check failed: {e}")
        return False
