"""
Record store operations - insert and full-scan read over the students table,
with backend failures translated into DuplicateKey / StoreUnavailable.
"""

import sqlite3
from typing import List, Optional, Tuple

from util.logging import logger
from .config import STUDENTS_TABLE
from .db import get_db
from .errors import DuplicateKey, StoreUnavailable
from .schema import CandidateRecord, StudentRecord

# Extended result codes SQLite reports for a violated uniqueness constraint
UNIQUE_VIOLATION_CODES = frozenset({
    sqlite3.SQLITE_CONSTRAINT_UNIQUE,
    sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY,
})


def is_unique_violation(error: sqlite3.Error) -> bool:
    """Classify by the driver's extended error code, never by message text."""
    return (
        isinstance(error, sqlite3.IntegrityError)
        and getattr(error, "sqlite_errorcode", None) in UNIQUE_VIOLATION_CODES
    )


def _colliding_fields(conn: sqlite3.Connection, candidate: CandidateRecord) -> Tuple[str, ...]:
    """Find which unique columns already hold the candidate's values."""
    fields = []
    cursor = conn.cursor()
    for column, value in (("roll_number", candidate.roll_number), ("email", candidate.email)):
        cursor.execute(
            f"SELECT 1 FROM {STUDENTS_TABLE} WHERE {column} = ? LIMIT 1",
            (value,)
        )
        if cursor.fetchone() is not None:
            fields.append(column)
    return tuple(fields)


def insert_student(candidate: CandidateRecord, db_path: Optional[str] = None) -> StudentRecord:
    """
    Insert one validated candidate as a single atomic statement.

    Returns:
        StudentRecord carrying the store-assigned id.

    Raises:
        DuplicateKey: roll_number or email already exists. ``fields`` names the
            colliding column(s) when they can be determined.
        StoreUnavailable: any other backend failure, including failure to connect.
    """
    try:
        with get_db(db_path) as conn:
            try:
                cursor = conn.cursor()
                cursor.execute(
                    f"INSERT INTO {STUDENTS_TABLE} (name, roll_number, course, email) VALUES (?, ?, ?, ?)",
                    (candidate.name, candidate.roll_number, candidate.course, candidate.email)
                )
                conn.commit()
                record = StudentRecord.from_candidate(cursor.lastrowid, candidate)
            except sqlite3.Error as e:
                conn.rollback()
                if not is_unique_violation(e):
                    raise
                try:
                    fields = _colliding_fields(conn, candidate)
                except sqlite3.Error as lookup_error:
                    logger.warning(f"Could not determine colliding field: {lookup_error}")
                    fields = ()
                logger.log_student_operation(
                    "insert", candidate.roll_number, status="rejected",
                    details={"reason": DuplicateKey.kind, "fields": list(fields)}
                )
                raise DuplicateKey(fields) from e
    except sqlite3.Error as e:
        logger.log_student_operation(
            "insert", candidate.roll_number, status="failed", details={"error": str(e)}
        )
        raise StoreUnavailable(str(e)) from e
    except StoreUnavailable as e:
        logger.log_student_operation(
            "insert", candidate.roll_number, status="failed", details={"error": str(e)}
        )
        raise

    logger.log_student_operation("insert", record.roll_number, details={"id": record.id})
    return record


def list_students(db_path: Optional[str] = None) -> List[StudentRecord]:
    """List every student in insertion (id) order. An empty table yields []."""
    try:
        with get_db(db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT id, name, roll_number, course, email FROM {STUDENTS_TABLE} ORDER BY id"
            )
            rows = cursor.fetchall()
    except sqlite3.Error as e:
        logger.log_student_operation("list", status="failed", details={"error": str(e)})
        raise StoreUnavailable(str(e)) from e
    except StoreUnavailable as e:
        logger.log_student_operation("list", status="failed", details={"error": str(e)})
        raise

    logger.log_student_operation("list", details={"count": len(rows)})
    return [StudentRecord(*row) for row in rows]


def count_students(db_path: Optional[str] = None) -> int:
    """Count registered students."""
    try:
        with get_db(db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT COUNT(*) FROM {STUDENTS_TABLE}")
            return cursor.fetchone()[0]
    except sqlite3.Error as e:
        logger.log_student_operation("count", status="failed", details={"error": str(e)})
        raise StoreUnavailable(str(e)) from e
    except StoreUnavailable as e:
        logger.log_student_operation("count", status="failed", details={"error": str(e)})
        raise
