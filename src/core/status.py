"""
Status reporting - reduces validator and store outcomes to a single user-facing message.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from util.logging import logger
from .dao import insert_student, list_students
from .errors import (
    RegistrationError, ValidationFailure, EmptyField, InvalidEmail,
    InvalidRollNumber, DuplicateKey, StoreUnavailable
)
from .schema import StudentRecord, FIELD_LABELS
from .validator import validate

SUCCESS = "Success"
EMPTY_STATE = "Empty"

TABLE_HEADER = f"{'ID':<5} | {'Name':<20} | {'Roll No':<12} | {'Course':<15} | {'Email':<30}"
TABLE_RULE = "-" * 98


@dataclass(frozen=True)
class StatusMessage:
    kind: str
    text: str
    is_error: bool


def _duplicate_text(error: DuplicateKey) -> str:
    if not error.fields:
        return "Error: Roll Number or Email already exists."
    labels = [FIELD_LABELS[field] for field in error.fields]
    verb = "already exists" if len(labels) == 1 else "already exist"
    return f"Error: {' and '.join(labels)} {verb}."


def registration_status(outcome: Union[StudentRecord, RegistrationError]) -> StatusMessage:
    """Map a registration outcome to exactly one status message."""
    if isinstance(outcome, StudentRecord):
        return StatusMessage(SUCCESS, f"Success: Student {outcome.name} registered!", False)

    if isinstance(outcome, EmptyField):
        text = "Error: All fields must be filled out."
    elif isinstance(outcome, InvalidEmail):
        text = "Error: Invalid email format."
    elif isinstance(outcome, InvalidRollNumber):
        text = "Error: Roll Number must be numeric."
    elif isinstance(outcome, DuplicateKey):
        text = _duplicate_text(outcome)
    elif isinstance(outcome, StoreUnavailable):
        text = f"Database Error: {outcome}"
    else:
        raise TypeError(f"Unsupported registration outcome: {outcome!r}")

    return StatusMessage(outcome.kind, text, True)


def listing_status(outcome: Union[Sequence[StudentRecord], StoreUnavailable], sink: str = "console") -> StatusMessage:
    """Map a listing outcome to a status message, keeping empty distinct from failure."""
    if isinstance(outcome, StoreUnavailable):
        return StatusMessage(outcome.kind, f"Error listing students: {outcome}", True)
    if not outcome:
        return StatusMessage(EMPTY_STATE, "No students registered yet.", False)
    return StatusMessage(SUCCESS, f"Student list printed to {sink}.", False)


def register_student(name: str, roll: str, course: str, email: str,
                     db_path: Optional[str] = None) -> Tuple[StatusMessage, Optional[StudentRecord]]:
    """
    Run the validated-insert workflow: validate, insert, classify.

    Returns:
        (status, record) where record is None on any failure.
    """
    try:
        candidate = validate(name, roll, course, email)
    except ValidationFailure as e:
        fields = e.fields if isinstance(e, EmptyField) else ()
        logger.log_validation_error(e.kind, fields, email=email.strip() if isinstance(e, InvalidEmail) else None)
        return registration_status(e), None

    try:
        record = insert_student(candidate, db_path)
    except (DuplicateKey, StoreUnavailable) as e:
        return registration_status(e), None

    return registration_status(record), record


def fetch_students(db_path: Optional[str] = None,
                   sink: str = "console") -> Tuple[StatusMessage, List[StudentRecord]]:
    """Run the full scan and pair it with its status message."""
    try:
        records = list_students(db_path)
    except StoreUnavailable as e:
        return listing_status(e, sink), []
    return listing_status(records, sink), records


def format_student_table(records: Sequence[StudentRecord]) -> str:
    """Render records as the fixed-width console table."""
    if not records:
        return "No students registered yet."

    lines = [TABLE_HEADER, TABLE_RULE]
    for record in records:
        lines.append(
            f"{record.id:<5d} | {record.name:<20} | {record.roll_number:<12} | "
            f"{record.course:<15} | {record.email:<30}"
        )
    return "\n".join(lines)
