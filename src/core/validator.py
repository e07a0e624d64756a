"""
Candidate validation - shape checks run before any persistence is attempted.
"""

import re

from .errors import EmptyField, InvalidEmail, InvalidRollNumber
from .schema import CandidateRecord, FIELD_NAMES

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}")
ROLL_NUMBER_PATTERN = re.compile(r"[0-9]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_roll_number(roll: str) -> bool:
    return ROLL_NUMBER_PATTERN.fullmatch(roll) is not None


def validate(name: str, roll: str, course: str, email: str) -> CandidateRecord:
    """
    Trim and check the four raw form values.

    Checks run in a fixed order and only the first failure is raised:
    empty fields, then email format, then roll number format.

    Returns:
        CandidateRecord holding the trimmed values, ready for insertion.

    Raises:
        EmptyField, InvalidEmail, InvalidRollNumber
    """
    values = tuple((value or "").strip() for value in (name, roll, course, email))

    empty = [field for field, value in zip(FIELD_NAMES, values) if not value]
    if empty:
        raise EmptyField(empty)

    name, roll, course, email = values

    if not is_valid_email(email):
        raise InvalidEmail(f"Invalid email format: {email!r}")

    if not is_valid_roll_number(roll):
        raise InvalidRollNumber(f"Roll number must be numeric: {roll!r}")

    return CandidateRecord(name=name, roll_number=roll, course=course, email=email)
