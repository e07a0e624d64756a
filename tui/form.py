"""
Registration form actions - the two form buttons expressed as plain functions
returning result dicts, so the Textual screen stays a thin wrapper.
"""

from typing import Any, Dict, List, Tuple

from src.core.schema import FIELD_LABELS, FIELD_NAMES
from src.core.status import register_student, fetch_students, format_student_table
from util.logging import logger

# (input widget id, label) in form order
FORM_FIELDS: List[Tuple[str, str]] = [
    (f"{field}-input", f"{FIELD_LABELS[field]}:") for field in FIELD_NAMES
]

INITIAL_STATUS = "Enter student details and click Register."


def submit_registration(name: str, roll: str, course: str, email: str) -> Dict[str, Any]:
    """
    Handle the Register button.

    Returns:
        Dict with the status text, whether it is an error, and whether the
        form should be cleared (only after a successful insert).
    """
    status, record = register_student(name, roll, course, email)

    return {
        "success": record is not None,
        "kind": status.kind,
        "message": status.text,
        "is_error": status.is_error,
        "clear_fields": record is not None,
        "record": record,
    }


def view_all_students(sink: str = "console") -> Dict[str, Any]:
    """
    Handle the View All button.

    Returns:
        Dict with the status text and the rendered table lines for the sink.
        ``lines`` is empty when the listing failed.
    """
    status, records = fetch_students(sink=sink)

    lines: List[str] = []
    if not status.is_error:
        lines = ["", "--- All Registered Students ---"]
        lines.extend(format_student_table(records).splitlines())
        logger.info(f"Form view-all rendered {len(records)} student(s) to {sink}")

    return {
        "success": not status.is_error,
        "kind": status.kind,
        "message": status.text,
        "is_error": status.is_error,
        "lines": lines,
        "count": len(records),
    }
