"""
Status reporting tests - one message per outcome and the end-to-end registration workflow.
"""

import pytest

from src.core.db import ensure_schema
from src.core.errors import (
    EmptyField, InvalidEmail, InvalidRollNumber, DuplicateKey, StoreUnavailable
)
from src.core.schema import StudentRecord
from src.core.status import (
    StatusMessage, registration_status, listing_status, register_student,
    fetch_students, format_student_table, TABLE_HEADER
)


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point the store at a fresh database file and bootstrap it."""
    db_path = tmp_path / "students.sqlite"
    monkeypatch.setenv("DB_PATH", str(db_path))
    ensure_schema()
    return db_path


@pytest.fixture
def ada_record():
    return StudentRecord(id=1, name="Ada Lovelace", roll_number="1001", course="CS101", email="ada@example.com")


class TestRegistrationStatus:
    """Test outcome to message reduction."""

    def test_success_message_names_student(self, ada_record):
        status = registration_status(ada_record)
        assert status == StatusMessage("Success", "Success: Student Ada Lovelace registered!", False)

    @pytest.mark.parametrize("error, kind, text", [
        (EmptyField(["name"]), "EmptyField", "Error: All fields must be filled out."),
        (InvalidEmail("bad"), "InvalidEmail", "Error: Invalid email format."),
        (InvalidRollNumber("bad"), "InvalidRollNumber", "Error: Roll Number must be numeric."),
        (DuplicateKey(), "DuplicateKey", "Error: Roll Number or Email already exists."),
        (DuplicateKey(["roll_number"]), "DuplicateKey", "Error: Roll Number already exists."),
        (DuplicateKey(["email"]), "DuplicateKey", "Error: Email already exists."),
        (DuplicateKey(["roll_number", "email"]), "DuplicateKey", "Error: Roll Number and Email already exist."),
        (StoreUnavailable("disk I/O error"), "Unavailable", "Database Error: disk I/O error"),
    ])
    def test_error_messages(self, error, kind, text):
        """Test that every failure kind maps to its labelled message."""
        status = registration_status(error)
        assert status.kind == kind
        assert status.text == text
        assert status.is_error is True

    def test_unknown_outcome_rejected(self):
        with pytest.raises(TypeError):
            registration_status("not an outcome")


class TestListingStatus:
    """Test listing messages keep empty distinct from failure."""

    def test_empty_listing_is_not_an_error(self):
        status = listing_status([])
        assert status.kind == "Empty"
        assert status.text == "No students registered yet."
        assert status.is_error is False

    def test_non_empty_listing_names_sink(self, ada_record):
        status = listing_status([ada_record], sink="log panel")
        assert status.text == "Student list printed to log panel."
        assert status.is_error is False

    def test_listing_failure(self):
        status = listing_status(StoreUnavailable("no such table: students"))
        assert status.text == "Error listing students: no such table: students"
        assert status.is_error is True


class TestRegisterStudentWorkflow:
    """Test validate, insert and classify end to end."""

    def test_successful_registration(self, temp_db):
        """Test that valid input is stored and reported."""
        status, record = register_student(" Ada Lovelace ", "1001", "CS101", "ada@example.com")
        assert status.text == "Success: Student Ada Lovelace registered!"
        assert record.id == 1
        assert record.name == "Ada Lovelace"

    def test_validation_failure_does_not_touch_store(self, tmp_path, monkeypatch):
        """Test that validation errors are reported even when no store exists."""
        monkeypatch.setenv("DB_PATH", str(tmp_path))
        status, record = register_student("Ada", "12a3", "CS101", "ada@example.com")
        assert record is None
        assert status.kind == "InvalidRollNumber"

    def test_duplicate_reported(self, temp_db):
        """Test that a reused roll number is reported as a duplicate."""
        register_student("Ada Lovelace", "1001", "CS101", "ada@example.com")
        status, record = register_student("Grace Hopper", "1001", "CS102", "grace@example.com")
        assert record is None
        assert status.kind == "DuplicateKey"
        assert status.text == "Error: Roll Number already exists."

    def test_unavailable_reported_not_raised(self, tmp_path, monkeypatch):
        """Test that a store failure during insert becomes a message."""
        monkeypatch.setenv("DB_PATH", str(tmp_path / "no_table.sqlite"))
        status, record = register_student("Ada Lovelace", "1001", "CS101", "ada@example.com")
        assert record is None
        assert status.kind == "Unavailable"
        assert status.text.startswith("Database Error: ")

    def test_fetch_students(self, temp_db):
        status, records = fetch_students()
        assert status.kind == "Empty"
        assert records == []

        register_student("Ada Lovelace", "1001", "CS101", "ada@example.com")
        status, records = fetch_students()
        assert status.kind == "Success"
        assert len(records) == 1

    def test_fetch_students_failure(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DB_PATH", str(tmp_path / "no_table.sqlite"))
        status, records = fetch_students()
        assert status.is_error is True
        assert records == []


class TestStudentTable:
    """Test the fixed-width console table."""

    def test_empty_table(self):
        assert format_student_table([]) == "No students registered yet."

    def test_rows_follow_header(self, ada_record):
        lines = format_student_table([ada_record]).splitlines()
        assert lines[0] == TABLE_HEADER
        assert set(lines[1]) == {"-"}
        assert lines[2].startswith("1     | Ada Lovelace         | 1001         | CS101           | ada@example.com")
