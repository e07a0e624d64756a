"""
Registration error taxonomy - validation failures and store failures.
"""

from typing import Sequence, Tuple


class RegistrationError(Exception):
    """Base class for every failure the registration workflow reports."""

    kind = "RegistrationError"


class ValidationFailure(RegistrationError):
    """Raised before the store is touched when a candidate is malformed."""


class EmptyField(ValidationFailure):
    """Raised when one or more fields are empty after trimming."""

    kind = "EmptyField"

    def __init__(self, fields: Sequence[str]):
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(f"Empty field(s): {', '.join(self.fields)}")


class InvalidEmail(ValidationFailure):
    """Raised when the email does not match the accepted pattern."""

    kind = "InvalidEmail"


class InvalidRollNumber(ValidationFailure):
    """Raised when the roll number is not purely decimal digits."""

    kind = "InvalidRollNumber"


class StoreError(RegistrationError):
    """Base class for record store failures."""


class DuplicateKey(StoreError):
    """Raised when an insert violates the roll number or email uniqueness."""

    kind = "DuplicateKey"

    def __init__(self, fields: Sequence[str] = ()):
        # Empty when the colliding column could not be determined
        self.fields: Tuple[str, ...] = tuple(fields)
        if self.fields:
            detail = " and ".join(self.fields)
        else:
            detail = "roll_number or email"
        super().__init__(f"Unique constraint violated on {detail}")


class StoreUnavailable(StoreError):
    """Raised for any other backend failure: connectivity, I/O, permissions."""

    kind = "Unavailable"
