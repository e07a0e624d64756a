"""
Student record types shared by the validator, the store and the presentation layer.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

# Form order; also the order in which empty fields are reported
FIELD_NAMES: Tuple[str, ...] = ("name", "roll_number", "course", "email")

FIELD_LABELS: Dict[str, str] = {
    "name": "Full Name",
    "roll_number": "Roll Number",
    "course": "Course",
    "email": "Email",
}


@dataclass(frozen=True)
class CandidateRecord:
    name: str
    roll_number: str
    course: str
    email: str


@dataclass(frozen=True)
class StudentRecord:
    id: int
    name: str
    roll_number: str
    course: str
    email: str

    @classmethod
    def from_candidate(cls, record_id: int, candidate: CandidateRecord) -> "StudentRecord":
        return cls(
            id=record_id,
            name=candidate.name,
            roll_number=candidate.roll_number,
            course=candidate.course,
            email=candidate.email,
        )

    def to_dict(self) -> Dict:
        return asdict(self)
