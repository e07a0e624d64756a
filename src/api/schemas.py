"""
Serialization models for student listings and registration results.
"""

from pydantic import BaseModel, field_validator
from typing import List, Optional


class StudentResponse(BaseModel):
    id: int
    name: str
    roll_number: str
    course: str
    email: str


class StudentListResponse(BaseModel):
    count: int
    students: List[StudentResponse]


class RegistrationResponse(BaseModel):
    success: bool
    kind: str
    message: str
    student: Optional[StudentResponse] = None


class StudentRegisterRequest(BaseModel):
    name: str
    roll_number: str
    course: str
    email: str

    @field_validator('name', 'roll_number', 'course', 'email', mode='before')
    @classmethod
    def coerce_missing_to_empty(cls, v):
        # Missing CLI/JSON values reach the validator as empty strings
        return "" if v is None else str(v)
