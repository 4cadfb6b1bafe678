"""
Pydantic models for student data.

``StudentCreate`` is the request body for registering a student,
``StudentUpdate`` carries a partial update and ``StudentRead`` is the
stored entity as returned by the API.  List and single responses are
wrapped in ``StudentList`` and ``StudentEnvelope``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class StudentBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    # Unique among students, compared case-sensitively.
    email: str = Field(..., examples=["alice@example.com"])


class StudentCreate(StudentBase):
    """Schema for creating a student."""
    pass


class StudentUpdate(BaseModel):
    """Schema for updating a student.

    All fields are optional; only provided fields will be updated.
    """
    name: Optional[str] = None
    email: Optional[str] = None


class StudentRead(StudentBase):
    """Schema for reading a student from the API."""

    id: int


class StudentEnvelope(BaseModel):
    student: StudentRead


class StudentList(BaseModel):
    students: List[StudentRead]
