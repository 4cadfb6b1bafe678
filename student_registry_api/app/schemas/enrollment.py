"""
Pydantic models for enrollments.

An enrollment is nothing more than a (student, course) pair; it has no
identifier of its own.
"""

from pydantic import BaseModel


class EnrollmentRead(BaseModel):
    student_id: int
    course_id: int


class EnrollmentResult(BaseModel):
    """Body returned after a successful enrollment."""

    success: bool = True
