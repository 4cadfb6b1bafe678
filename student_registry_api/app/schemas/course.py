"""
Pydantic models for course data.

Courses mirror the student schemas: a create body, a partial update
body, the stored entity and the list/single response wrappers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CourseBase(BaseModel):
    # Unique among courses.
    title: str = Field(..., examples=["Math"])
    teacher: str = Field(..., examples=["Dr. Smith"])


class CourseCreate(CourseBase):
    """Schema for creating a course."""
    pass


class CourseUpdate(BaseModel):
    """Schema for updating a course.

    All fields are optional; only provided fields will be updated.
    """
    title: Optional[str] = None
    teacher: Optional[str] = None


class CourseRead(CourseBase):
    """Schema for reading a course from the API."""

    id: int


class CourseEnvelope(BaseModel):
    course: CourseRead


class CourseList(BaseModel):
    courses: List[CourseRead]
