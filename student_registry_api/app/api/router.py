"""
Top‑level router of the API.

This router aggregates domain‑specific routers (students, courses,
enrollments, health).  When new endpoints are added, update this file
to include their routers.
"""

from fastapi import APIRouter

from .endpoints import courses, enrollments, health, students

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
# Enrollment routes live under /courses/{course_id}/students/{student_id};
# the paths are declared in full inside the module.
router.include_router(enrollments.router, tags=["enrollments"])
