"""
Student endpoints.

CRUD routes for students plus a read-only view of the courses a
student is enrolled in.  Handlers only translate storage results into
HTTP responses; all validation happens in ``StorageService``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from student_registry_api.app.api.deps import get_storage
from student_registry_api.app.schemas.course import CourseList
from student_registry_api.app.schemas.student import (
    StudentCreate,
    StudentEnvelope,
    StudentList,
    StudentRead,
    StudentUpdate,
)
from student_registry_api.app.services.results import StorageError
from student_registry_api.app.services.storage_service import STUDENTS, StorageService

router = APIRouter()

NOT_FOUND = "Student not found"


@router.get("", response_model=StudentList)
async def list_students(storage: StorageService = Depends(get_storage)) -> StudentList:
    """Return all students in creation order."""
    return StudentList(students=storage.list(STUDENTS))


@router.get("/{student_id}", response_model=StudentEnvelope)
async def get_student(student_id: int, storage: StorageService = Depends(get_storage)) -> StudentEnvelope:
    student = storage.get(STUDENTS, student_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return StudentEnvelope(student=student)


@router.post("", response_model=StudentEnvelope, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_in: StudentCreate,
    storage: StorageService = Depends(get_storage),
) -> StudentEnvelope:
    """Register a new student.

    Returns HTTP 400 if the email is already taken.
    """
    result = storage.create(STUDENTS, student_in.model_dump())
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return StudentEnvelope(student=result)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: int,
    updates: StudentUpdate,
    storage: StorageService = Depends(get_storage),
) -> StudentRead:
    """Update an existing student.

    Partial updates are supported; any unspecified fields remain
    unchanged.  The updated student is returned unwrapped.
    """
    student = storage.update(STUDENTS, student_id, updates.model_dump(exclude_unset=True, exclude_none=True))
    if isinstance(student, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=student.error)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, storage: StorageService = Depends(get_storage)) -> None:
    """Delete a student.

    Students that are still enrolled in a course cannot be deleted
    (HTTP 400); unknown ids yield HTTP 404.
    """
    result = storage.remove(STUDENTS, student_id)
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None


@router.get("/{student_id}/courses", response_model=CourseList)
async def list_student_courses(student_id: int, storage: StorageService = Depends(get_storage)) -> CourseList:
    """List the courses a student is currently enrolled in."""
    if storage.get(STUDENTS, student_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return CourseList(courses=storage.get_student_courses(student_id))
