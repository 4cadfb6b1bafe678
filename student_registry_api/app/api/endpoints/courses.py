"""
Course endpoints.

CRUD routes for courses plus the list of students enrolled in a
course.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from student_registry_api.app.api.deps import get_storage
from student_registry_api.app.schemas.course import (
    CourseCreate,
    CourseEnvelope,
    CourseList,
    CourseRead,
    CourseUpdate,
)
from student_registry_api.app.schemas.student import StudentList
from student_registry_api.app.services.results import StorageError
from student_registry_api.app.services.storage_service import COURSES, StorageService

router = APIRouter()

NOT_FOUND = "Course not found"


@router.get("", response_model=CourseList)
async def list_courses(storage: StorageService = Depends(get_storage)) -> CourseList:
    return CourseList(courses=storage.list(COURSES))


@router.get("/{course_id}", response_model=CourseEnvelope)
async def get_course(course_id: int, storage: StorageService = Depends(get_storage)) -> CourseEnvelope:
    course = storage.get(COURSES, course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return CourseEnvelope(course=course)


@router.post("", response_model=CourseEnvelope, status_code=status.HTTP_201_CREATED)
async def create_course(
    course_in: CourseCreate,
    storage: StorageService = Depends(get_storage),
) -> CourseEnvelope:
    """Create a course; HTTP 400 if the title is already used."""
    result = storage.create(COURSES, course_in.model_dump())
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return CourseEnvelope(course=result)


@router.put("/{course_id}", response_model=CourseRead)
async def update_course(
    course_id: int,
    updates: CourseUpdate,
    storage: StorageService = Depends(get_storage),
) -> CourseRead:
    course = storage.update(COURSES, course_id, updates.model_dump(exclude_unset=True, exclude_none=True))
    if isinstance(course, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=course.error)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return course


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, storage: StorageService = Depends(get_storage)) -> None:
    """Delete a course.

    Courses with enrolled students are kept and HTTP 400 is returned.
    """
    result = storage.remove(COURSES, course_id)
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None


@router.get("/{course_id}/students", response_model=StudentList)
async def list_course_students(course_id: int, storage: StorageService = Depends(get_storage)) -> StudentList:
    """List the students currently enrolled in a course."""
    if storage.get(COURSES, course_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return StudentList(students=storage.get_course_students(course_id))
