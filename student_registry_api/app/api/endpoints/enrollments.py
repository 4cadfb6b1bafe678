"""
Enrollment endpoints.

Enrolling and unenrolling are addressed by the (course, student) pair.
Every rejection reported by the storage service, including a missing
course or student, is answered with HTTP 400 and the storage message.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from student_registry_api.app.api.deps import get_storage
from student_registry_api.app.schemas.enrollment import EnrollmentResult
from student_registry_api.app.services.results import StorageError
from student_registry_api.app.services.storage_service import StorageService

router = APIRouter()


@router.post(
    "/courses/{course_id}/students/{student_id}",
    response_model=EnrollmentResult,
    status_code=status.HTTP_201_CREATED,
)
async def enroll_student(
    course_id: int,
    student_id: int,
    storage: StorageService = Depends(get_storage),
) -> EnrollmentResult:
    result = storage.enroll(student_id, course_id)
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return EnrollmentResult(success=result.success)


@router.delete("/courses/{course_id}/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unenroll_student(
    course_id: int,
    student_id: int,
    storage: StorageService = Depends(get_storage),
) -> None:
    result = storage.unenroll(student_id, course_id)
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return None
