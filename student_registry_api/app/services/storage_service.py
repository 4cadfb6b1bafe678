"""
In-memory storage for students, courses and enrollments.

``StorageService`` owns two collections (``students`` and ``courses``)
and the enrollment relation between them.  Every business rule of the
registry lives here:

* student emails and course titles are unique on create;
* a student is enrolled in a given course at most once;
* a course holds at most ``course_capacity`` students (3 by default);
* students and courses with active enrollments cannot be deleted;
* ids are assigned sequentially per collection and only restart after
  ``reset()``.

Rejections are returned as ``StorageError`` values rather than raised,
so the API layer can choose a status code for each outcome.  The
service is a plain object; the application holds one instance and
tests construct their own.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from ..schemas.course import CourseRead
from ..schemas.enrollment import EnrollmentRead
from ..schemas.student import StudentRead
from .results import ErrorKind, StorageError, Success

logger = logging.getLogger(__name__)

STUDENTS = "students"
COURSES = "courses"

DEFAULT_COURSE_CAPACITY = 3

Entity = Union[StudentRead, CourseRead]

# Fixed dataset loaded by ``seed()``.
SEED_STUDENTS: Tuple[Dict[str, str], ...] = (
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
    {"name": "Carol", "email": "carol@example.com"},
)
SEED_COURSES: Tuple[Dict[str, str], ...] = (
    {"title": "Math", "teacher": "Dr. Smith"},
    {"title": "Physics", "teacher": "Dr. Brown"},
    {"title": "History", "teacher": "Dr. Jones"},
)


class _Collection:
    """Entities of one kind plus the id counter and unique field."""

    def __init__(self, model: Type[BaseModel], unique_field: str, unique_error: str) -> None:
        self.model = model
        self.unique_field = unique_field
        self.unique_error = unique_error
        self.items: List[Any] = []
        self.next_id = 1

    def clear(self) -> None:
        self.items = []
        self.next_id = 1

    def find(self, entity_id: int) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.id == entity_id:
                return index
        return None


def _invalid(collection: str, operation: str, exc: ValidationError) -> StorageError:
    """Turn a model validation failure into a rejection naming the bad fields."""
    names = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    message = f"Missing or invalid fields: {', '.join(names)}"
    logger.info("Rejected %s %s: %s", collection, operation, message)
    return StorageError(message, ErrorKind.INVALID)


class StorageService:
    """Data-access layer for the registry."""

    def __init__(self, course_capacity: int = DEFAULT_COURSE_CAPACITY) -> None:
        self.course_capacity = course_capacity
        self._collections: Dict[str, _Collection] = {
            STUDENTS: _Collection(StudentRead, "email", "Email must be unique"),
            COURSES: _Collection(CourseRead, "title", "Course title must be unique"),
        }
        self._enrollments: List[Tuple[int, int]] = []

    def _collection(self, name: str) -> _Collection:
        try:
            return self._collections[name]
        except KeyError:
            raise ValueError(f"Unknown collection: {name!r}") from None

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------

    def list(self, collection: str) -> List[Entity]:
        """Return every entity of ``collection`` in insertion order."""
        return list(self._collection(collection).items)

    def get(self, collection: str, entity_id: int) -> Optional[Entity]:
        coll = self._collection(collection)
        index = coll.find(entity_id)
        return coll.items[index] if index is not None else None

    def create(self, collection: str, fields: Mapping[str, Any]) -> Union[Entity, StorageError]:
        """Insert a new entity and return it.

        The unique field (``email`` for students, ``title`` for courses)
        must not match any existing entity and every required field must be
        present with the right type.  On violation nothing is inserted and
        the id counter is left untouched.
        """
        coll = self._collection(collection)
        value = fields.get(coll.unique_field)
        if any(getattr(item, coll.unique_field) == value for item in coll.items):
            logger.info("Rejected %s create: %s", collection, coll.unique_error)
            return StorageError(coll.unique_error, ErrorKind.UNIQUENESS)

        try:
            entity = coll.model(**{**fields, "id": coll.next_id})
        except ValidationError as exc:
            return _invalid(collection, "create", exc)
        coll.next_id += 1
        coll.items.append(entity)
        logger.info("Created %s %s", collection, entity.id)
        return entity

    def update(
        self, collection: str, entity_id: int, fields: Mapping[str, Any]
    ) -> Union[Entity, StorageError, None]:
        """Merge ``fields`` into an existing entity.

        Fields that are not present keep their current value.  Uniqueness
        is not re-validated here, field types are.  Returns ``None`` if the id
        is unknown and a ``StorageError`` if the merged entity is invalid.
        """
        coll = self._collection(collection)
        index = coll.find(entity_id)
        if index is None:
            return None
        changes = {key: value for key, value in fields.items() if key != "id"}
        try:
            updated = coll.model.model_validate({**coll.items[index].model_dump(), **changes})
        except ValidationError as exc:
            return _invalid(collection, "update", exc)
        coll.items[index] = updated
        logger.info("Updated %s %s (%s)", collection, entity_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def remove(self, collection: str, entity_id: int) -> Union[bool, StorageError]:
        """Delete an entity.

        Returns ``False`` if it does not exist and a ``StorageError`` if
        it still has enrollments; otherwise deletes it and returns ``True``.
        """
        coll = self._collection(collection)
        index = coll.find(entity_id)
        if index is None:
            return False

        if collection == STUDENTS:
            blocked = any(student_id == entity_id for student_id, _ in self._enrollments)
            message = "Cannot delete student: enrolled in a course"
        else:
            blocked = any(course_id == entity_id for _, course_id in self._enrollments)
            message = "Cannot delete course: students are enrolled"
        if blocked:
            logger.info("Rejected %s delete of %s: %s", collection, entity_id, message)
            return StorageError(message, ErrorKind.INTEGRITY)

        del coll.items[index]
        logger.info("Deleted %s %s", collection, entity_id)
        return True

    # ------------------------------------------------------------------
    # Enrollments
    # ------------------------------------------------------------------

    def enroll(self, student_id: int, course_id: int) -> Union[Success, StorageError]:
        """Enroll a student in a course.

        Checks, in order: the course exists, the student exists, the
        pair is not already enrolled and the course is not full.
        """
        if self.get(COURSES, course_id) is None:
            return self._reject_enrollment("Course not found", ErrorKind.NOT_FOUND)
        if self.get(STUDENTS, student_id) is None:
            return self._reject_enrollment("Student not found", ErrorKind.NOT_FOUND)
        if (student_id, course_id) in self._enrollments:
            return self._reject_enrollment("Student already enrolled in this course", ErrorKind.INTEGRITY)
        if self._course_size(course_id) >= self.course_capacity:
            return self._reject_enrollment("Course is full", ErrorKind.INTEGRITY)

        self._enrollments.append((student_id, course_id))
        logger.info("Enrolled student %s in course %s", student_id, course_id)
        return Success()

    def unenroll(self, student_id: int, course_id: int) -> Union[Success, StorageError]:
        try:
            self._enrollments.remove((student_id, course_id))
        except ValueError:
            return self._reject_enrollment("Enrollment not found", ErrorKind.RELATION_NOT_FOUND)
        logger.info("Unenrolled student %s from course %s", student_id, course_id)
        return Success()

    def get_student_courses(self, student_id: int) -> List[CourseRead]:
        """Courses the student is enrolled in, in enrollment order."""
        courses = (self.get(COURSES, cid) for sid, cid in self._enrollments if sid == student_id)
        return [course for course in courses if course is not None]

    def get_course_students(self, course_id: int) -> List[StudentRead]:
        """Students enrolled in the course, in enrollment order."""
        students = (self.get(STUDENTS, sid) for sid, cid in self._enrollments if cid == course_id)
        return [student for student in students if student is not None]

    def enrollments(self) -> List[EnrollmentRead]:
        return [EnrollmentRead(student_id=sid, course_id=cid) for sid, cid in self._enrollments]

    def _course_size(self, course_id: int) -> int:
        return sum(1 for _, cid in self._enrollments if cid == course_id)

    @staticmethod
    def _reject_enrollment(message: str, kind: ErrorKind) -> StorageError:
        logger.info("Rejected enrollment change: %s", message)
        return StorageError(message, kind)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Drop all data and restart both id counters at 1."""
        for coll in self._collections.values():
            coll.clear()
        self._enrollments = []
        logger.info("Storage reset")

    def seed(self) -> None:
        """Load the fixed starting dataset (no enrollments)."""
        for student in SEED_STUDENTS:
            self.create(STUDENTS, student)
        for course in SEED_COURSES:
            self.create(COURSES, course)
        logger.info("Seeded %d students and %d courses", len(SEED_STUDENTS), len(SEED_COURSES))
