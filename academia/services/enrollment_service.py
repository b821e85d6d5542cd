"""
Enrollment service returning explicit results instead of raising.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from ..core.academics import Course, Group
from ..core.enums import AcademicStatus, EnrollmentOutcome
from ..core.exceptions import UniversityError
from ..core.people import Student

logger = logging.getLogger(__name__)


@dataclass
class EnrollmentResult:
    """Result of an enrollment operation."""
    success: bool
    outcome: EnrollmentOutcome
    message: str
    error_code: str = ""
    details: Dict[str, Any] = field(default_factory=dict)


class EnrollmentService:
    """Runs enrollment and roster operations and reports their outcome.

    Domain errors raised by the entities are turned into rejected results.
    Any other exception is a defect and propagates unchanged.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._attempted = 0
        self._succeeded = 0
        self._rejected = 0

    def enroll(self, student: Student, course: Course) -> EnrollmentResult:
        """Enroll a student in a course."""
        return self._run(
            lambda: student.enroll_course(course),
            EnrollmentOutcome.CONFIRMED,
            "Student enrolled successfully",
            {'student_id': student.id, 'course': course.name},
        )

    def add_to_group(self, group: Group, student: Student) -> EnrollmentResult:
        """Add a student to a group roster."""
        return self._run(
            lambda: group.add_student(student),
            EnrollmentOutcome.CONFIRMED,
            "Student added to group",
            {'student_id': student.id, 'group': group.name},
        )

    def remove_from_group(self, group: Group, student_id: int) -> EnrollmentResult:
        """Remove a student from a group roster by id."""
        return self._run(
            lambda: group.remove_student_by_id(student_id),
            EnrollmentOutcome.REMOVED,
            "Student removed from group",
            {'student_id': student_id, 'group': group.name},
        )

    def change_status(self, student: Student, status: AcademicStatus) -> EnrollmentResult:
        """Change a student's academic status."""
        return self._run(
            lambda: student.update_academic_status(status),
            EnrollmentOutcome.UPDATED,
            "Academic status updated",
            {'student_id': student.id, 'status': AcademicStatus(status).value},
        )

    def _run(self, operation: Callable[[], None], outcome: EnrollmentOutcome,
             message: str, details: Dict[str, Any]) -> EnrollmentResult:
        with self._lock:
            self._attempted += 1
            try:
                operation()
            except UniversityError as e:
                self._rejected += 1
                logger.warning("Operation rejected: %s (%s)", e.message, details)
                return EnrollmentResult(
                    success=False,
                    outcome=EnrollmentOutcome.REJECTED,
                    message=e.message,
                    error_code=e.error_code or "",
                    details={**details, **e.details},
                )

            self._succeeded += 1
            return EnrollmentResult(success=True, outcome=outcome, message=message, details=details)

    def get_statistics(self) -> Dict[str, Any]:
        """Get operation statistics."""
        with self._lock:
            return {
                'attempted': self._attempted,
                'succeeded': self._succeeded,
                'rejected': self._rejected,
            }
