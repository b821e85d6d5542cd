"""
Courses and the groups that study them.
"""

import logging
from typing import Any, Dict, Iterable, List, Union

from .enums import Discipline
from .exceptions import DuplicateEntityError, ResourceNotFoundError, ValidationError
from .people import Student, Teacher

logger = logging.getLogger(__name__)


class Course:
    """Immutable course description.

    Courses compare by identity: two courses with the same name and credits
    are still different courses.
    """

    def __init__(self, name: str, credits: int, discipline: Discipline):
        if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
            raise ValidationError("Course credits must be a positive integer", details={'credits': credits})
        self._name = name
        self._credits = credits
        self._discipline = Discipline(discipline)

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def discipline(self) -> Discipline:
        return self._discipline

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        return {
            'name': self._name,
            'credits': self._credits,
            'discipline': self._discipline.value,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, credits={self._credits})"


class Group:
    """A teacher and a roster of students studying one course."""

    def __init__(self, name: str, course: Course, teacher: Teacher):
        self._name = name
        self._course = course
        self._teacher = teacher
        self._students: List[Student] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def course(self) -> Course:
        return self._course

    @property
    def teacher(self) -> Teacher:
        return self._teacher

    @property
    def size(self) -> int:
        return len(self._students)

    def _contains(self, student: Student) -> bool:
        return any(member is student for member in self._students)

    def add_student(self, student: Student) -> None:
        """Add a student to the roster.

        Raises:
            DuplicateEntityError: If this student object is already a member.
        """
        if self._contains(student):
            raise DuplicateEntityError(
                "Student is already in the group",
                error_code="student_in_group",
                details={'group': self._name, 'student_id': student.id},
            )

        self._students.append(student)
        logger.info("Added student %d to group %r", student.id, self._name)

    def remove_student_by_id(self, student_id: int) -> None:
        """Remove the first roster member with the given id.

        Raises:
            ResourceNotFoundError: If no member has that id.
        """
        for index, student in enumerate(self._students):
            if student.id == student_id:
                del self._students[index]
                logger.info("Removed student %d from group %r", student_id, self._name)
                return

        raise ResourceNotFoundError(
            "Student not found in group",
            error_code="student_not_found",
            details={'group': self._name, 'student_id': student_id},
        )

    def get_average_group_score(self) -> float:
        """Mean GPA of the roster, or 0.0 when the roster is empty."""
        if not self._students:
            return 0.0

        total_score = sum(student.get_average_score() for student in self._students)
        return total_score / len(self._students)

    def get_students(self) -> List[Student]:
        return self._students.copy()

    def get_student_by_id(self, student_id: Union[int, Iterable[int]]) -> Union[Student, List[Student]]:
        """Look up roster members by id.

        A single id returns that student and raises ResourceNotFoundError
        when absent. A collection of ids returns every matching member in
        roster order; ids with no match are skipped.
        """
        if not isinstance(student_id, int):
            wanted = set(student_id)
            return [student for student in self._students if student.id in wanted]

        for student in self._students:
            if student.id == student_id:
                return student

        raise ResourceNotFoundError(
            "Student not found in group",
            error_code="student_not_found",
            details={'group': self._name, 'student_id': student_id},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert group to dictionary."""
        return {
            'name': self._name,
            'course': self._course.name,
            'teacher_id': self._teacher.id,
            'student_ids': [student.id for student in self._students],
            'average_score': self.get_average_group_score(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, size={len(self._students)})"
