"""
People of the university: the shared Person base and its role variants.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Union

from .enums import AcademicStatus, Gender, Role
from .exceptions import EnrollmentError, ValidationError
from .identity import IdentityAllocator, default_allocator
from .models import DEFAULT_CONTACT, AcademicPerformance, ContactInfo, PersonInfo

if TYPE_CHECKING:
    from .academics import Course

logger = logging.getLogger(__name__)

PersonInfoLike = Union[PersonInfo, Mapping[str, Any]]


class Person(ABC):
    """Abstract base class for all people in the university."""

    def __init__(self, info: PersonInfoLike, role: Role, *,
                 allocator: Optional[IdentityAllocator] = None,
                 default_contact: Optional[ContactInfo] = None):
        info = PersonInfo.model_validate(info)
        self._first_name = info.first_name
        self._last_name = info.last_name
        self._birth_day = info.birth_day
        self._gender = info.gender
        self._contact_info = info.contact_info(default_contact or DEFAULT_CONTACT)
        self._role = Role(role)
        self._id = (allocator or default_allocator()).next_id()

    @property
    def id(self) -> int:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_day(self) -> date:
        return self._birth_day

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def contact_info(self) -> ContactInfo:
        return self._contact_info

    @property
    def role(self) -> Role:
        return self._role

    @property
    def full_name(self) -> str:
        return f"{self._last_name} {self._first_name}"

    @property
    def age(self) -> int:
        """Age in whole years as of today. Not cached."""
        return self.age_on(date.today())

    def age_on(self, day: date) -> int:
        """Age in whole years as of the given date."""
        age = day.year - self._birth_day.year
        if (day.month, day.day) < (self._birth_day.month, self._birth_day.day):
            age -= 1
        return age

    @abstractmethod
    def role_details(self) -> Dict[str, Any]:
        """Role-specific part of the plain-data snapshot."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary."""
        return {
            'id': self._id,
            'role': self._role.value,
            'first_name': self._first_name,
            'last_name': self._last_name,
            'full_name': self.full_name,
            'birth_day': self._birth_day.isoformat(),
            'gender': self._gender.value,
            'contact_info': self._contact_info.model_dump(),
            **self.role_details(),
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, name={self.full_name})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, role={self._role.value})"


class Teacher(Person):
    """Teacher with specializations and the courses they currently teach."""

    def __init__(self, info: PersonInfoLike, specializations: Optional[Iterable[str]] = None, *,
                 allocator: Optional[IdentityAllocator] = None,
                 default_contact: Optional[ContactInfo] = None):
        super().__init__(info, Role.TEACHER, allocator=allocator, default_contact=default_contact)
        self.specializations: List[str] = list(specializations or [])
        self._courses: List["Course"] = []

    def add_specialization(self, specialization: str) -> None:
        self.specializations.append(specialization)

    def assign_course(self, course: "Course") -> None:
        """Start teaching a course. Repeated assignment is not checked."""
        self._courses.append(course)
        logger.info("Assigned course %r to teacher %d", course.name, self._id)

    def remove_course(self, course_name: str) -> None:
        """Stop teaching every course with the given name."""
        self._courses = [course for course in self._courses if course.name != course_name]

    def get_courses(self) -> List["Course"]:
        return self._courses.copy()

    def role_details(self) -> Dict[str, Any]:
        return {
            'specializations': list(self.specializations),
            'courses': [course.name for course in self._courses],
        }


class Student(Person):
    """Student with academic performance, enrolled courses and status."""

    def __init__(self, info: PersonInfoLike, *,
                 allocator: Optional[IdentityAllocator] = None,
                 default_contact: Optional[ContactInfo] = None):
        super().__init__(info, Role.STUDENT, allocator=allocator, default_contact=default_contact)
        self.academic_performance = AcademicPerformance()
        self._enrolled_courses: List["Course"] = []
        self._status = AcademicStatus.ACTIVE

    @property
    def status(self) -> AcademicStatus:
        return self._status

    def enroll_course(self, course: "Course") -> None:
        """Enroll in a course and collect its credits.

        Only active students may enroll. Enrolling twice in the same course
        is allowed and counts its credits twice.

        Raises:
            EnrollmentError: If the student is not in active status.
        """
        if self._status != AcademicStatus.ACTIVE:
            raise EnrollmentError(
                "Cannot enroll: Student is not in active status",
                error_code="student_not_active",
                details={'student_id': self._id, 'status': self._status.value},
            )

        self._enrolled_courses.append(course)
        self.academic_performance.total_credits += course.credits
        logger.info("Student %d enrolled in %r", self._id, course.name)

    def get_average_score(self) -> float:
        return self.academic_performance.gpa

    def set_gpa(self, gpa: float) -> None:
        """Update GPA."""
        if not 0.0 <= gpa <= 4.0:
            raise ValidationError("GPA must be between 0.0 and 4.0", details={'gpa': gpa})
        self.academic_performance.gpa = gpa

    def update_academic_status(self, new_status: AcademicStatus) -> None:
        """Overwrite the status. Any status may follow any other."""
        self._status = AcademicStatus(new_status)
        logger.debug("Student %d status set to %s", self._id, self._status.value)

    def get_enrolled_courses(self) -> List["Course"]:
        return self._enrolled_courses.copy()

    def role_details(self) -> Dict[str, Any]:
        return {
            'status': self._status.value,
            'academic_performance': self.academic_performance.model_dump(),
            'enrolled_courses': [course.name for course in self._enrolled_courses],
        }
