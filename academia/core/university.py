"""
University registry: the composition root of the model.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from .academics import Course, Group
from .enums import Role
from .exceptions import assert_never
from .identity import IdentityAllocator, default_allocator
from .models import DEFAULT_CONTACT, ContactInfo
from .people import Person, PersonInfoLike, Student, Teacher

if TYPE_CHECKING:
    from ..config import AcademiaConfig

logger = logging.getLogger(__name__)


class University:
    """Registry of courses, groups and people.

    The university holds shared references only; registering an entity does
    not check that the entities it refers to are registered too. People
    built through create_student()/create_teacher() draw their ids from the
    university's allocator.
    """

    def __init__(self, name: str, *, allocator: Optional[IdentityAllocator] = None,
                 default_contact: Optional[ContactInfo] = None):
        self._name = name
        self._allocator = allocator or default_allocator()
        self._default_contact = default_contact or DEFAULT_CONTACT
        self._courses: List[Course] = []
        self._groups: List[Group] = []
        self._people: List[Person] = []

    @classmethod
    def from_config(cls, config: "AcademiaConfig") -> "University":
        """Build an empty university with its own allocator from configuration."""
        return cls(
            config.university_name,
            allocator=IdentityAllocator(config.id_start),
            default_contact=config.default_contact,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def allocator(self) -> IdentityAllocator:
        return self._allocator

    @property
    def courses(self) -> List[Course]:
        return self._courses.copy()

    @property
    def groups(self) -> List[Group]:
        return self._groups.copy()

    @property
    def people(self) -> List[Person]:
        return self._people.copy()

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        logger.debug("Registered course %r", course.name)

    def add_group(self, group: Group) -> None:
        self._groups.append(group)
        logger.debug("Registered group %r", group.name)

    def add_person(self, person: Person) -> None:
        self._people.append(person)
        logger.debug("Registered %s %d", person.role.value, person.id)

    def create_student(self, info: PersonInfoLike) -> Student:
        """Create, register and return a student."""
        student = Student(info, allocator=self._allocator, default_contact=self._default_contact)
        self.add_person(student)
        return student

    def create_teacher(self, info: PersonInfoLike, specializations: Optional[Iterable[str]] = None) -> Teacher:
        """Create, register and return a teacher."""
        teacher = Teacher(info, specializations, allocator=self._allocator,
                          default_contact=self._default_contact)
        self.add_person(teacher)
        return teacher

    def find_group_by_course(self, course: Course) -> Optional[Group]:
        """Return the first registered group studying this course, or None."""
        for group in self._groups:
            if group.course is course:
                return group
        return None

    def find_person_by_id(self, person_id: int) -> Optional[Person]:
        for person in self._people:
            if person.id == person_id:
                return person
        return None

    def get_all_people_by_role(self, role: Role) -> List[Person]:
        """Return registered people with the given role, in registration order.

        Raises:
            UnhandledVariantError: If role is not a member of Role.
        """
        if role == Role.STUDENT:
            return [person for person in self._people if person.role == Role.STUDENT]
        elif role == Role.TEACHER:
            return [person for person in self._people if person.role == Role.TEACHER]
        else:
            assert_never(role, "role")

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        return {
            'courses': len(self._courses),
            'groups': len(self._groups),
            'students': len(self.get_all_people_by_role(Role.STUDENT)),
            'teachers': len(self.get_all_people_by_role(Role.TEACHER)),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert university to dictionary."""
        return {
            'name': self._name,
            'courses': [course.to_dict() for course in self._courses],
            'groups': [group.to_dict() for group in self._groups],
            'people': [person.to_dict() for person in self._people],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
