"""
Core module containing the university object model.
"""

from .enums import *
from .exceptions import *
from .identity import *
from .models import *
from .people import *
from .academics import *
from .university import *

__all__ = [
    # Enums
    "Role",
    "Gender",
    "Discipline",
    "AcademicStatus",
    "EnrollmentOutcome",

    # Exceptions
    "UniversityError",
    "ValidationError",
    "DuplicateEntityError",
    "ResourceNotFoundError",
    "EnrollmentError",
    "ConfigurationError",
    "UnhandledVariantError",
    "assert_never",

    # Identity
    "IdentityAllocator",
    "default_allocator",

    # Value models
    "ContactInfo",
    "PersonInfo",
    "AcademicPerformance",
    "DEFAULT_CONTACT",

    # Entities
    "Person",
    "Teacher",
    "Student",
    "Course",
    "Group",
    "University",
]
