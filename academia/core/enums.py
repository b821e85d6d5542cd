"""
Enumerations and constants for the academia model.
"""

from enum import Enum


class Role(str, Enum):
    """Role tag of a person."""
    STUDENT = "student"
    TEACHER = "teacher"


class Gender(str, Enum):
    """Gender of a person."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Discipline(str, Enum):
    """Subject area of a course."""
    COMPUTER_SCIENCE = "Computer Science"
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    BIOLOGY = "Biology"
    CHEMISTRY = "Chemistry"


class AcademicStatus(str, Enum):
    """Enrollment standing of a student."""
    ACTIVE = "active"
    ACADEMIC_LEAVE = "academic leave"
    GRADUATED = "graduated"
    EXPELLED = "expelled"


class EnrollmentOutcome(Enum):
    """Outcome of an enrollment service operation."""
    CONFIRMED = "confirmed"
    REMOVED = "removed"
    UPDATED = "updated"
    REJECTED = "rejected"
