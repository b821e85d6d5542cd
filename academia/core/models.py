"""
Pydantic value models for person data.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import Gender


class ContactInfo(BaseModel):
    """Email and phone of a person. Field defaults are the university's."""

    model_config = ConfigDict(frozen=True)

    email: str = "info@university.com"
    phone: str = "+380955555555"


DEFAULT_CONTACT = ContactInfo()


class PersonInfo(BaseModel):
    """Personal data bundle a person is constructed from.

    Contact fields are optional; omitted ones fall back to a default contact
    when the person is built. Formats are not checked here.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    birth_day: date
    gender: Gender
    email: Optional[str] = None
    phone: Optional[str] = None

    def contact_info(self, default: ContactInfo = DEFAULT_CONTACT) -> ContactInfo:
        """Resolve contact details, substituting defaults for missing fields."""
        return ContactInfo(
            email=self.email if self.email is not None else default.email,
            phone=self.phone if self.phone is not None else default.phone,
        )


class AcademicPerformance(BaseModel):
    """Credits earned and grade-point average of a student."""

    model_config = ConfigDict(validate_assignment=True)

    total_credits: int = Field(0, ge=0)
    gpa: float = 0.0
