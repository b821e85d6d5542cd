"""
Services module containing result-returning operations over the model.
"""

from .enrollment_service import EnrollmentService, EnrollmentResult

__all__ = [
    "EnrollmentService",
    "EnrollmentResult",
]
