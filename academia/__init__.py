"""
academia: an in-process model of a university's academic records.

People (students and teachers), courses, groups and the enrollment and
assignment relationships between them, with the validation rules that
govern those relationships.
"""

__version__ = "1.0.0"
__author__ = "Academia Development Team"
__description__ = "In-process model of university academic records"

from .core import *  # noqa: E402,F401,F403
from .core import __all__ as _core_all  # noqa: E402
from .logging import setup_logging  # noqa: E402

__all__ = list(_core_all) + ["setup_logging"]
