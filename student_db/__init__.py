"""
student_db: read-only queries over in-memory student records.

Example:
    >>> from student_db import Student, StudentQueryService
    >>> service = StudentQueryService()
    >>> service.get_full_names([Student(id=1, first_name="Ann", last_name="Lee", group="A")])
    ['Ann Lee']
"""

from student_db.core.config import Settings, settings
from student_db.core.exceptions import (
    AppException,
    InvalidQueryArgumentError,
    InvalidStudentRecordError,
    PreconditionViolation,
)
from student_db.core.logging import configure_logging
from student_db.models.student import Student
from student_db.services.base import StudentQuery
from student_db.services.student_query import StudentQueryService

__version__ = "0.1.0"

__all__ = [
    "AppException",
    "InvalidQueryArgumentError",
    "InvalidStudentRecordError",
    "PreconditionViolation",
    "Settings",
    "Student",
    "StudentQuery",
    "StudentQueryService",
    "configure_logging",
    "settings",
]
