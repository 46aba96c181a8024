"""
Query services package.

WHY: Services hold the query rules separately from the record model, so the
same Student type can be used with any StudentQuery implementation.
"""

from student_db.services.base import StudentQuery
from student_db.services.student_query import StudentQueryService

__all__ = ["StudentQuery", "StudentQueryService"]
