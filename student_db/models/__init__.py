"""
Models package.

WHY: Centralizing model imports lets callers write
``from student_db.models import Student``.
"""

from student_db.models.student import Student

__all__ = ["Student"]
