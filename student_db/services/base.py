"""
StudentQuery contract.

WHAT: Abstract interface listing every query the package offers.

WHY: Callers can depend on the contract rather than the concrete service,
and test doubles only need to subclass it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Sequence

from student_db.models.student import Student


class StudentQuery(ABC):
    """Read-only queries over a collection of students."""

    @abstractmethod
    def get_first_names(self, students: Sequence[Student]) -> List[str]:
        """Returns student first names, in input order."""

    @abstractmethod
    def get_last_names(self, students: Sequence[Student]) -> List[str]:
        """Returns student last names, in input order."""

    @abstractmethod
    def get_groups(self, students: Sequence[Student]) -> List[str]:
        """Returns student groups, in input order."""

    @abstractmethod
    def get_full_names(self, students: Sequence[Student]) -> List[str]:
        """Returns "first last" full names, in input order."""

    @abstractmethod
    def get_distinct_first_names(self, students: Sequence[Student]) -> List[str]:
        """Returns distinct first names in ascending order."""

    @abstractmethod
    def get_min_student_first_name(self, students: Sequence[Student]) -> str:
        """Returns the first name of the student with minimal id, or ""."""

    @abstractmethod
    def sort_students_by_id(self, students: Iterable[Student]) -> List[Student]:
        """Returns students sorted by id."""

    @abstractmethod
    def sort_students_by_name(self, students: Iterable[Student]) -> List[Student]:
        """Returns students sorted by last name, first name, then id."""

    @abstractmethod
    def find_students_by_first_name(
        self, students: Iterable[Student], name: str
    ) -> List[Student]:
        """Returns students with the given first name, sorted by name."""

    @abstractmethod
    def find_students_by_last_name(
        self, students: Iterable[Student], name: str
    ) -> List[Student]:
        """Returns students with the given last name, sorted by name."""

    @abstractmethod
    def find_students_by_group(
        self, students: Iterable[Student], group: str
    ) -> List[Student]:
        """Returns students in the given group, sorted by name."""

    @abstractmethod
    def find_student_names_by_group(
        self, students: Iterable[Student], group: str
    ) -> Dict[str, str]:
        """Returns the group's last names mapped to their minimal first name."""
