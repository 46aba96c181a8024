"""
Student query service.

WHAT: Projections, orderings and grouped lookups over an in-memory
collection of students.

WHY: Every caller that needs "students of group X sorted by name" or "the
list of distinct first names" gets the same ordering rules and the same
empty-input behaviour from one place.

HOW: Plain passes over the input: list comprehensions for projections,
``sorted()`` with explicit key functions for orderings (Python's sort is
stable), and a single-pass fold for the grouped minimum. The service keeps
no state; inputs are copied into new lists and never mutated.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from student_db.core.config import Settings, settings as default_settings
from student_db.core.exceptions import (
    InvalidQueryArgumentError,
    InvalidStudentRecordError,
)
from student_db.models.student import Student
from student_db.services.base import StudentQuery

logger = logging.getLogger(__name__)


NameKey = Tuple[str, str, int]


def id_key(student: Student) -> int:
    """Natural order: ascending id."""
    return student.id


def name_key(student: Student) -> NameKey:
    """
    Composite name order.

    Last name first, ties broken by first name, then by id. Tuples compare
    element by element, so each later key only matters when the earlier
    ones are equal.
    """
    return (student.last_name, student.first_name, student.id)


class StudentQueryService(StudentQuery):
    """
    Stateless implementation of StudentQuery.

    WHAT: Read-only queries over caller-owned student collections.

    WHY: Keeping the rules (separator for full names, composite sort key,
    "smallest first name wins" merge) in one class means every view of the
    data orders and groups students the same way.

    HOW: Each public method materializes its input once, optionally checks
    every element is a Student, and builds a fresh result. An instance can
    be shared freely between threads since it never writes to itself after
    construction.

    Example:
        service = StudentQueryService()
        roster = service.find_students_by_group(students, "M3239")
        names = service.find_student_names_by_group(students, "M3239")
    """

    FULL_NAME_SEPARATOR = " "

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the service.

        Args:
            settings: Overrides the module-level settings (STRICT_INPUT_CHECKS)
        """
        self._settings = settings or default_settings

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def get_first_names(self, students: Sequence[Student]) -> List[str]:
        """
        Returns student first names.

        Args:
            students: Students to project

        Returns:
            First names in input order, one per student
        """
        return self._project(students, lambda s: s.first_name, "get_first_names")

    def get_last_names(self, students: Sequence[Student]) -> List[str]:
        """Returns student last names, one per student in input order."""
        return self._project(students, lambda s: s.last_name, "get_last_names")

    def get_groups(self, students: Sequence[Student]) -> List[str]:
        """Returns student groups, one per student in input order."""
        return self._project(students, lambda s: s.group, "get_groups")

    def get_full_names(self, students: Sequence[Student]) -> List[str]:
        """
        Returns student full names.

        Full name is the first name and last name joined by a single space,
        e.g. ``"Ann Lee"``.
        """
        separator = self.FULL_NAME_SEPARATOR
        return self._project(
            students,
            lambda s: s.first_name + separator + s.last_name,
            "get_full_names",
        )

    def get_distinct_first_names(self, students: Sequence[Student]) -> List[str]:
        """
        Returns distinct first names in alphabetical order.

        WHAT: Ordered-set view of first names.

        HOW: Deduplicate through a set, then sort. The result is strictly
        ascending, so it doubles as a sorted set.

        Args:
            students: Students to read

        Returns:
            Sorted list of unique first names (empty for empty input)
        """
        records = self._materialize(students)
        result = sorted({student.first_name for student in records})
        logger.debug(
            f"get_distinct_first_names: {len(records)} students -> {len(result)} names"
        )
        return result

    def get_min_student_first_name(self, students: Sequence[Student]) -> str:
        """
        Returns the first name of the student with the minimal id.

        Args:
            students: Students to search

        Returns:
            First name of the lowest-id student, or "" if there are none
        """
        records = self._materialize(students)
        if not records:
            logger.debug("get_min_student_first_name: empty input")
            return ""
        return min(records, key=id_key).first_name

    # ------------------------------------------------------------------
    # Orderings
    # ------------------------------------------------------------------

    def sort_students_by_id(self, students: Iterable[Student]) -> List[Student]:
        """Returns a new list of the students ordered by ascending id."""
        records = self._materialize(students)
        logger.debug(f"sort_students_by_id: {len(records)} students")
        return sorted(records, key=id_key)

    def sort_students_by_name(self, students: Iterable[Student]) -> List[Student]:
        """
        Returns students sorted by name.

        Students are ordered by last name; equal last names are ordered by
        first name; equal full names are ordered by id.
        """
        records = self._materialize(students)
        logger.debug(f"sort_students_by_name: {len(records)} students")
        return sorted(records, key=name_key)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_students_by_first_name(
        self, students: Iterable[Student], name: str
    ) -> List[Student]:
        """Returns students whose first name equals ``name``, sorted by name."""
        self._require_str("name", name)
        return self._find(students, lambda s: s.first_name == name, "first_name")

    def find_students_by_last_name(
        self, students: Iterable[Student], name: str
    ) -> List[Student]:
        """Returns students whose last name equals ``name``, sorted by name."""
        self._require_str("name", name)
        return self._find(students, lambda s: s.last_name == name, "last_name")

    def find_students_by_group(
        self, students: Iterable[Student], group: str
    ) -> List[Student]:
        """Returns students in ``group``, sorted by name."""
        self._require_str("group", group)
        return self._find(students, lambda s: s.group == group, "group")

    def find_student_names_by_group(
        self, students: Iterable[Student], group: str
    ) -> Dict[str, str]:
        """
        Returns the group's last names mapped to their minimal first name.

        WHAT: For every last name present in ``group``, the alphabetically
        smallest first name carried by a student with that last name.

        HOW: Single pass. A mapping entry is written when the last name is
        new or when the incoming first name is smaller than the stored one,
        so the result does not depend on input order.

        Args:
            students: Students to search
            group: Group to restrict to (exact match)

        Returns:
            Dict of last name -> smallest first name (empty if no match)

        Example:
            >>> service.find_student_names_by_group(students, "A")
            {"Lee": "Ann"}
        """
        self._require_str("group", group)
        records = self._materialize(students)

        names: Dict[str, str] = {}
        for student in records:
            if student.group != group:
                continue
            current = names.get(student.last_name)
            if current is None or student.first_name < current:
                names[student.last_name] = student.first_name

        logger.debug(
            f"find_student_names_by_group: group={group!r}, "
            f"{len(records)} students -> {len(names)} last names"
        )
        return names

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _project(
        self,
        students: Sequence[Student],
        field: Callable[[Student], str],
        operation: str,
    ) -> List[str]:
        records = self._materialize(students)
        logger.debug(f"{operation}: {len(records)} students")
        return [field(student) for student in records]

    def _find(
        self,
        students: Iterable[Student],
        predicate: Callable[[Student], bool],
        field_name: str,
    ) -> List[Student]:
        records = self._materialize(students)
        matched = sorted(
            (student for student in records if predicate(student)), key=name_key
        )
        logger.debug(
            f"find by {field_name}: {len(records)} students -> {len(matched)} matches"
        )
        return matched

    def _materialize(self, students: Iterable[Student]) -> List[Student]:
        """
        Copy the input into a list, checking element types when strict.

        Raises:
            InvalidStudentRecordError: If an element is not a Student
        """
        records = list(students)
        if self._settings.STRICT_INPUT_CHECKS:
            for index, record in enumerate(records):
                if not isinstance(record, Student):
                    received_type = type(record).__name__
                    logger.warning(
                        f"Rejected non-student record at index {index}: {received_type}"
                    )
                    raise InvalidStudentRecordError(
                        index=index, received_type=received_type
                    )
        return records

    @staticmethod
    def _require_str(argument: str, value: Any) -> None:
        if not isinstance(value, str):
            received_type = type(value).__name__
            logger.warning(f"Rejected {argument} argument of type {received_type}")
            raise InvalidQueryArgumentError(
                message=f"{argument} must be a string",
                argument=argument,
                received_type=received_type,
            )
