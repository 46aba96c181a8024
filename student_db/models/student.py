"""
Student record model.

WHAT: Immutable value object for a single student.

WHY: Queries are pure reads, so the record type is frozen: nothing in the
package can change a student after the caller built it, and records are
hashable for use in sets and dict keys.

HOW: A frozen pydantic model. Field aliases (firstName, lastName) match the
naming used by upstream data sources; Python code uses snake_case names.
Ordering operators compare by id only ("natural order"); equality stays
field-wise.
"""

from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    """
    A student record.

    Fields:
    - id: Unique within any collection handed to the query service
    - first_name: Given name (alias ``firstName``)
    - last_name: Family name (alias ``lastName``)
    - group: Study group label

    Example:
        >>> Student(id=1, first_name="Ann", last_name="Lee", group="A")
        >>> Student.model_validate({"id": 1, "firstName": "Ann", "lastName": "Lee", "group": "A"})
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Unique student identifier")
    first_name: str = Field(..., alias="firstName", description="First name")
    last_name: str = Field(..., alias="lastName", description="Last name")
    group: str = Field(..., description="Study group")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id < other.id

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id <= other.id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id > other.id

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id >= other.id

    @property
    def full_name(self) -> str:
        """First and last name separated by a single space."""
        return f"{self.first_name} {self.last_name}"
