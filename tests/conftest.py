"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup, reducing duplication and keeping
the sample data consistent across test modules.
"""

from typing import List

import pytest

from student_db.core.config import Settings
from student_db.models.student import Student
from student_db.services.student_query import StudentQueryService
from tests.factories import StudentFactory


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings isolated from the developer's environment.

    WHY: ``_env_file=None`` stops a stray .env from changing test behaviour.
    """
    return Settings(_env_file=None, STRICT_INPUT_CHECKS=True)


@pytest.fixture
def service(test_settings) -> StudentQueryService:
    """StudentQueryService with strict input checks enabled."""
    return StudentQueryService(settings=test_settings)


@pytest.fixture
def example_students() -> List[Student]:
    """
    The three-student example used throughout the docs.

    id 3 Ann Lee (A), id 1 Bob Lee (A), id 2 Ann Kim (B)
    """
    return [
        StudentFactory.create(id=3, first_name="Ann", last_name="Lee", group="A"),
        StudentFactory.create(id=1, first_name="Bob", last_name="Lee", group="A"),
        StudentFactory.create(id=2, first_name="Ann", last_name="Kim", group="B"),
    ]


@pytest.fixture
def roster() -> List[Student]:
    """
    A larger, deliberately unsorted roster.

    Contains shared last names, shared full names (Anna Smirnova twice) and
    two groups, so every ordering rule gets exercised.
    """
    return [
        StudentFactory.create(id=7, first_name="Pavel", last_name="Smirnov", group="M3238"),
        StudentFactory.create(id=4, first_name="Anna", last_name="Smirnova", group="M3239"),
        StudentFactory.create(id=9, first_name="Boris", last_name="Ivanov", group="M3239"),
        StudentFactory.create(id=2, first_name="Anna", last_name="Smirnova", group="M3238"),
        StudentFactory.create(id=5, first_name="Alexey", last_name="Ivanov", group="M3239"),
        StudentFactory.create(id=1, first_name="Yulia", last_name="Orlova", group="M3238"),
        StudentFactory.create(id=8, first_name="Anna", last_name="Ivanova", group="M3239"),
        StudentFactory.create(id=3, first_name="Zakhar", last_name="Ivanov", group="M3239"),
    ]
