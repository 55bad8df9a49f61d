"""
Pytest fixtures for course graph tests.
"""

import pytest

from coursegraph import Catalog, Course, build_graph


def make_course(course_id: str, prerequisites=None, **fields) -> Course:
    """Create a course with sensible defaults for the remaining fields."""
    defaults = {
        "name": f"Course {course_id}",
        "semester": "Fall",
        "year": "1",
        "mandatory": True,
        "description": "",
    }
    defaults.update(fields)
    return Course(id=course_id, prerequisites=prerequisites, **defaults)


def make_catalog(*courses: Course, **fields) -> Catalog:
    return Catalog(courses=list(courses), **fields)


@pytest.fixture
def chain_catalog() -> Catalog:
    """A <- B <- C."""
    return make_catalog(
        make_course("A"),
        make_course("B", ["A"]),
        make_course("C", ["B"]),
    )


@pytest.fixture
def mutual_catalog() -> Catalog:
    """A and B require each other."""
    return make_catalog(
        make_course("A", ["B"]),
        make_course("B", ["A"]),
    )


@pytest.fixture
def merge_catalog() -> Catalog:
    """C requires both A and B."""
    return make_catalog(
        make_course("A"),
        make_course("B"),
        make_course("C", ["A", "B"]),
    )


@pytest.fixture
def skip_catalog() -> Catalog:
    """D requires A directly and, through B and C, transitively."""
    return make_catalog(
        make_course("A"),
        make_course("B", ["A"]),
        make_course("C", ["B"]),
        make_course("D", ["A", "C"]),
    )


@pytest.fixture
def chain_graph(chain_catalog):
    return build_graph(chain_catalog)


@pytest.fixture
def catalog_json() -> dict:
    """A catalog in the import file format (camelCase keys)."""
    return {
        "courses": [
            {
                "id": "MATH101",
                "name": "Calculus I",
                "credits": 5,
                "semester": "Fall",
                "year": "1",
                "mandatory": True,
                "description": "Limits and derivatives",
            },
            {
                "id": "MATH102",
                "name": "Calculus II",
                "credits": 5,
                "semester": "Spring",
                "year": "1",
                "mandatory": True,
                "prerequisites": ["MATH101"],
                "description": "Integrals",
                "requiredKnowledge": ["derivatives"],
            },
            {
                "id": "CS201",
                "name": "Numerical Methods",
                "credits": 4,
                "semester": "Fall",
                "year": "2",
                "mandatory": False,
                "prerequisites": ["MATH101", "MATH102"],
                "description": "Floating point and solvers",
                "alternativePrerequisites": "Instructor consent",
            },
            {
                "id": "ENG100",
                "name": "Technical Writing",
                "semester": "Spring",
                "year": "1",
                "mandatory": False,
                "description": "Reports",
            },
        ],
        "requirements": [
            {
                "title": "Core",
                "type": "allOf",
                "groups": [{"title": "Math", "courses": ["MATH101", "MATH102"]}],
            }
        ],
        "metadata": {"department": "Engineering", "lastUpdated": "2024-09-01", "totalCourses": 4},
    }
