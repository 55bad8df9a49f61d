"""
Directional adjacency lookups used by the layout and the details panel.
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import PrerequisiteEdge


def get_dependent_courses(edges: Iterable["PrerequisiteEdge"], course_id: str) -> list[str]:
    """Courses that list `course_id` as a prerequisite, in edge order."""
    return [edge.target for edge in edges if edge.source == course_id]


def get_prerequisite_courses(edges: Iterable["PrerequisiteEdge"], course_id: str) -> list[str]:
    """Direct prerequisites of `course_id`, in edge order."""
    return [edge.source for edge in edges if edge.target == course_id]
