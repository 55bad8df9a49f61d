"""
Cycle detection over prerequisite edges using Kahn's algorithm.

Only ids that appear in at least one edge take part; a course without any
prerequisite relation can never be part of a cycle.
"""

from collections import deque
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import PrerequisiteEdge


def unresolved_courses(edges: Iterable["PrerequisiteEdge"]) -> list[str]:
    """
    Return the ids a topological traversal of the edges cannot reach.

    These are the members of every cycle plus everything downstream of one.
    Ids are returned in order of first appearance in the edge list.

    Args:
        edges: Prerequisite edges to inspect

    Returns:
        List of course ids left with a positive in-degree
    """
    adjacency: dict[str, list[str]] = {}
    in_degree: dict[str, int] = {}

    # Collect all ids, keeping first-appearance order
    edges = list(edges)
    for edge in edges:
        for node_id in (edge.source, edge.target):
            if node_id not in adjacency:
                adjacency[node_id] = []
                in_degree[node_id] = 0

    for edge in edges:
        adjacency[edge.source].append(edge.target)
        in_degree[edge.target] += 1

    queue = deque(node_id for node_id, degree in in_degree.items() if degree == 0)
    visited: set[str] = set()

    while queue:
        node_id = queue.popleft()
        visited.add(node_id)

        for neighbor in adjacency[node_id]:
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    return [node_id for node_id in adjacency if node_id not in visited]


def has_cycle(edges: Iterable["PrerequisiteEdge"]) -> bool:
    """Check whether the prerequisite edges contain a cycle."""
    return bool(unresolved_courses(edges))
