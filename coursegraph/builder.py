"""
Graph construction - turn a catalog into course nodes and prerequisite edges.
"""

import logging
from typing import TYPE_CHECKING

from .models import CourseGraph, CourseNode, PrerequisiteEdge

if TYPE_CHECKING:
    from .models import Catalog

logger = logging.getLogger(__name__)


def build_graph(catalog: "Catalog") -> CourseGraph:
    """
    Build the prerequisite graph for a catalog.

    One node is emitted per course (in catalog order) and one edge per entry
    of each prerequisite list, pointing from the prerequisite to the course
    that requires it. Prerequisite ids are not checked against the catalog,
    so edges may reference courses that have no node.

    Args:
        catalog: The catalog to convert

    Returns:
        CourseGraph with unpositioned nodes and the edge list
    """
    nodes = [CourseNode(id=course.id, course=course) for course in catalog.courses]

    edges: list[PrerequisiteEdge] = []
    for course in catalog.courses:
        for prereq_id in course.prerequisites or []:
            edges.append(PrerequisiteEdge.between(prereq_id, course.id))

    logger.debug("Built graph with %d nodes and %d edges", len(nodes), len(edges))
    return CourseGraph(nodes=nodes, edges=edges)
