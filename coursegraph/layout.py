"""
Layered layout for prerequisite graphs.

Nodes are assigned to levels by a breadth-first variant of Kahn's algorithm
and then placed on a grid:
- Level: longest prerequisite chain leading to the course (roots are level 0)
- Slot: position among the nodes of the same level, in input order

Layout functions never modify their inputs; positioned copies are returned.
"""

import logging
from collections import defaultdict, deque
from typing import TYPE_CHECKING, Optional, Union

from .builder import build_graph
from .config import LayoutConfig
from .models import Connector, CourseGraph, LayoutDirection, Position

if TYPE_CHECKING:
    from .models import Catalog, CourseNode, PrerequisiteEdge

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Base class for layout failures."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON error responses."""
        return {"detail": str(self)}


class CycleDetectedError(LayoutError):
    """The prerequisite graph cannot be ordered topologically."""

    def __init__(self, unresolved: list[str]):
        self.unresolved = tuple(unresolved)
        super().__init__("Cycle detected in prerequisite graph")

    def to_dict(self) -> dict:
        return {"detail": str(self), "unresolved": list(self.unresolved)}


class DuplicateCourseError(LayoutError):
    """Two or more nodes share a course id."""

    def __init__(self, duplicates: list[str]):
        self.duplicates = tuple(duplicates)
        super().__init__(f"Duplicate course ids in graph: {', '.join(self.duplicates)}")

    def to_dict(self) -> dict:
        return {"detail": str(self), "duplicates": list(self.duplicates)}


def assign_levels(
    nodes: list["CourseNode"],
    edges: list["PrerequisiteEdge"]
) -> dict[str, int]:
    """
    Assign a topological level to every node.

    The worklist is processed in passes. Each pass bumps the current level
    once, and every neighbor reached during the pass is raised to at least
    that level, so a node ends up one below its deepest predecessor rather
    than its first-discovered one.

    Edge endpoints missing from `nodes` still count towards in-degrees. A node
    fed by a missing source therefore never becomes ready and is reported as
    unresolved.

    Args:
        nodes: Nodes to level
        edges: Prerequisite edges between them

    Returns:
        Dictionary mapping node id to level

    Raises:
        DuplicateCourseError: If two nodes share an id
        CycleDetectedError: If some node could not be visited
    """
    # Ids key every lookup below, so they must be unique
    seen: set[str] = set()
    duplicates: list[str] = []
    for node in nodes:
        if node.id in seen and node.id not in duplicates:
            duplicates.append(node.id)
        seen.add(node.id)
    if duplicates:
        raise DuplicateCourseError(duplicates)

    adjacency: dict[str, list[str]] = {n.id: [] for n in nodes}
    in_degree: dict[str, int] = {n.id: 0 for n in nodes}
    levels: dict[str, int] = {n.id: 0 for n in nodes}

    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge.target)
        in_degree[edge.target] = in_degree.get(edge.target, 0) + 1
        levels.setdefault(edge.target, 0)

    # Roots sit at level 0
    queue = deque(n.id for n in nodes if in_degree[n.id] == 0)
    visited: set[str] = set()
    current_level = 0

    while queue:
        level_size = len(queue)
        current_level += 1

        for _ in range(level_size):
            node_id = queue.popleft()
            visited.add(node_id)

            for neighbor in adjacency.get(node_id, []):
                levels[neighbor] = max(levels[neighbor], current_level)
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

    unresolved = [n.id for n in nodes if n.id not in visited]
    if unresolved:
        logger.warning(
            "Layout aborted: %d of %d courses are on or behind a prerequisite cycle",
            len(unresolved), len(nodes)
        )
        raise CycleDetectedError(unresolved)

    return {n.id: levels[n.id] for n in nodes}


def layout_elements(
    nodes: list["CourseNode"],
    edges: list["PrerequisiteEdge"],
    direction: Union[LayoutDirection, str] = LayoutDirection.TOP_TO_BOTTOM,
    config: Optional[LayoutConfig] = None
) -> list["CourseNode"]:
    """
    Position nodes in layers.

    Args:
        nodes: Nodes to position (input order decides slot order)
        edges: Prerequisite edges
        direction: TB (levels go down) or LR (levels go right)
        config: Node size and gap settings (defaults to 240x84, gaps 40/80)

    Returns:
        New list of nodes with position, level and connectors set

    Raises:
        DuplicateCourseError: If two nodes share an id
        CycleDetectedError: If the graph is not acyclic
    """
    direction = LayoutDirection(direction)
    config = config or LayoutConfig()

    levels = assign_levels(nodes, edges)
    connectors = Connector.for_direction(direction)

    # Track slot within each level
    level_slots: dict[int, int] = defaultdict(int)
    positioned: list["CourseNode"] = []

    for node in nodes:
        level = levels[node.id]
        slot = level_slots[level]
        level_slots[level] += 1

        if direction == LayoutDirection.TOP_TO_BOTTOM:
            x = slot * config.column_step
            y = level * config.row_step
        else:
            x = level * config.column_step
            y = slot * config.row_step

        positioned.append(node.model_copy(update={
            "position": Position(x=x, y=y),
            "level": level,
            "connectors": connectors,
        }))

    logger.debug(
        "Laid out %d nodes on %d levels (%s)",
        len(positioned), len(level_slots), direction.value
    )
    return positioned


def layout_catalog(
    catalog: "Catalog",
    direction: Union[LayoutDirection, str] = LayoutDirection.TOP_TO_BOTTOM,
    config: Optional[LayoutConfig] = None
) -> CourseGraph:
    """Build the graph for a catalog and lay it out in one step."""
    graph = build_graph(catalog)
    nodes = layout_elements(graph.nodes, graph.edges, direction, config)
    return CourseGraph(nodes=nodes, edges=graph.edges)
