"""
Catalog analysis - Graph analysis and summarization utilities.

Provides the figures shown next to the prerequisite graph: course counts,
credit totals, depth of the longest prerequisite chain and the most
connected courses.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .builder import build_graph
from .layout import LayoutError, assign_levels

if TYPE_CHECKING:
    from .models import Catalog


@dataclass
class ConnectedComponent:
    """A group of courses linked by prerequisite relations."""
    course_ids: list[str] = field(default_factory=list)
    edge_count: int = 0

    @property
    def size(self) -> int:
        return len(self.course_ids)


@dataclass
class CourseConnectionInfo:
    """Connection information for a single course."""
    course_id: str
    name: str
    prerequisites: int = 0  # Edges pointing to this course
    dependents: int = 0     # Edges pointing from this course

    @property
    def total(self) -> int:
        return self.prerequisites + self.dependents


@dataclass
class CatalogSummary:
    """Complete summary of a catalog's structure."""
    department: Optional[str]
    total_courses: int
    total_edges: int
    mandatory_courses: int
    elective_courses: int
    total_credits: float
    courses_by_semester: dict[str, int]
    courses_by_year: dict[str, int]
    root_count: int
    leaf_count: int
    isolated_count: int
    max_level: Optional[int]  # None when the graph cannot be leveled
    connected_components: int
    most_connected_courses: list[CourseConnectionInfo]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "department": self.department,
            "total_courses": self.total_courses,
            "total_edges": self.total_edges,
            "mandatory_courses": self.mandatory_courses,
            "elective_courses": self.elective_courses,
            "total_credits": self.total_credits,
            "courses_by_semester": self.courses_by_semester,
            "courses_by_year": self.courses_by_year,
            "root_count": self.root_count,
            "leaf_count": self.leaf_count,
            "isolated_count": self.isolated_count,
            "max_level": self.max_level,
            "connected_components": self.connected_components,
            "most_connected_courses": [
                {
                    "id": c.course_id,
                    "name": c.name,
                    "connections": c.total,
                    "prerequisites": c.prerequisites,
                    "dependents": c.dependents
                }
                for c in self.most_connected_courses
            ]
        }


def find_connected_components(catalog: "Catalog") -> list[ConnectedComponent]:
    """
    Find all connected components of the prerequisite graph using BFS.

    Edges are treated as undirected; edges to unknown courses are ignored.
    `edge_count` is the number of prerequisite edges inside the component,
    repeated entries and self-references included.

    Args:
        catalog: The catalog to analyze

    Returns:
        List of ConnectedComponent objects, in catalog order of their first course
    """
    if not catalog.courses:
        return []

    course_ids = [c.id for c in catalog.courses]
    known = set(course_ids)
    edges = [
        e for e in build_graph(catalog).edges
        if e.source in known and e.target in known
    ]

    # Build adjacency list (undirected, in edge order)
    adjacency: dict[str, list[str]] = {cid: [] for cid in course_ids}
    for edge in edges:
        if edge.target not in adjacency[edge.source]:
            adjacency[edge.source].append(edge.target)
        if edge.source not in adjacency[edge.target]:
            adjacency[edge.target].append(edge.source)

    component_of: dict[str, ConnectedComponent] = {}
    components: list[ConnectedComponent] = []

    for start in course_ids:
        if start in component_of:
            continue

        component = ConnectedComponent()
        components.append(component)
        component_of[start] = component
        queue = deque([start])

        while queue:
            current = queue.popleft()
            component.course_ids.append(current)

            for neighbor in adjacency[current]:
                if neighbor not in component_of:
                    component_of[neighbor] = component
                    queue.append(neighbor)

    for edge in edges:
        component_of[edge.source].edge_count += 1

    return components


def calculate_course_connections(catalog: "Catalog") -> dict[str, CourseConnectionInfo]:
    """
    Calculate prerequisite and dependent counts for all courses.

    Args:
        catalog: The catalog to analyze

    Returns:
        Dictionary mapping course id to CourseConnectionInfo
    """
    connections: dict[str, CourseConnectionInfo] = {}
    for course in catalog.courses:
        connections[course.id] = CourseConnectionInfo(
            course_id=course.id,
            name=course.name
        )

    for edge in build_graph(catalog).edges:
        if edge.source in connections:
            connections[edge.source].dependents += 1
        if edge.target in connections:
            connections[edge.target].prerequisites += 1

    return connections


def summarize_catalog(catalog: "Catalog", top_n: int = 5) -> CatalogSummary:
    """
    Generate a comprehensive summary of a catalog.

    Args:
        catalog: The catalog to summarize
        top_n: Number of top connected courses to include

    Returns:
        CatalogSummary object with all analysis results
    """
    courses = catalog.courses
    graph = build_graph(catalog)

    semester_counts: dict[str, int] = defaultdict(int)
    year_counts: dict[str, int] = defaultdict(int)
    for course in courses:
        semester_counts[course.semester] += 1
        year_counts[course.year] += 1

    mandatory = sum(1 for c in courses if c.mandatory)
    total_credits = sum(c.credits or 0 for c in courses)

    connections = calculate_course_connections(catalog)

    try:
        levels = assign_levels(graph.nodes, graph.edges)
        max_level = max(levels.values(), default=None)
    except LayoutError:
        max_level = None

    sorted_by_connections = sorted(
        connections.values(),
        key=lambda c: c.total,
        reverse=True
    )
    most_connected = [c for c in sorted_by_connections[:top_n] if c.total > 0]

    return CatalogSummary(
        department=catalog.metadata.department if catalog.metadata else None,
        total_courses=len(courses),
        total_edges=len(graph.edges),
        mandatory_courses=mandatory,
        elective_courses=len(courses) - mandatory,
        total_credits=total_credits,
        courses_by_semester=dict(semester_counts),
        courses_by_year=dict(year_counts),
        root_count=sum(1 for c in connections.values() if c.prerequisites == 0 and c.dependents > 0),
        leaf_count=sum(1 for c in connections.values() if c.dependents == 0 and c.prerequisites > 0),
        isolated_count=sum(1 for c in connections.values() if c.total == 0),
        max_level=max_level,
        connected_components=len(find_connected_components(catalog)),
        most_connected_courses=most_connected
    )
