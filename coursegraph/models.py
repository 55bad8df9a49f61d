"""
Core data models for course catalogs and their prerequisite graphs.

These models define the canonical schema:
- Courses with scheduling tags and an ordered prerequisite list
- Catalogs holding courses plus optional requirements and metadata
- Graph nodes and edges derived from one catalog snapshot

Field Naming Convention:
- Python attributes are snake_case
- The catalog JSON format uses camelCase for multi-word fields
  (`requiredKnowledge`, `lastUpdated`, ...); both spellings are accepted on input
- Edges use `source` (prerequisite) and `target` (dependent course)
"""

from enum import Enum, Flag
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LayoutDirection(str, Enum):
    """Orientation of the layered layout."""
    TOP_TO_BOTTOM = "TB"
    LEFT_TO_RIGHT = "LR"


class Connector(Flag):
    """Anchor points a positioned node exposes to the renderer."""
    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    VERTICAL = TOP | BOTTOM
    HORIZONTAL = LEFT | RIGHT

    @classmethod
    def for_direction(cls, direction: LayoutDirection) -> "Connector":
        if direction == LayoutDirection.TOP_TO_BOTTOM:
            return cls.VERTICAL
        return cls.HORIZONTAL

    def to_handles(self) -> dict[str, bool]:
        """Convert to the `handles` record consumed by the frontend."""
        return {
            side.name.lower(): True
            for side in (Connector.TOP, Connector.BOTTOM, Connector.LEFT, Connector.RIGHT)
            if side in self
        }


class RequirementType(str, Enum):
    """How the groups of a degree requirement combine."""
    ALL_OF = "allOf"
    N_OF = "nOf"
    GROUP = "group"


class Course(BaseModel):
    """A single course record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    credits: Optional[float] = None
    semester: str = ""
    year: str = ""
    mandatory: bool = False
    prerequisites: Optional[list[str]] = None
    description: str = ""
    corequisites: Optional[list[str]] = None
    required_knowledge: Optional[list[str]] = Field(default=None, alias="requiredKnowledge")
    notes: Optional[str] = None
    alternative_prerequisites: Optional[str] = Field(default=None, alias="alternativePrerequisites")


class RequirementGroup(BaseModel):
    """A titled group of course ids inside a requirement."""
    title: str
    n: Optional[int] = None  # minimum required for "nOf" requirements
    courses: list[str] = Field(default_factory=list)


class Requirement(BaseModel):
    """A degree requirement built from course groups."""
    title: str
    type: RequirementType
    groups: list[RequirementGroup] = Field(default_factory=list)


class CatalogMetadata(BaseModel):
    """Descriptive metadata about the catalog."""
    model_config = ConfigDict(populate_by_name=True)

    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    department: Optional[str] = None
    total_courses: Optional[int] = Field(default=None, alias="totalCourses")
    notes: Optional[list[str]] = None


class Catalog(BaseModel):
    """
    The complete catalog structure.
    This is what the import collaborator hands over after schema validation.
    """
    courses: list[Course] = Field(default_factory=list)
    requirements: Optional[list[Requirement]] = None
    metadata: Optional[CatalogMetadata] = None

    def get_course(self, course_id: str) -> Optional[Course]:
        """Get a course by ID (O(n))."""
        for course in self.courses:
            if course.id == course_id:
                return course
        return None


class Position(BaseModel):
    """Top-left corner of a node on the canvas."""
    x: float = 0
    y: float = 0


class CourseNode(BaseModel):
    """A graph node wrapping one course."""
    id: str
    course: Course
    position: Optional[Position] = None  # unset until layout
    level: Optional[int] = None
    connectors: Connector = Connector.NONE

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict in the renderer's node format."""
        position = self.position or Position()
        result = {
            "id": self.id,
            "type": "courseNode",
            "position": {"x": position.x, "y": position.y},
            "data": {
                "course": self.course.model_dump(by_alias=True, exclude_none=True),
            },
        }
        if self.level is not None:
            result["data"]["level"] = self.level
        if self.connectors:
            result["data"]["handles"] = self.connectors.to_handles()
        return result


class PrerequisiteEdge(BaseModel):
    """A directed edge from a prerequisite course to the course requiring it."""
    id: str
    source: str  # prerequisite course ID
    target: str  # dependent course ID

    @classmethod
    def between(cls, source: str, target: str) -> "PrerequisiteEdge":
        return cls(id=f"{source}-{target}", source=source, target=target)

    def to_json_dict(self) -> dict:
        return {"id": self.id, "source": self.source, "target": self.target}


class CourseGraph(BaseModel):
    """Nodes and edges derived from one catalog snapshot."""
    nodes: list[CourseNode] = Field(default_factory=list)
    edges: list[PrerequisiteEdge] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return {
            "nodes": [n.to_json_dict() for n in self.nodes],
            "edges": [e.to_json_dict() for e in self.edges],
        }
