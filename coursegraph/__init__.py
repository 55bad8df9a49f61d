"""
Course Graph Core - Catalog models, graph building, cycle checks and layered layout.

This module provides the core functionality used by both the HTTP service
and the command-line tool, ensuring a single source of truth for all graph logic.
"""

from .models import (
    # Enums
    LayoutDirection,
    Connector,
    RequirementType,
    # Catalog models
    Course,
    RequirementGroup,
    Requirement,
    CatalogMetadata,
    Catalog,
    # Graph models
    Position,
    CourseNode,
    PrerequisiteEdge,
    CourseGraph,
)

from .config import LayoutConfig, Settings, get_settings
from .builder import build_graph
from .cycles import has_cycle, unresolved_courses
from .layout import LayoutError, CycleDetectedError, DuplicateCourseError, assign_levels, layout_elements, layout_catalog
from .relations import get_dependent_courses, get_prerequisite_courses
from .validation import validate_catalog, validation_summary, ValidationIssue, IssueSeverity
from .analysis import summarize_catalog, find_connected_components

__all__ = [
    # Enums
    "LayoutDirection",
    "Connector",
    "RequirementType",
    # Models
    "Course",
    "RequirementGroup",
    "Requirement",
    "CatalogMetadata",
    "Catalog",
    "Position",
    "CourseNode",
    "PrerequisiteEdge",
    "CourseGraph",
    # Configuration
    "LayoutConfig",
    "Settings",
    "get_settings",
    # Graph building
    "build_graph",
    # Cycles
    "has_cycle",
    "unresolved_courses",
    # Layout
    "LayoutError",
    "CycleDetectedError",
    "DuplicateCourseError",
    "assign_levels",
    "layout_elements",
    "layout_catalog",
    # Relationships
    "get_dependent_courses",
    "get_prerequisite_courses",
    # Validation
    "validate_catalog",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
    # Analysis
    "summarize_catalog",
    "find_connected_components",
]
