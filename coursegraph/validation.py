"""
Catalog validation - Check catalogs for structural issues.

The graph builder and layout accept any catalog; this module reports the
problems (dangling references, cycles, duplicates) before a layout is
attempted so callers can present them to the user.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .builder import build_graph
from .cycles import unresolved_courses

if TYPE_CHECKING:
    from .models import Catalog


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Layout will fail or produce a wrong graph
    WARNING = "warning"  # Potential problem, should review
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a catalog."""
    severity: IssueSeverity
    message: str
    course_id: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.course_id:
            result["course_id"] = self.course_id
        return result


def validate_catalog(catalog: "Catalog") -> list[ValidationIssue]:
    """
    Validate a catalog and return a list of issues.

    Checks for:
    - Empty catalog - INFO
    - Duplicate course ids - ERROR
    - Prerequisites referencing unknown courses - ERROR
    - Courses requiring themselves - ERROR
    - Courses on or behind prerequisite cycles - ERROR
    - Duplicate prerequisite entries - WARNING
    - Corequisites referencing unknown courses - WARNING
    - Requirement groups referencing unknown courses - WARNING
    - "nOf" groups asking for more courses than they list - WARNING
    - Isolated courses (no prerequisite relations) - INFO

    Args:
        catalog: The catalog to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    courses = catalog.courses

    if not courses:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Catalog has no courses"
        ))
        return issues

    # Check for duplicate ids
    course_ids: set[str] = set()
    for course in courses:
        if course.id in course_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Duplicate course id: {course.id}",
                course_id=course.id
            ))
        course_ids.add(course.id)

    for course in courses:
        prerequisites = course.prerequisites or []

        seen: set[str] = set()
        for prereq_id in prerequisites:
            if prereq_id == course.id:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.ERROR,
                    message="Course lists itself as a prerequisite",
                    course_id=course.id
                ))
            elif prereq_id not in course_ids:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.ERROR,
                    message=f"Prerequisite references unknown course: {prereq_id}",
                    course_id=course.id
                ))

            if prereq_id in seen:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Prerequisite {prereq_id} is listed more than once",
                    course_id=course.id
                ))
            seen.add(prereq_id)

        for coreq_id in course.corequisites or []:
            if coreq_id not in course_ids:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Corequisite references unknown course: {coreq_id}",
                    course_id=course.id
                ))

    # Cycles (self-references are already reported above)
    graph = build_graph(catalog)
    unresolved = set(unresolved_courses(e for e in graph.edges if e.source != e.target))
    looped = list(dict.fromkeys(c.id for c in courses if c.id in unresolved))
    if looped:
        issues.append(ValidationIssue(
            severity=IssueSeverity.ERROR,
            message=f"Courses on or behind a prerequisite cycle: {', '.join(looped)}"
        ))

    for requirement in catalog.requirements or []:
        for group in requirement.groups:
            for course_id in group.courses:
                if course_id not in course_ids:
                    issues.append(ValidationIssue(
                        severity=IssueSeverity.WARNING,
                        message=(
                            f"Requirement '{requirement.title}' group '{group.title}' "
                            f"references unknown course: {course_id}"
                        ),
                        course_id=course_id
                    ))
            if group.n is not None and group.n > len(group.courses):
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=(
                        f"Requirement '{requirement.title}' group '{group.title}' "
                        f"needs {group.n} courses but lists {len(group.courses)}"
                    )
                ))

    # Isolated courses
    connected: set[str] = set()
    for edge in graph.edges:
        connected.add(edge.source)
        connected.add(edge.target)

    isolated = [course.id for course in courses if course.id not in connected]
    if isolated:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message=f"Courses without prerequisite relations: {', '.join(isolated)}"
        ))

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    return {
        "total": len(issues),
        "errors": len([i for i in issues if i.severity == IssueSeverity.ERROR]),
        "warnings": len([i for i in issues if i.severity == IssueSeverity.WARNING]),
        "info": len([i for i in issues if i.severity == IssueSeverity.INFO]),
        "valid": len([i for i in issues if i.severity == IssueSeverity.ERROR]) == 0
    }
