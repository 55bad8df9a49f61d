"""
Catalog validation tests.
"""

from coursegraph import Catalog, IssueSeverity, validate_catalog, validation_summary
from coursegraph.models import Requirement, RequirementGroup

from conftest import make_catalog, make_course


def messages(issues, severity):
    return [i.message for i in issues if i.severity == severity]


class TestValidateCatalog:

    def test_empty_catalog(self):
        issues = validate_catalog(Catalog())

        assert len(issues) == 1
        assert issues[0].severity == IssueSeverity.INFO
        assert issues[0].message == "Catalog has no courses"

    def test_clean_catalog(self, chain_catalog):
        assert validate_catalog(chain_catalog) == []

    def test_unknown_prerequisite(self):
        issues = validate_catalog(make_catalog(make_course("A", ["GHOST"])))

        errors = [i for i in issues if i.severity == IssueSeverity.ERROR]
        assert len(errors) == 1
        assert errors[0].message == "Prerequisite references unknown course: GHOST"
        assert errors[0].course_id == "A"

    def test_duplicate_course_id(self):
        issues = validate_catalog(make_catalog(make_course("A"), make_course("A")))
        assert "Duplicate course id: A" in messages(issues, IssueSeverity.ERROR)

    def test_self_prerequisite(self):
        issues = validate_catalog(make_catalog(make_course("A", ["A"])))
        errors = messages(issues, IssueSeverity.ERROR)

        assert errors == ["Course lists itself as a prerequisite"]

    def test_cycle(self, mutual_catalog):
        errors = messages(validate_catalog(mutual_catalog), IssueSeverity.ERROR)
        assert errors == ["Courses on or behind a prerequisite cycle: A, B"]

    def test_cycle_message_includes_downstream_courses(self):
        catalog = make_catalog(
            make_course("ROOT"),
            make_course("A", ["ROOT", "B"]),
            make_course("B", ["A"]),
            make_course("C", ["B"]),
        )
        errors = messages(validate_catalog(catalog), IssueSeverity.ERROR)

        assert errors == ["Courses on or behind a prerequisite cycle: A, B, C"]

    def test_duplicate_prerequisite_entry(self):
        catalog = make_catalog(make_course("A"), make_course("B", ["A", "A"]))
        warnings = messages(validate_catalog(catalog), IssueSeverity.WARNING)

        assert warnings == ["Prerequisite A is listed more than once"]

    def test_unknown_corequisite(self):
        catalog = make_catalog(make_course("A", corequisites=["LAB"]))
        warnings = messages(validate_catalog(catalog), IssueSeverity.WARNING)

        assert warnings == ["Corequisite references unknown course: LAB"]

    def test_requirement_groups(self):
        catalog = make_catalog(
            make_course("A"),
            make_course("B", ["A"]),
            requirements=[Requirement(
                title="Electives",
                type="nOf",
                groups=[RequirementGroup(title="Pick", n=3, courses=["A", "X"])],
            )],
        )
        warnings = messages(validate_catalog(catalog), IssueSeverity.WARNING)

        assert warnings == [
            "Requirement 'Electives' group 'Pick' references unknown course: X",
            "Requirement 'Electives' group 'Pick' needs 3 courses but lists 2",
        ]

    def test_isolated_courses(self):
        catalog = make_catalog(make_course("A"), make_course("B", ["A"]), make_course("C"))
        info = messages(validate_catalog(catalog), IssueSeverity.INFO)

        assert info == ["Courses without prerequisite relations: C"]


class TestValidationSummary:

    def test_counts(self):
        catalog = make_catalog(make_course("A", ["GHOST", "B", "B"]), make_course("B"))
        summary = validation_summary(validate_catalog(catalog))

        assert summary == {"total": 2, "errors": 1, "warnings": 1, "info": 0, "valid": False}

    def test_valid(self, chain_catalog):
        assert validation_summary(validate_catalog(chain_catalog))["valid"] is True

    def test_to_dict(self):
        issues = validate_catalog(make_catalog(make_course("A", ["GHOST"])))
        assert issues[0].to_dict() == {
            "type": "error",
            "message": "Prerequisite references unknown course: GHOST",
            "course_id": "A",
        }
