"""Tests for models/workspace.py"""
import dataclasses

import pytest
from pydantic import ValidationError as PydanticValidationError

from models.workspace import (
    DEFAULT_RULES,
    FileRequirement,
    FindingCategory,
    PlaceholderRule,
    RuleSet,
    ValidationFinding,
    ValidationOutcome,
    ValidationReport,
    WorkspaceMarker,
)


def finding(category, path="x"):
    return ValidationFinding(category, path, "desc")


class TestWorkspaceMarker:
    """Tests for WorkspaceMarker Pydantic model"""

    def test_from_marker_json_keys(self, sample_marker):
        marker = WorkspaceMarker(**sample_marker)
        assert marker.name == "Acme"
        assert marker.vertical == "hvac"
        assert marker.category == "home-services"
        assert marker.initialized_at == "2024-01-01"

    def test_populate_by_name(self):
        marker = WorkspaceMarker(name="A", vertical="v", category="c", initialized_at="t")
        assert marker.initialized_at == "t"

    def test_dump_uses_marker_keys(self, sample_marker):
        assert WorkspaceMarker(**sample_marker).model_dump(by_alias=True) == sample_marker

    def test_missing_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            WorkspaceMarker(name="A", vertical="v", category="c")

    def test_blank_rejected(self, sample_marker):
        sample_marker["category"] = " "
        with pytest.raises(PydanticValidationError, match="must not be blank"):
            WorkspaceMarker(**sample_marker)


class TestFileRequirement:
    """Tests for FileRequirement Pydantic model"""

    def test_required_defaults_true(self):
        assert FileRequirement(path="public/favicon.svg").required is True

    def test_absolute_path_rejected(self):
        with pytest.raises(PydanticValidationError, match="relative"):
            FileRequirement(path="/etc/passwd")

    def test_parent_escape_rejected(self):
        with pytest.raises(PydanticValidationError, match="leave the workspace"):
            FileRequirement(path="../secrets.ts")

    def test_extra_fields_forbidden(self):
        with pytest.raises(PydanticValidationError):
            FileRequirement(path="a.png", size=10)


class TestPlaceholderRule:
    """Tests for PlaceholderRule matching"""

    def test_case_insensitive_by_default(self):
        rule = PlaceholderRule(pattern="example.com")
        assert rule.matches("Visit WWW.EXAMPLE.COM today")

    def test_case_sensitive(self):
        rule = PlaceholderRule(pattern="Springfield", case_sensitive=True)
        assert rule.matches("Springfield, IL")
        assert not rule.matches("SPRINGFIELD, IL")

    def test_literal_not_regex(self):
        """Dots and parentheses are literal characters"""
        assert not PlaceholderRule(pattern="example.com").matches("exampleXcom")
        assert PlaceholderRule(pattern="(555)", case_sensitive=True).matches("(555) 123")
        assert not PlaceholderRule(pattern="(555)", case_sensitive=True).matches("555 123")

    def test_empty_pattern_rejected(self):
        with pytest.raises(PydanticValidationError):
            PlaceholderRule(pattern="")


class TestRuleSet:
    """Tests for RuleSet"""

    def test_split_required_optional(self):
        rules = RuleSet(files=[
            FileRequirement(path="a", required=False),
            FileRequirement(path="b"),
            FileRequirement(path="c", required=False),
        ])
        assert [f.path for f in rules.required_files] == ["b"]
        assert [f.path for f in rules.optional_files] == ["a", "c"]

    def test_duplicate_paths_rejected(self):
        with pytest.raises(PydanticValidationError, match="Duplicate file paths"):
            RuleSet(files=[FileRequirement(path="a"), FileRequirement(path="a", required=False)])

    @pytest.mark.parametrize("field,value", [
        ("marker_path", "/home/user/.vertical"),
        ("vertical_config_path", "../other/vertical.ts"),
        ("scanned_files", ["src/config/site.ts", "/etc/passwd"]),
    ])
    def test_paths_must_stay_in_workspace(self, field, value):
        with pytest.raises(PydanticValidationError, match="workspace root"):
            RuleSet(**{field: value})

    def test_default_rules_owned_by_models(self):
        """The engine package carries its own defaults"""
        from launchcheck.config import DEFAULT_RULES as config_defaults
        from models.validator import ReadinessEngine

        assert ReadinessEngine().rules is DEFAULT_RULES
        assert config_defaults is DEFAULT_RULES

    def test_unknown_key_rejected(self):
        with pytest.raises(PydanticValidationError):
            RuleSet(required=["a"])


class TestValidationFinding:
    """Tests for ValidationFinding dataclass"""

    @pytest.mark.parametrize("category,blocking", [
        (FindingCategory.MISSING_INITIALIZATION, True),
        (FindingCategory.MISSING_VERTICAL_CONFIG, True),
        (FindingCategory.MISSING_REQUIRED_FILE, True),
        (FindingCategory.MISSING_OPTIONAL_FILE, False),
        (FindingCategory.PLACEHOLDER_DETECTED, False),
    ])
    def test_blocking(self, category, blocking):
        assert finding(category).blocking is blocking

    def test_frozen(self):
        f = finding(FindingCategory.PLACEHOLDER_DETECTED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.path = "other"

    def test_to_dict(self):
        d = finding(FindingCategory.MISSING_OPTIONAL_FILE, "public/og-image.png").to_dict()
        assert d == {
            "category": "missing-optional-file",
            "path": "public/og-image.png",
            "description": "desc",
            "blocking": False,
        }


class TestValidationOutcome:
    """Outcome aggregation"""

    def test_no_findings_pass(self):
        assert ValidationOutcome.from_findings([]) is ValidationOutcome.PASS

    def test_warnings_only(self):
        findings = [
            finding(FindingCategory.MISSING_OPTIONAL_FILE),
            finding(FindingCategory.PLACEHOLDER_DETECTED),
        ]
        assert ValidationOutcome.from_findings(findings) is ValidationOutcome.PASS_WITH_WARNINGS

    def test_any_blocking_fails(self):
        findings = [
            finding(FindingCategory.PLACEHOLDER_DETECTED),
            finding(FindingCategory.MISSING_REQUIRED_FILE),
        ]
        assert ValidationOutcome.from_findings(findings) is ValidationOutcome.FAIL

    def test_passed(self):
        assert ValidationOutcome.PASS.passed
        assert ValidationOutcome.PASS_WITH_WARNINGS.passed
        assert not ValidationOutcome.FAIL.passed


class TestValidationReport:
    """Tests for ValidationReport"""

    def test_errors_and_warnings(self):
        report = ValidationReport(ValidationOutcome.FAIL, [
            finding(FindingCategory.MISSING_REQUIRED_FILE, "a"),
            finding(FindingCategory.MISSING_OPTIONAL_FILE, "b"),
        ])
        assert [f.path for f in report.errors] == ["a"]
        assert [f.path for f in report.warnings] == ["b"]

    def test_format_report_pass(self, sample_marker):
        report = ValidationReport(ValidationOutcome.PASS, marker=WorkspaceMarker(**sample_marker))
        text = report.format_report()
        assert "[INFO] Vertical: Acme (hvac)" in text
        assert "[INFO] Category: home-services" in text
        assert "[INFO] Initialized: 2024-01-01" in text
        assert text.endswith("[OK] Validation PASSED")

    def test_format_report_warnings(self):
        report = ValidationReport(ValidationOutcome.PASS_WITH_WARNINGS, [
            finding(FindingCategory.PLACEHOLDER_DETECTED, "src/config/site.ts"),
        ])
        text = report.format_report()
        assert "[WARNINGS]" in text
        assert "src/config/site.ts: desc" in text
        assert "Validation PASSED with warnings" in text

    def test_to_dict(self, sample_marker):
        report = ValidationReport(
            ValidationOutcome.PASS_WITH_WARNINGS,
            [finding(FindingCategory.PLACEHOLDER_DETECTED, "s")],
            marker=WorkspaceMarker(**sample_marker),
            present=["s"],
        )
        d = report.to_dict()
        assert d["outcome"] == "PassWithWarnings"
        assert d["marker"]["initializedAt"] == "2024-01-01"
        assert d["present"] == ["s"]
        assert d["findings"][0]["category"] == "placeholder-detected"

    def test_to_dict_without_marker(self):
        assert ValidationReport(ValidationOutcome.FAIL).to_dict()["marker"] is None
