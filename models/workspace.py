"""
Pydantic models for launchcheck workspaces and rule sets.
Includes the marker schema, finding/outcome result types and engine errors.
"""

from enum import Enum
from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Structural check applied to .vertical before model validation
MARKER_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["name", "vertical", "category", "initializedAt"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "vertical": {"type": "string", "minLength": 1},
        "category": {"type": "string", "minLength": 1},
        "initializedAt": {"type": "string", "minLength": 1},
    },
}


class ReadinessError(Exception):
    """Base class for conditions that stop a readiness run outright"""


class WorkspaceUnreadableError(ReadinessError):
    """Workspace root (or a file in it) could not be read"""


class MalformedMarkerError(ReadinessError):
    """Marker file exists but does not hold a valid marker"""


class RulesConfigError(ReadinessError):
    """Rules file could not be loaded or failed validation"""


class WorkspaceMarker(BaseModel):
    """Record written by `launch <vertical>` when a vertical is selected"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1)
    vertical: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    initialized_at: str = Field(..., alias="initializedAt", min_length=1)

    @field_validator('name', 'vertical', 'category', 'initialized_at')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v


def check_relative_path(v: str) -> str:
    """Paths are relative to the workspace root, POSIX separators"""
    if v.startswith("/") or v.startswith("\\") or (len(v) > 1 and v[1] == ":"):
        raise ValueError(f"Path must be relative to the workspace root: {v}")
    if ".." in v.replace("\\", "/").split("/"):
        raise ValueError(f"Path must not leave the workspace root: {v}")
    return v


class FileRequirement(BaseModel):
    """A path that must (or should) exist under the workspace root"""
    path: str = Field(..., min_length=1)
    description: str = Field(default="")
    required: bool = True

    model_config = ConfigDict(extra="forbid")

    @field_validator('path')
    @classmethod
    def validate_relative(cls, v):
        return check_relative_path(v)


class PlaceholderRule(BaseModel):
    """Literal template text that should not survive into a launched site"""
    pattern: str = Field(..., min_length=1)
    description: str = Field(default="")
    case_sensitive: bool = False

    model_config = ConfigDict(extra="forbid")

    def matches(self, text: str) -> bool:
        """Substring search, case-folded unless case_sensitive"""
        if self.case_sensitive:
            return self.pattern in text
        return self.pattern.lower() in text.lower()


class RuleSet(BaseModel):
    """Complete engine configuration"""
    marker_path: str = Field(default=".vertical", min_length=1)
    vertical_config_path: str = Field(default="src/config/vertical.ts", min_length=1)
    files: List[FileRequirement] = Field(default_factory=list)
    scanned_files: List[str] = Field(default_factory=list)
    placeholders: List[PlaceholderRule] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator('files')
    @classmethod
    def validate_path_uniqueness(cls, files):
        """Ensure no file is listed twice"""
        paths = [f.path for f in files]
        if len(paths) != len(set(paths)):
            duplicates = [p for p in paths if paths.count(p) > 1]
            raise ValueError(f"Duplicate file paths: {set(duplicates)}")
        return files

    @field_validator('marker_path', 'vertical_config_path')
    @classmethod
    def validate_relative(cls, v):
        return check_relative_path(v)

    @field_validator('scanned_files')
    @classmethod
    def validate_scanned_relative(cls, paths):
        for p in paths:
            check_relative_path(p)
        return paths

    @property
    def required_files(self) -> List[FileRequirement]:
        return [f for f in self.files if f.required]

    @property
    def optional_files(self) -> List[FileRequirement]:
        return [f for f in self.files if not f.required]


DEFAULT_RULES = RuleSet(
    marker_path=".vertical",
    vertical_config_path="src/config/vertical.ts",
    files=[
        FileRequirement(path="src/config/site.ts", description="Site configuration", required=True),
        FileRequirement(path="public/favicon.svg", description="Favicon", required=True),
        FileRequirement(path="public/images/logo.png", description="Logo image", required=False),
        FileRequirement(path="public/og-image.png", description="Social share image (1200x630)", required=False),
    ],
    scanned_files=[
        "src/config/site.ts",
        "src/config/vertical.ts",
    ],
    placeholders=[
        PlaceholderRule(pattern="example.com", description="example.com domain"),
        PlaceholderRule(pattern="(555)", description="(555) phone number", case_sensitive=True),
        PlaceholderRule(pattern="123 Main", description="123 Main Street address"),
        PlaceholderRule(pattern="ABC Heating", description="ABC Heating placeholder name"),
        PlaceholderRule(pattern="ABC Plumbing", description="ABC Plumbing placeholder name"),
        PlaceholderRule(pattern="Springfield", description="Springfield placeholder city", case_sensitive=True),
    ],
)


class FindingCategory(str, Enum):
    MISSING_INITIALIZATION = "missing-initialization"
    MISSING_VERTICAL_CONFIG = "missing-vertical-config"
    MISSING_REQUIRED_FILE = "missing-required-file"
    MISSING_OPTIONAL_FILE = "missing-optional-file"
    PLACEHOLDER_DETECTED = "placeholder-detected"


BLOCKING_CATEGORIES = frozenset({
    FindingCategory.MISSING_INITIALIZATION,
    FindingCategory.MISSING_VERTICAL_CONFIG,
    FindingCategory.MISSING_REQUIRED_FILE,
})


class ValidationOutcome(str, Enum):
    FAIL = "Fail"
    PASS_WITH_WARNINGS = "PassWithWarnings"
    PASS = "Pass"

    @classmethod
    def from_findings(cls, findings: List["ValidationFinding"]) -> "ValidationOutcome":
        """Fail on any blocking finding, warn on any other, pass otherwise"""
        if any(f.blocking for f in findings):
            return cls.FAIL
        if findings:
            return cls.PASS_WITH_WARNINGS
        return cls.PASS

    @property
    def passed(self) -> bool:
        return self is not ValidationOutcome.FAIL


@dataclass(frozen=True)
class ValidationFinding:
    """Represents one problem found in a workspace"""
    category: FindingCategory
    path: str
    description: str

    @property
    def blocking(self) -> bool:
        return self.category in BLOCKING_CATEGORIES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "path": self.path,
            "description": self.description,
            "blocking": self.blocking,
        }


@dataclass
class ValidationReport:
    """Result of a readiness run"""
    outcome: ValidationOutcome
    findings: List[ValidationFinding] = field(default_factory=list)
    marker: Optional[WorkspaceMarker] = None
    present: List[str] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationFinding]:
        return [f for f in self.findings if f.blocking]

    @property
    def warnings(self) -> List[ValidationFinding]:
        return [f for f in self.findings if not f.blocking]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "marker": self.marker.model_dump(by_alias=True) if self.marker else None,
            "present": list(self.present),
            "findings": [f.to_dict() for f in self.findings],
        }

    def format_report(self) -> str:
        """Format validation result as plain-text report"""
        lines = []

        if self.marker:
            lines.append(f"[INFO] Vertical: {self.marker.name} ({self.marker.vertical})")
            lines.append(f"[INFO] Category: {self.marker.category}")
            lines.append(f"[INFO] Initialized: {self.marker.initialized_at}")

        if self.errors:
            lines.append("\n[ERRORS]")
            for error in self.errors:
                lines.append(f"  {error.path}: {error.description}")

        if self.warnings:
            lines.append("\n[WARNINGS]")
            for warning in self.warnings:
                lines.append(f"  {warning.path}: {warning.description}")

        if self.outcome is ValidationOutcome.FAIL:
            lines.append("\n[ERROR] Validation FAILED")
        elif self.outcome is ValidationOutcome.PASS_WITH_WARNINGS:
            lines.append("\n[WARN] Validation PASSED with warnings")
        else:
            lines.append("\n[OK] Validation PASSED")

        return "\n".join(lines)
