"""
launchcheck Models Package

Provides:
- Pydantic models for the workspace marker and rule set
- ReadinessEngine for the staged readiness pipeline
- Data classes for findings and reports
- Engine exceptions
"""

from .workspace import (
    DEFAULT_RULES,
    WorkspaceMarker,
    FileRequirement,
    PlaceholderRule,
    RuleSet,
    FindingCategory,
    ValidationFinding,
    ValidationOutcome,
    ValidationReport,
    ReadinessError,
    WorkspaceUnreadableError,
    MalformedMarkerError,
    RulesConfigError,
)

from .validator import (
    ReadinessEngine,
    validate_workspace,
)

__all__ = [
    "DEFAULT_RULES",
    "WorkspaceMarker",
    "FileRequirement",
    "PlaceholderRule",
    "RuleSet",
    "FindingCategory",
    "ValidationFinding",
    "ValidationOutcome",
    "ValidationReport",
    "ReadinessError",
    "WorkspaceUnreadableError",
    "MalformedMarkerError",
    "RulesConfigError",
    "ReadinessEngine",
    "validate_workspace",
]
