"""
ReadinessEngine for launchcheck workspaces.
Runs the staged readiness pipeline: marker, vertical config, file presence, placeholders.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union
import jsonschema
from pydantic import ValidationError as PydanticValidationError

from .workspace import (
    DEFAULT_RULES,
    MARKER_SCHEMA,
    FindingCategory,
    MalformedMarkerError,
    RuleSet,
    ValidationFinding,
    ValidationOutcome,
    ValidationReport,
    WorkspaceMarker,
    WorkspaceUnreadableError,
)

logger = logging.getLogger("launchcheck.engine")


class ReadinessEngine:
    """
    Staged readiness checker for an initialized workspace.

    Stages:
    1. Initialization marker (missing marker ends the run)
    2. Marker parsing (JSON Schema, then Pydantic)
    3. Vertical config presence (missing config skips the placeholder scan)
    4. Required and optional file presence
    5. Placeholder scan of content-bearing files

    The engine is read-only and keeps no state between runs.
    """

    def __init__(self, rules: Optional[RuleSet] = None):
        """
        Initialize readiness engine.

        Args:
            rules: Rule set to apply; built-in defaults when None
        """
        self.rules = rules if rules is not None else DEFAULT_RULES

    def validate(
        self, root: Union[str, Path]
    ) -> Tuple[ValidationOutcome, List[ValidationFinding]]:
        """
        Validate a workspace.

        Args:
            root: Workspace root directory

        Returns:
            (outcome, ordered findings)

        Raises:
            WorkspaceUnreadableError: root or a scanned file cannot be read
            MalformedMarkerError: marker exists but is not a valid marker
        """
        report = self.inspect(root)
        return report.outcome, report.findings

    def inspect(self, root: Union[str, Path]) -> ValidationReport:
        """Run the full pipeline and return the report behind the outcome"""
        root = Path(root)
        self._check_root(root)

        findings: List[ValidationFinding] = []
        present: List[str] = []

        # Stage 1: initialization marker
        marker_path = root / self.rules.marker_path
        if not self._exists(marker_path):
            logger.debug("MARKER MISSING | %s", marker_path)
            findings.append(ValidationFinding(
                FindingCategory.MISSING_INITIALIZATION,
                self.rules.marker_path,
                "No vertical initialized yet. Run: launch <vertical>",
            ))
            return ValidationReport(ValidationOutcome.FAIL, findings)

        # Stage 2: parse marker
        marker = self.load_marker(marker_path)
        logger.debug("MARKER LOADED | %s | vertical=%s", marker_path, marker.vertical)

        # Stage 3: vertical config
        vertical_ok = self._exists(root / self.rules.vertical_config_path)
        if vertical_ok:
            present.append(self.rules.vertical_config_path)
        else:
            logger.debug("VERTICAL CONFIG MISSING | %s", self.rules.vertical_config_path)
            findings.append(ValidationFinding(
                FindingCategory.MISSING_VERTICAL_CONFIG,
                self.rules.vertical_config_path,
                f"Vertical config not found. Run: launch {marker.vertical} --force",
            ))

        # Stage 4: required files, then optional files
        for requirement in self.rules.required_files + self.rules.optional_files:
            if self._exists(root / requirement.path):
                present.append(requirement.path)
                continue
            if requirement.required:
                category = FindingCategory.MISSING_REQUIRED_FILE
                label = "REQUIRED"
            else:
                category = FindingCategory.MISSING_OPTIONAL_FILE
                label = "optional"
            findings.append(ValidationFinding(
                category, requirement.path, f"{requirement.description} ({label})"
            ))

        # Stage 5: placeholders (needs the vertical config)
        if vertical_ok:
            for rel_path in self.rules.scanned_files:
                if not self._exists(root / rel_path):
                    continue
                text = self._read_text(root / rel_path)
                if text is None:
                    continue
                findings.extend(self.scan_text(rel_path, text))
        else:
            logger.debug("PLACEHOLDER SCAN SKIPPED | vertical config missing")

        outcome = ValidationOutcome.from_findings(findings)
        logger.debug("OUTCOME | %s | %d findings", outcome.value, len(findings))
        return ValidationReport(outcome, findings, marker=marker, present=present)

    def scan_text(self, rel_path: str, text: str) -> List[ValidationFinding]:
        """
        Test text against every placeholder rule.

        Args:
            rel_path: Path reported on each finding
            text: File contents

        Returns:
            One finding per matching rule, in rule order
        """
        return [
            ValidationFinding(
                FindingCategory.PLACEHOLDER_DETECTED,
                rel_path,
                f"Contains placeholder: {rule.description or rule.pattern}",
            )
            for rule in self.rules.placeholders
            if rule.matches(text)
        ]

    def load_marker(self, marker_path: Path) -> WorkspaceMarker:
        """
        Parse the marker file.

        Raises:
            MalformedMarkerError: not JSON, not an object, or fields missing/wrong type
        """
        try:
            text = self._read_text(marker_path, strict=True)
        except UnicodeDecodeError as e:
            raise MalformedMarkerError(f"Marker {marker_path} is not valid UTF-8: {e}") from e
        if text is None:
            raise WorkspaceUnreadableError(f"Marker file disappeared: {marker_path}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedMarkerError(f"Invalid JSON in {marker_path}: {e}") from e

        try:
            jsonschema.validate(data, MARKER_SCHEMA)
        except jsonschema.ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
            raise MalformedMarkerError(
                f"Marker {marker_path} failed validation at {path}: {e.message}"
            ) from e

        try:
            return WorkspaceMarker(**data)
        except PydanticValidationError as e:
            messages = [
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise MalformedMarkerError(
                f"Marker {marker_path} failed validation: {'; '.join(messages)}"
            ) from e

    def _check_root(self, root: Path):
        if not root.is_dir():
            raise WorkspaceUnreadableError(f"Workspace root is not a directory: {root}")
        try:
            next(root.iterdir(), None)
        except OSError as e:
            raise WorkspaceUnreadableError(f"Cannot read workspace root {root}: {e}") from e

    def _exists(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError as e:
            raise WorkspaceUnreadableError(f"Cannot stat {path}: {e}") from e

    def _read_text(self, path: Path, strict: bool = False) -> Optional[str]:
        """Read a workspace file; None when it does not exist"""
        try:
            return path.read_text(encoding="utf-8", errors="strict" if strict else "replace")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise WorkspaceUnreadableError(f"Cannot read {path}: {e}") from e


def validate_workspace(root: Union[str, Path], verbose: bool = False) -> bool:
    """
    Convenience function to validate a workspace with the default rules.

    Args:
        root: Workspace root directory
        verbose: Whether to print the plain-text report

    Returns:
        True if the outcome is Pass or PassWithWarnings
    """
    engine = ReadinessEngine()
    report = engine.inspect(root)

    if verbose:
        print(report.format_report())

    return report.outcome.passed
