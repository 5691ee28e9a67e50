"""
launchcheck Config - Default rule set, workspace root and rules file resolution
"""
import os
from typing import Optional, Callable, Dict, Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from models.workspace import DEFAULT_RULES, RuleSet, RulesConfigError


RULES_FILENAME = "launchcheck.yaml"


def resolve_workspace_root() -> str:
    """Workspace root: LAUNCHCHECK_ROOT env, else the current directory."""
    env_root = os.environ.get("LAUNCHCHECK_ROOT")
    if env_root:
        return env_root
    return os.getcwd()


class ConfigLoader:
    """Loader for launchcheck rule sets"""

    def __init__(self, logger: Optional[Callable[[str], None]] = None):
        self.logger = logger or (lambda x: None)

    def find_rules_file(self, root: str) -> Optional[str]:
        """
        Locate a rules file for a workspace

        Order: LAUNCHCHECK_RULES env, then <root>/launchcheck.yaml.

        Args:
            root: Workspace root directory

        Returns:
            Path to rules file, or None to use the defaults
        """
        env_rules = os.environ.get("LAUNCHCHECK_RULES")
        if env_rules:
            return env_rules
        local = os.path.join(root, RULES_FILENAME)
        if os.path.isfile(local):
            return local
        return None

    def load_rules(self, path: str) -> RuleSet:
        """
        Load a rules YAML file on top of the defaults

        Each top-level key present in the file replaces the default value;
        keys left out keep the built-in rules.

        Args:
            path: Path to rules YAML file

        Returns:
            Validated RuleSet

        Raises:
            RulesConfigError: file unreadable, not YAML, or invalid rules
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise RulesConfigError(f"Cannot read rules file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise RulesConfigError(f"Invalid YAML in rules file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RulesConfigError(f"Rules file must be a YAML mapping: {path}")

        merged: Dict[str, Any] = DEFAULT_RULES.model_dump()
        merged.update(data)
        try:
            rules = RuleSet.model_validate(merged)
        except PydanticValidationError as e:
            messages = [
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise RulesConfigError(f"Invalid rules file {path}: {'; '.join(messages)}") from e

        self.logger(f"RULES LOADED | {path}")
        return rules

    def rules_for(self, root: str) -> RuleSet:
        """Rule set for a workspace: rules file if one is found, defaults otherwise"""
        path = self.find_rules_file(root)
        if path is None:
            self.logger("RULES | using built-in defaults")
            return DEFAULT_RULES
        return self.load_rules(path)
