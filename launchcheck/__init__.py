"""
launchcheck - Pre-launch readiness checker for vertical site workspaces

Modules:
- config: Default rule set, workspace root and rules file loader
- log: Diagnostics and console loggers
- ui: Rich terminal report
- cli: `launchcheck` command

The engine and data model live in the `models` package.
"""

from .config import ConfigLoader, DEFAULT_RULES, resolve_workspace_root
from .log import get_logger, get_console

__version__ = "1.0.0"

__all__ = [
    "ConfigLoader",
    "DEFAULT_RULES",
    "resolve_workspace_root",
    "get_logger",
    "get_console",
]
