"""
launchcheck CLI - Pre-launch readiness check for the current workspace.

Installed as the `launchcheck` command via pip:
    pip install launchcheck
    cd my-site && launchcheck
    launchcheck --json

Exit status:
    0  Pass or PassWithWarnings
    1  Fail (no vertical, missing vertical config, missing required files)
    2  Fatal error (malformed marker, unreadable workspace, bad rules file)
"""
import sys
import json
import argparse

from launchcheck.config import ConfigLoader, resolve_workspace_root
from launchcheck.log import get_logger, get_console
from models.validator import ReadinessEngine
from models.workspace import (
    MalformedMarkerError,
    ReadinessError,
    ValidationOutcome,
)

EXIT_OK = 0
EXIT_FAIL = 1
EXIT_FATAL = 2


def exit_code_for(outcome: ValidationOutcome) -> int:
    """Map an outcome to the process exit status"""
    return EXIT_OK if outcome.passed else EXIT_FAIL


def main(argv=None) -> int:
    """Entry point for the `launchcheck` CLI command."""

    from launchcheck import __version__
    parser = argparse.ArgumentParser(description='launchcheck - Pre-launch readiness check')
    parser.add_argument('--version', '-V', action='version', version=f'launchcheck {__version__}')
    parser.add_argument('--json', action='store_true', help='Print the report as JSON')

    args = parser.parse_args(argv)

    logger = get_logger()
    console = get_console()
    root = resolve_workspace_root()
    loader = ConfigLoader(logger=logger.debug)

    try:
        rules = loader.rules_for(root)
        engine = ReadinessEngine(rules)
        report = engine.inspect(root)
    except MalformedMarkerError as e:
        console.info(f"[ERROR] {e}")
        console.info("   Run: launch <vertical> --force")
        return EXIT_FATAL
    except ReadinessError as e:
        console.info(f"[ERROR] {e}")
        return EXIT_FATAL

    if args.json:
        console.info(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        from launchcheck.ui import ReportUI
        ReportUI(rules).render(report)

    return exit_code_for(report.outcome)


def run():
    """Console script wrapper: exit with main()'s status."""
    sys.exit(main())


if __name__ == "__main__":
    run()
