"""
launchcheck UI - terminal rendering of a readiness report using rich library
"""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from models.workspace import (
    FindingCategory,
    RuleSet,
    ValidationOutcome,
    ValidationReport,
)


class ReportUI:
    """Render a ValidationReport for humans"""

    def __init__(self, rules: RuleSet, console: Optional[Console] = None):
        self.rules = rules
        self.console = console or Console()

    def _file_status(self, report: ValidationReport, path: str, required: bool) -> str:
        """Status cell for one checked file"""
        if path in report.present:
            return "[green]✓ present[/green]"
        if required:
            return "[red]❌ missing[/red]"
        return "[yellow]⚠ missing[/yellow]"

    def render_table(self, report: ValidationReport) -> Table:
        """Render file checks table: vertical config, required, optional"""
        table = Table(title="File checks", show_header=True)
        table.add_column("Path", style="cyan")
        table.add_column("Description", style="dim")
        table.add_column("Kind", width=9)
        table.add_column("Status", width=12)

        table.add_row(
            escape(self.rules.vertical_config_path),
            "Vertical configuration",
            "required",
            self._file_status(report, self.rules.vertical_config_path, True),
        )
        for requirement in self.rules.required_files + self.rules.optional_files:
            table.add_row(
                escape(requirement.path),
                escape(requirement.description),
                "required" if requirement.required else "optional",
                self._file_status(report, requirement.path, requirement.required),
            )
        return table

    def render_summary(self, report: ValidationReport) -> str:
        """Final summary line naming the outcome"""
        if report.outcome is ValidationOutcome.FAIL:
            return "[bold red]❌ Validation FAILED[/bold red] - fix required issues above"
        if report.outcome is ValidationOutcome.PASS_WITH_WARNINGS:
            return "[bold yellow]⚠ Validation PASSED with warnings[/bold yellow]"
        return "[bold green]✓ Validation PASSED[/bold green]"

    def render(self, report: ValidationReport):
        """Print the full report"""
        out = self.console
        out.rule("[bold]LAUNCHCHECK - SITE READINESS[/bold]")

        uninitialized = [
            f for f in report.findings
            if f.category is FindingCategory.MISSING_INITIALIZATION
        ]
        if uninitialized:
            out.print("[red]❌ No vertical initialized yet.[/red]")
            out.print("   Run: launch <vertical>")
            out.rule()
            out.print(self.render_summary(report))
            return

        marker = report.marker
        if marker:
            out.print(f"Vertical: [bold]{escape(marker.name)}[/bold] ({escape(marker.vertical)})")
            out.print(f"Category: {escape(marker.category)}")
            out.print(f"Initialized: {escape(marker.initialized_at)}")
        out.print()

        for finding in report.findings:
            if finding.category is FindingCategory.MISSING_VERTICAL_CONFIG:
                out.print(f"[red]❌ {escape(finding.path)}: {escape(finding.description)}[/red]")

        out.print(self.render_table(report))

        placeholders = [
            f for f in report.findings
            if f.category is FindingCategory.PLACEHOLDER_DETECTED
        ]
        if placeholders:
            out.print("[yellow]⚠ Placeholder content detected:[/yellow]")
            for finding in placeholders:
                out.print(f"   {escape(finding.path)}: {escape(finding.description)}")
            out.print("   Update these with real business information before launch.")
        elif self.rules.vertical_config_path in report.present:
            out.print("[green]✓ No obvious placeholder content detected[/green]")

        out.rule()
        out.print(self.render_summary(report))
        if report.outcome is ValidationOutcome.PASS_WITH_WARNINGS:
            out.print("The site will build, but update placeholder content before launch.")
        elif report.outcome is ValidationOutcome.PASS:
            out.print("Ready to build.")
