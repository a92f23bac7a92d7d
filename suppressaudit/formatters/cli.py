"""
CLI output formatter for human-readable audit summaries.
"""

import io
import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from suppressaudit.core.findings import AuditResult
from suppressaudit.formatters.csv_report import ReportPaths


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


class CLIFormatter:
    """
    Formats audit results for human-readable CLI output.
    """

    def __init__(self, use_color: bool = True, verbose: bool = False, width: int = 100):
        self.use_color = use_color and supports_color()
        self.verbose = verbose
        self.width = width

    def _console(self) -> Console:
        return Console(
            file=io.StringIO(),
            width=self.width,
            force_terminal=self.use_color,
            color_system="standard" if self.use_color else None,
            highlight=False,
        )

    def _render(self, console: Console) -> str:
        return console.file.getvalue()

    def format_result(self, result: AuditResult, paths: Optional[ReportPaths] = None) -> str:
        """Format a complete audit result."""
        console = self._console()

        console.rule("[bold]ESLint Suppression Audit[/bold]")
        console.print(f"  Directory:             {escape(result.root)}", soft_wrap=True)
        console.print(f"  Files scanned:         {result.files_scanned}")
        if result.files_skipped:
            console.print(f"  Files skipped:         [yellow]{result.files_skipped}[/yellow]")
        console.print(f"  Files with directives: {result.files_with_suppressions}")
        console.print(f"  Suppressions:          {result.total_occurrences}")
        console.print(f"  Scan time:             {result.scan_time_seconds:.2f}s")
        console.print()

        if not result.rule_counts:
            console.print("[green]No suppressed rules found![/green]")
        else:
            table = Table(title="Suppressed rules", title_justify="left")
            table.add_column("Rule", style="cyan")
            table.add_column("Count", justify="right")
            for rule, count in result.rule_counts.items():
                table.add_row(escape(rule), str(count))
            console.print(table)

        if self.verbose and result.file_rows:
            console.print()
            files = Table(title="Files", title_justify="left")
            files.add_column("Filepath", style="cyan", overflow="fold")
            files.add_column("Applied Rules", overflow="fold")
            for row in result.file_rows:
                files.add_row(escape(row.filepath), escape(row.applied_rules))
            console.print(files)

        if result.warnings:
            console.print()
            console.print("[red]Warnings[/red]")
            for warning in result.warnings:
                console.print(f"  - {warning}", markup=False, soft_wrap=True)

        if paths is not None:
            console.print()
            self._print_reports(console, paths)

        return self._render(console)

    def _print_reports(self, console: Console, paths: ReportPaths) -> None:
        console.print(f"Reports generated at {os.path.dirname(paths.rules_count)}:", markup=False, soft_wrap=True)
        for path in paths:
            console.print(f"- {path}", markup=False, soft_wrap=True)
