"""
Output for audit results.

Provides:
- The two CSV reports (rule counts and file details)
- Human-readable CLI summary
- JSON summary for machine processing
"""

from suppressaudit.formatters.cli import CLIFormatter
from suppressaudit.formatters.csv_report import ReportPaths, write_reports
from suppressaudit.formatters.json_formatter import JSONFormatter

__all__ = [
    "CLIFormatter",
    "JSONFormatter",
    "ReportPaths",
    "write_reports",
    "get_formatter",
]


def get_formatter(format_name: str):
    """Get a summary formatter by name."""
    formatters = {
        "text": CLIFormatter,
        "cli": CLIFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if formatter_class:
        return formatter_class()

    raise ValueError(f"Unknown format: {format_name}")
