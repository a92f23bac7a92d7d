"""
JSON output formatter for machine-readable results.
"""

import json
from typing import Optional

from suppressaudit.core.findings import AuditResult
from suppressaudit.formatters.csv_report import ReportPaths


class JSONFormatter:
    """
    Formats audit results as JSON for machine consumption.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_result(self, result: AuditResult, paths: Optional[ReportPaths] = None) -> str:
        """Format a complete audit result as JSON."""
        data = result.to_dict()
        if paths is not None:
            data["reports"] = paths._asdict()
        return json.dumps(data, indent=self.indent)
