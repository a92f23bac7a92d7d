"""
Data structures for suppression audit results.

This module defines the values produced by one audit pass: single
suppression occurrences, the per-file detail rows built from them,
and the overall result handed to the report writers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any


# Rule name -> number of times it was suppressed, in first-seen order
RuleCountMap = Dict[str, int]


@dataclass(frozen=True)
class SuppressionOccurrence:
    """One suppression directive found at one line of a file."""
    rule: str
    line: int

    def describe(self) -> str:
        return f"{self.rule} (Line {self.line})"

    def to_dict(self) -> Dict[str, Any]:
        return {"rule": self.rule, "line": self.line}


@dataclass
class FileDetailRow:
    """A file that contains at least one suppression directive."""
    filename: str
    filepath: str
    occurrences: List[SuppressionOccurrence] = field(default_factory=list)

    @property
    def applied_rules(self) -> str:
        """Human-readable list of the file's suppressions, in line order."""
        return ", ".join(o.describe() for o in self.occurrences)

    def to_row(self) -> List[str]:
        return [self.filename, self.filepath, self.applied_rules]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "filepath": self.filepath,
            "applied_rules": self.applied_rules,
            "occurrences": [o.to_dict() for o in self.occurrences],
        }


@dataclass
class AuditResult:
    """Complete result of auditing one directory tree."""
    root: str
    rule_counts: RuleCountMap = field(default_factory=dict)
    file_rows: List[FileDetailRow] = field(default_factory=list)
    files_scanned: int = 0
    files_skipped: int = 0
    warnings: List[str] = field(default_factory=list)
    scan_time_seconds: float = 0.0

    @property
    def total_occurrences(self) -> int:
        return sum(self.rule_counts.values())

    @property
    def files_with_suppressions(self) -> int:
        return len(self.file_rows)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "root": self.root,
            "summary": {
                "files_scanned": self.files_scanned,
                "files_skipped": self.files_skipped,
                "files_with_suppressions": self.files_with_suppressions,
                "total_occurrences": self.total_occurrences,
                "distinct_rules": len(self.rule_counts),
                "scan_time_seconds": self.scan_time_seconds,
            },
            "rule_counts": dict(self.rule_counts),
            "files": [row.to_dict() for row in self.file_rows],
            "warnings": list(self.warnings),
        }
