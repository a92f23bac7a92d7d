"""Core walking, scanning and aggregation logic."""

from suppressaudit.core.errors import (
    AuditError, AccessError, DecodeError, DirectoryNotFoundError, WriteError
)
from suppressaudit.core.findings import (
    AuditResult, FileDetailRow, RuleCountMap, SuppressionOccurrence
)
from suppressaudit.core.walker import walk
from suppressaudit.core.scanner import scan, scan_content
from suppressaudit.core.engine import AuditEngine, aggregate

__all__ = [
    "AuditError",
    "AccessError",
    "DecodeError",
    "DirectoryNotFoundError",
    "WriteError",
    "AuditResult",
    "FileDetailRow",
    "RuleCountMap",
    "SuppressionOccurrence",
    "walk",
    "scan",
    "scan_content",
    "AuditEngine",
    "aggregate",
]
