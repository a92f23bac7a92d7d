"""
ESLint Suppression Audit

Scans a source tree for ``eslint-disable`` and ``eslint-disable-next-line``
directives, tallies how often each rule is suppressed, and writes CSV
reports of the rule counts and the files involved.
"""

__version__ = "1.0.0"
__author__ = "Suppression Audit Team"

from suppressaudit.core.engine import AuditEngine, aggregate
from suppressaudit.core.findings import AuditResult, FileDetailRow, SuppressionOccurrence
from suppressaudit.config import AuditConfig

__all__ = [
    "AuditEngine",
    "aggregate",
    "AuditResult",
    "FileDetailRow",
    "SuppressionOccurrence",
    "AuditConfig",
]
