"""
Audit engine for the suppression scanner.

This module folds per-file scan results into the two report shapes and
orchestrates a complete run: walking the tree, scanning every candidate
file, and applying the configured error policy.
"""

import logging
import os
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from suppressaudit.core.errors import AuditError
from suppressaudit.core.findings import (
    AuditResult, FileDetailRow, RuleCountMap, SuppressionOccurrence
)
from suppressaudit.core.scanner import scan
from suppressaudit.core.walker import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS, walk


logger = logging.getLogger(__name__)

ON_ERROR_ABORT = "abort"
ON_ERROR_SKIP = "skip"
ON_ERROR_CHOICES = (ON_ERROR_ABORT, ON_ERROR_SKIP)

ScanFunction = Callable[[str], List[SuppressionOccurrence]]


def aggregate(
    files: Iterable[str],
    scan_file: ScanFunction = scan,
) -> Tuple[RuleCountMap, List[FileDetailRow]]:
    """
    Scan ``files`` in order and build the rule counts and file rows.

    Files without any suppression produce no row and leave the counts
    untouched.
    """
    rule_counts: RuleCountMap = {}
    file_rows: List[FileDetailRow] = []

    for file_path in files:
        occurrences = scan_file(file_path)
        if not occurrences:
            continue

        file_rows.append(FileDetailRow(
            filename=os.path.basename(file_path),
            filepath=file_path,
            occurrences=list(occurrences),
        ))
        for occurrence in occurrences:
            rule_counts[occurrence.rule] = rule_counts.get(occurrence.rule, 0) + 1

    return rule_counts, file_rows


class AuditEngine:
    """
    Runs a complete suppression audit over a directory tree.

    The engine:
    1. Validates the root directory
    2. Walks it for files with an allowed extension
    3. Scans each file for suppression directives
    4. Aggregates rule counts and per-file rows into an AuditResult

    With ``on_error="abort"`` (the default) the first unreadable entry
    ends the run. With ``on_error="skip"`` it is logged, recorded as a
    warning and left out.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

        self.extensions = tuple(self.config.get("extensions") or DEFAULT_EXTENSIONS)
        self.exclude_dirs = tuple(self.config.get("exclude_dirs", DEFAULT_EXCLUDE_DIRS))
        self.sort_entries = self.config.get("sort_entries", True)
        self.encoding = self.config.get("encoding", "utf-8")
        self.on_error = self.config.get("on_error", ON_ERROR_ABORT)

        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"Unknown on_error policy: {self.on_error!r} "
                f"(expected one of {', '.join(ON_ERROR_CHOICES)})"
            )

    @property
    def skips_errors(self) -> bool:
        return self.on_error == ON_ERROR_SKIP

    def discover_files(self, root: str, warnings: Optional[List[str]] = None) -> List[str]:
        """List the files to scan under ``root``."""
        handler = None
        if self.skips_errors:
            def handler(error: AuditError) -> None:
                self._record(error, warnings)
        return list(walk(
            root,
            extensions=self.extensions,
            exclude_dirs=self.exclude_dirs,
            sort_entries=self.sort_entries,
            on_error=handler,
        ))

    def scan_file(self, file_path: str) -> List[SuppressionOccurrence]:
        """Scan a single file."""
        logger.debug("Scanning %s", file_path)
        return scan(file_path, encoding=self.encoding)

    def run(self, root: str) -> AuditResult:
        """
        Audit ``root`` and return the aggregated result.

        Raises:
            DirectoryNotFoundError: ``root`` is not a directory.
            AccessError, DecodeError: A file could not be read and the
                policy is ``abort``.
        """
        start_time = time.time()
        result = AuditResult(root=root)

        files = self.discover_files(root, result.warnings)
        logger.debug("Found %d candidate files under %s", len(files), root)

        skipped: List[str] = []

        def scan_or_skip(file_path: str) -> List[SuppressionOccurrence]:
            try:
                return self.scan_file(file_path)
            except AuditError as e:
                if not self.skips_errors:
                    raise
                self._record(e, result.warnings)
                skipped.append(file_path)
                return []

        result.rule_counts, result.file_rows = aggregate(files, scan_or_skip)
        result.files_skipped = len(skipped)
        result.files_scanned = len(files) - len(skipped)
        result.scan_time_seconds = round(time.time() - start_time, 3)

        logger.info(
            "Scanned %d files, %d suppressions across %d rules",
            result.files_scanned, result.total_occurrences, len(result.rule_counts),
        )
        return result

    def _record(self, error: AuditError, warnings: Optional[List[str]]) -> None:
        logger.warning("%s (skipped)", error)
        if warnings is not None:
            warnings.append(str(error))
