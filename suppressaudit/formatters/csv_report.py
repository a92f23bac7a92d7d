"""
CSV report generation.

Writes the rule count and file detail reports side by side. Both
reports are staged as temporary files in the output directory and only
moved into place once both have been written completely, so a failed
run never leaves one fresh report next to a stale or partial one.
"""

import csv
import io
import os
import tempfile
from typing import List, NamedTuple, Sequence

from suppressaudit.core.errors import WriteError
from suppressaudit.core.findings import AuditResult, FileDetailRow, RuleCountMap


RULES_COUNT_FILENAME = "rules_count_report.csv"
FILE_DETAILS_FILENAME = "file_details_report.csv"

RULES_COUNT_HEADER = ["Rule", "Count"]
FILE_DETAILS_HEADER = ["Filename", "Filepath", "Applied Rules"]


class ReportPaths(NamedTuple):
    """Locations of the two generated reports."""
    rules_count: str
    file_details: str


def _to_csv(header: Sequence[str], rows: Sequence[Sequence]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def format_rules_count(rule_counts: RuleCountMap) -> str:
    """Render the ``Rule,Count`` report."""
    return _to_csv(RULES_COUNT_HEADER, list(rule_counts.items()))


def format_file_details(file_rows: Sequence[FileDetailRow]) -> str:
    """Render the ``Filename,Filepath,Applied Rules`` report."""
    return _to_csv(FILE_DETAILS_HEADER, [row.to_row() for row in file_rows])


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _stage(output_dir: str, final_name: str, content: str) -> str:
    fd, staged_path = tempfile.mkstemp(prefix=f".{final_name}.", suffix=".tmp", dir=output_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(staged_path, _default_file_mode())
    except BaseException:
        _discard([staged_path])
        raise
    return staged_path


def _discard(paths: List[str]) -> None:
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass


def write_reports(result: AuditResult, output_dir: str) -> ReportPaths:
    """
    Write both CSV reports for ``result`` into ``output_dir``.

    The directory is created if it does not exist.

    Returns:
        ReportPaths with the absolute paths of the written reports.

    Raises:
        WriteError: A report could not be written; neither report is
            left half-written.
    """
    output_dir = os.path.abspath(output_dir)
    paths = ReportPaths(
        rules_count=os.path.join(output_dir, RULES_COUNT_FILENAME),
        file_details=os.path.join(output_dir, FILE_DETAILS_FILENAME),
    )
    contents = (
        format_rules_count(result.rule_counts),
        format_file_details(result.file_rows),
    )

    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        raise WriteError(output_dir, e.strerror or str(e)) from e

    staged: List[str] = []
    current = paths.rules_count
    try:
        for final_path, content in zip(paths, contents):
            current = final_path
            staged.append(_stage(output_dir, os.path.basename(final_path), content))
        for staged_path, final_path in zip(staged, paths):
            current = final_path
            os.replace(staged_path, final_path)
    except OSError as e:
        _discard(staged)
        raise WriteError(current, e.strerror or str(e)) from e

    return paths
