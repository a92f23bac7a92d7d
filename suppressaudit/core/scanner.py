"""
Extraction of ESLint suppression directives from source text.

Matching is purely textual: each line is searched for an
``eslint-disable-next-line <rule>`` directive first and, failing that,
for an ``eslint-disable <rule>`` directive. At most one occurrence is
recorded per line, and no comment or multi-line awareness is attempted.
"""

import io
import re
from typing import Iterable, Iterator, List, Optional

from suppressaudit.core.errors import AccessError, DecodeError
from suppressaudit.core.findings import SuppressionOccurrence


# Checked in order; the first pattern that matches a line wins.
NEXT_LINE_PATTERN = re.compile(r"eslint-disable-next-line ([^\s]+)")
DISABLE_PATTERN = re.compile(r"eslint-disable ([^\s]+)")

DIRECTIVE_PATTERNS = (NEXT_LINE_PATTERN, DISABLE_PATTERN)


def match_line(line: str) -> Optional[str]:
    """Return the rule suppressed on ``line``, or None."""
    for pattern in DIRECTIVE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(1)
    return None


def scan_lines(lines: Iterable[str]) -> Iterator[SuppressionOccurrence]:
    """Yield the suppressions found in ``lines``, numbering lines from 1."""
    for line_number, line in enumerate(lines, start=1):
        rule = match_line(line)
        if rule is not None:
            yield SuppressionOccurrence(rule=rule, line=line_number)


def scan_content(content: str) -> List[SuppressionOccurrence]:
    """
    Scan in-memory source text.

    Useful for editor integrations and testing.
    """
    return list(scan_lines(io.StringIO(content, newline=None)))


def scan(file_path: str, encoding: str = "utf-8") -> List[SuppressionOccurrence]:
    """
    Scan a file line by line for suppression directives.

    Raises:
        AccessError: The file cannot be opened or read.
        DecodeError: The file is not valid text in ``encoding``.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return list(scan_lines(f))
    except UnicodeDecodeError as e:
        raise DecodeError(file_path, f"invalid {e.encoding} at byte {e.start}") from e
    except OSError as e:
        raise AccessError(file_path, e.strerror or str(e)) from e
