"""
Exception types raised while auditing a source tree.

Every error carries the path it concerns so the CLI can report it
without further context.
"""

from typing import Optional


class AuditError(Exception):
    """Base class for all audit failures."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        if self.reason:
            return f"{self.path}: {self.reason}"
        return self.path


class DirectoryNotFoundError(AuditError):
    """The directory to audit does not exist or is not a directory."""

    def _message(self) -> str:
        return f"Directory not found: {self.path}"


class AccessError(AuditError):
    """A file or directory could not be listed, stat'd or read."""

    def _message(self) -> str:
        return f"Cannot access {super()._message()}"


class DecodeError(AuditError):
    """A file's content is not valid text in the configured encoding."""

    def _message(self) -> str:
        return f"Cannot decode {super()._message()}"


class WriteError(AuditError):
    """A report file could not be written."""

    def _message(self) -> str:
        return f"Cannot write report {super()._message()}"
