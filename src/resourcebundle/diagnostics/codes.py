"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for container, archive,
and interchange document failures.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Container errors (uniqueness, default selection)
        2000-2999: Archive errors (ZIP blob, entry names)
        3000-3999: Interchange document errors (JSON structure)
        4000-4999: Text codec errors (unencodable texts)
    """

    # Container errors (1000-1999)
    DUPLICATE_BUNDLE = 1001
    DEFAULT_BUNDLE_MISSING = 1002

    # Archive errors (2000-2999)
    ARCHIVE_UNREADABLE = 2001
    ARCHIVE_ENTRY_NAME_INVALID = 2002

    # Document errors (3000-3999)
    DOCUMENT_UNREADABLE = 3001
    DOCUMENT_STRUCTURE_INVALID = 3002
    DOCUMENT_FIELD_INVALID = 3003

    # Codec errors (4000-4999)
    TEXT_UNENCODABLE = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: Archive entry name or document path where the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[ARCHIVE_ENTRY_NAME_INVALID]: Archive entry 'broken' is not ...
              --> broken
              = help: Name bundle entries <language>_<locale>.properties

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
