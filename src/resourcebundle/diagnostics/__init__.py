"""Diagnostic system for resource bundle errors.

Provides structured error diagnostics with codes, hints and locations.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArchiveFormatError,
    BundleFormatError,
    DocumentFormatError,
    DuplicateBundleError,
    MissingDefaultBundleError,
    ResourceBundleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArchiveFormatError",
    "BundleFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DocumentFormatError",
    "DuplicateBundleError",
    "ErrorTemplate",
    "MissingDefaultBundleError",
    "OutputFormat",
    "ResourceBundleError",
]
