"""Resource bundle exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Hierarchy:
    ResourceBundleError
    ├─ DuplicateBundleError (pair already present in the container)
    ├─ MissingDefaultBundleError (operation needs a default bundle)
    └─ BundleFormatError (corrupt input)
       ├─ ArchiveFormatError (unreadable ZIP, malformed entry name)
       └─ DocumentFormatError (invalid JSON, wrong document shape)

BundleFormatError itself is raised by the codec for unencodable texts.

Underlying I/O failures are not wrapped: OSError propagates unchanged.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArchiveFormatError",
    "BundleFormatError",
    "DocumentFormatError",
    "DuplicateBundleError",
    "MissingDefaultBundleError",
    "ResourceBundleError",
]


class ResourceBundleError(Exception):
    """Base exception for all resource bundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ResourceBundleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DuplicateBundleError(ResourceBundleError):
    """A bundle with the same (language_code, locale_code) already exists.

    The container is left unchanged. Callers decide whether to skip the
    bundle, remove the existing one first, or abort.

    Attributes:
        language_code: Language code of the rejected bundle
        locale_code: Locale code of the rejected bundle
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language_code: str = "",
        locale_code: str = "",
    ) -> None:
        super().__init__(message)
        self.language_code = language_code
        self.locale_code = locale_code


class MissingDefaultBundleError(ResourceBundleError):
    """The container has no default bundle but the operation needs one.

    Raised by archive export: the metadata entry cannot omit the default.
    """


class BundleFormatError(ResourceBundleError):
    """Serialized input is corrupt, or texts have no serialized form.

    Never recovered silently; no partial container is returned.
    """


class ArchiveFormatError(BundleFormatError):
    """Archive blob is unreadable or contains a malformed entry name.

    Attributes:
        entry_name: Offending entry name, or None for whole-archive failures
    """

    def __init__(self, message: str | Diagnostic, *, entry_name: str | None = None) -> None:
        super().__init__(message)
        self.entry_name = entry_name


class DocumentFormatError(BundleFormatError):
    """Interchange document is not valid JSON or has the wrong structure."""
