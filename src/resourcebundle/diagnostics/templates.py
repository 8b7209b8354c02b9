"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from resourcebundle.constants import (
    BUNDLE_ENTRY_EXTENSION,
    BUNDLE_NAME_SEPARATOR,
    META_ENTRY_NAME,
)

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here so exception constructors never
    build their own strings.
    """

    @staticmethod
    def duplicate_bundle(language_code: str, locale_code: str) -> Diagnostic:
        """Bundle with the same language and locale already present.

        Args:
            language_code: Language code of the rejected bundle
            locale_code: Locale code of the rejected bundle

        Returns:
            Diagnostic for DUPLICATE_BUNDLE
        """
        name = f"{language_code}{BUNDLE_NAME_SEPARATOR}{locale_code}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_BUNDLE,
            message=f"Bundle '{name}' already exists",
            hint="Remove the existing bundle first or skip the duplicate",
        )

    @staticmethod
    def default_bundle_missing(operation: str) -> Diagnostic:
        """Operation requires a default bundle but none is set.

        Args:
            operation: Name of the operation that needed the default

        Returns:
            Diagnostic for DEFAULT_BUNDLE_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_BUNDLE_MISSING,
            message=f"{operation} requires a default bundle, but none is set",
            hint="Call add_bundle(bundle, is_default=True) or set_default()",
        )

    @staticmethod
    def archive_unreadable(reason: str) -> Diagnostic:
        """Archive blob is not a readable ZIP file.

        Args:
            reason: Underlying reader message

        Returns:
            Diagnostic for ARCHIVE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.ARCHIVE_UNREADABLE,
            message=f"Archive could not be read: {reason}",
            hint="Pass the bytes produced by ResourceBundle.to_archive()",
        )

    @staticmethod
    def archive_entry_name_invalid(entry_name: str, reason: str) -> Diagnostic:
        """Archive entry name does not follow <language>_<locale>.<ext>.

        Args:
            entry_name: Offending entry name
            reason: Which part of the name is missing

        Returns:
            Diagnostic for ARCHIVE_ENTRY_NAME_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.ARCHIVE_ENTRY_NAME_INVALID,
            message=f"Archive entry '{entry_name}' is not a bundle entry: {reason}",
            hint=(
                f"Name bundle entries <language>{BUNDLE_NAME_SEPARATOR}<locale>."
                f"{BUNDLE_ENTRY_EXTENSION}; only '{META_ENTRY_NAME}' is exempt"
            ),
            location=entry_name,
        )

    @staticmethod
    def document_unreadable(reason: str) -> Diagnostic:
        """Document text is not valid JSON.

        Args:
            reason: Underlying decoder message

        Returns:
            Diagnostic for DOCUMENT_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_UNREADABLE,
            message=f"Document is not valid JSON: {reason}",
        )

    @staticmethod
    def document_structure_invalid(path: str, expected: str, received: str) -> Diagnostic:
        """Document node has the wrong JSON type.

        Args:
            path: Dotted path of the node (e.g. 'bundles[2]')
            expected: Expected JSON type
            received: Python type name actually found

        Returns:
            Diagnostic for DOCUMENT_STRUCTURE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_STRUCTURE_INVALID,
            message=f"Expected {expected} at '{path}', got {received}",
            location=path,
        )

    @staticmethod
    def document_field_missing(path: str, field_name: str) -> Diagnostic:
        """Required document field is absent.

        Args:
            path: Dotted path of the enclosing object
            field_name: Name of the missing field

        Returns:
            Diagnostic for DOCUMENT_FIELD_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_FIELD_INVALID,
            message=f"Missing required field '{field_name}' in '{path}'",
            location=path,
        )

    @staticmethod
    def text_unencodable(key: str, reason: str) -> Diagnostic:
        """Key or text cannot be written as UTF-8.

        Args:
            key: Key of the offending entry (repr-escaped by the caller)
            reason: Underlying encoder message

        Returns:
            Diagnostic for TEXT_UNENCODABLE
        """
        return Diagnostic(
            code=DiagnosticCode.TEXT_UNENCODABLE,
            message=f"Entry {key} cannot be encoded: {reason}",
            hint="Lone surrogates other than U+DC80..U+DCFF have no byte form; remove them",
        )
