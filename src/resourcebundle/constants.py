"""Shared constants for resourcebundle.

Centralizes the wire-level names and defaults used by the codec, the
archive format, and the interchange document. Placing them here keeps the
formats in one place and avoids circular imports between the localization
submodules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Codec
    "KEY_VALUE_SEPARATOR",
    "TEXT_ENCODING",
    "TEXT_ERRORS",
    # Archive
    "META_ENTRY_NAME",
    "META_DEFAULT_LANGUAGE_KEY",
    "META_DEFAULT_LOCALE_KEY",
    "BUNDLE_ENTRY_EXTENSION",
    "BUNDLE_NAME_SEPARATOR",
    "ARCHIVE_ENTRY_TIMESTAMP",
    # Document
    "DOCUMENT_LANGUAGE_KEY",
    "DOCUMENT_LOCALE_KEY",
    "DOCUMENT_LEGACY_LOCALE_KEY",
    "DOCUMENT_DEFAULT_KEY",
    "DOCUMENT_BUNDLES_KEY",
    "DOCUMENT_TEXT_MAP_KEY",
    # Lookup
    "FALLBACK_MISSING_TEXT",
]

# ============================================================================
# CODEC
# ============================================================================

# Lines are split at the first occurrence only; values may contain "=".
KEY_VALUE_SEPARATOR: str = "="

# surrogateescape makes decode total over arbitrary bytes and lets encode
# reproduce the original bytes exactly.
TEXT_ENCODING: str = "utf-8"
TEXT_ERRORS: str = "surrogateescape"

# ============================================================================
# ARCHIVE
# ============================================================================

META_ENTRY_NAME: str = "meta.properties"
META_DEFAULT_LANGUAGE_KEY: str = "defaultLang"
META_DEFAULT_LOCALE_KEY: str = "defaultLocal"

BUNDLE_ENTRY_EXTENSION: str = "properties"
BUNDLE_NAME_SEPARATOR: str = "_"

# Earliest timestamp a ZIP entry can carry. Pinning it makes exports of
# equal containers byte-identical.
ARCHIVE_ENTRY_TIMESTAMP: tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)

# ============================================================================
# DOCUMENT
# ============================================================================

DOCUMENT_LANGUAGE_KEY: str = "languageCode"
DOCUMENT_LOCALE_KEY: str = "localeCode"
# Older producers spelled the locale field "localCode".
DOCUMENT_LEGACY_LOCALE_KEY: str = "localCode"
DOCUMENT_DEFAULT_KEY: str = "default"
DOCUMENT_BUNDLES_KEY: str = "bundles"
DOCUMENT_TEXT_MAP_KEY: str = "textMap"

# ============================================================================
# LOOKUP
# ============================================================================

# Returned by ResourceBundle.get() when no bundle provides the key.
FALLBACK_MISSING_TEXT: str = ""
