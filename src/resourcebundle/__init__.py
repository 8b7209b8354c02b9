"""resourcebundle - localized text resource bundles with fallback lookup.

Manages named sets of key-to-text mappings, one per (language, locale)
pair, with a default set used as a fallback when a requested key, locale
or language is missing. Containers serialize to a ZIP archive of
``key=value`` files and to a single JSON interchange document.

Public API:
    Bundle - Texts for one language/locale pair
    ResourceBundle - Bundle set with target selection and fallback lookup
    LANGUAGES - Read-only reference catalog of supported languages

Exceptions:
    ResourceBundleError - Base exception class
    DuplicateBundleError - Language/locale pair already present
    BundleFormatError - Corrupt archive or document input
    MissingDefaultBundleError - Export without a default bundle

Submodules:
    resourcebundle.codec - key=value text codec
    resourcebundle.localization - Containers, archive and document surfaces
    resourcebundle.catalog - Language reference table
    resourcebundle.diagnostics - Error types and structured diagnostics
    resourcebundle.locale_utils - Locale code helpers
"""

# Essential Public API - Minimal exports for clean namespace
from .catalog import LANGUAGES, Language
from .diagnostics import (
    ArchiveFormatError,
    BundleFormatError,
    DocumentFormatError,
    DuplicateBundleError,
    MissingDefaultBundleError,
    ResourceBundleError,
)
from .localization import Bundle, ResourceBundle

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resourcebundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LANGUAGES",
    "ArchiveFormatError",
    "Bundle",
    "BundleFormatError",
    "DocumentFormatError",
    "DuplicateBundleError",
    "Language",
    "MissingDefaultBundleError",
    "ResourceBundle",
    "ResourceBundleError",
    "__version__",
]
