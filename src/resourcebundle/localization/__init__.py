"""Resource bundle container package.

Provides the full container stack: type aliases, the single-locale Bundle,
the ResourceBundle container with fallback lookup, and its two
serialization surfaces.

Submodules:
    types     - PEP 695 type aliases (LanguageCode, LocaleCode, TextKey, ...)
    bundle    - Bundle (one language/locale text mapping)
    container - ResourceBundle (bundle set, default, fallback lookup)
    archive   - ZIP archive import/export
    document  - JSON interchange document import/export

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from resourcebundle.localization.types import (
    BundleKey,
    Document,
    LanguageCode,
    LocaleCode,
    TextKey,
)
from resourcebundle.localization.bundle import Bundle
from resourcebundle.localization.container import ResourceBundle
from resourcebundle.localization.archive import export_archive, import_archive
from resourcebundle.localization.document import (
    dumps,
    export_document,
    import_document,
    loads,
)

__all__ = [
    # Containers
    "Bundle",
    "ResourceBundle",
    # Archive surface
    "export_archive",
    "import_archive",
    # Document surface
    "dumps",
    "export_document",
    "import_document",
    "loads",
    # Type aliases for user code type annotations
    "BundleKey",
    "Document",
    "LanguageCode",
    "LocaleCode",
    "TextKey",
]
