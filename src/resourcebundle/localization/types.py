"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user
code when annotating ResourceBundle call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import Any

__all__ = [
    "BundleKey",
    "Document",
    "LanguageCode",
    "LocaleCode",
    "TextKey",
]

type LanguageCode = str
"""Language identifier (e.g., 'en', 'pt', 'chr')."""

type LocaleCode = str
"""Locale identifier distinguishing variants of a language (e.g., 'US', 'GB')."""

type TextKey = str
"""Key of a localized text within a bundle (e.g., 'greeting')."""

type BundleKey = tuple[str, str]
"""The (language_code, locale_code) pair a bundle is unique by."""

type Document = dict[str, Any]
"""JSON-compatible interchange document for a whole ResourceBundle."""
