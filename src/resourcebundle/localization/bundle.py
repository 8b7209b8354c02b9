"""Single-locale text bundle.

A Bundle holds the key-to-text mapping of one (language_code, locale_code)
pair together with its codec bindings. Bundles are plain mutable records:
a ResourceBundle shares them by identity, so edits made through any
handle are visible through every other.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from resourcebundle import codec
from resourcebundle.constants import BUNDLE_NAME_SEPARATOR, FALLBACK_MISSING_TEXT
from resourcebundle.localization.types import BundleKey, LanguageCode, LocaleCode, TextKey

__all__ = ["Bundle"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Bundle:
    """Texts for one language/locale pair.

    Equality compares field values; identity (``is``) is what the
    container uses to recognize its default bundle.

    Example:
        >>> bundle = Bundle.from_text("en", "GB", b"greeting=Hello\\nfarewell=Bye\\n")
        >>> bundle.get("greeting")
        'Hello'
        >>> bundle.to_text()
        b'greeting=Hello\\nfarewell=Bye\\n'

    Attributes:
        language_code: Language identifier (e.g., "en"), not unique alone
        locale_code: Locale identifier (e.g., "US") disambiguating variants
        text_map: Mapping from key to localized text
    """

    language_code: LanguageCode
    locale_code: LocaleCode
    text_map: dict[TextKey, str] = field(default_factory=dict)

    @classmethod
    def from_text(
        cls, language_code: LanguageCode, locale_code: LocaleCode, data: bytes
    ) -> Bundle:
        """Create a bundle from ``key=value`` text.

        Never fails on content: lines without a separator are skipped.
        """
        return cls(language_code, locale_code, codec.decode(data))

    @classmethod
    def from_file(
        cls, language_code: LanguageCode, locale_code: LocaleCode, path: str | Path
    ) -> Bundle:
        """Create a bundle from a ``key=value`` file on disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        with Path(path).open("rb") as stream:
            text_map = codec.decode_stream(stream)
        logger.debug(
            "Loaded bundle %s from %s (%d keys)",
            f"{language_code}{BUNDLE_NAME_SEPARATOR}{locale_code}",
            path,
            len(text_map),
        )
        return cls(language_code, locale_code, text_map)

    def to_text(self) -> bytes:
        """Encode the text map as ``key=value`` lines."""
        return codec.encode(self.text_map)

    @property
    def pair(self) -> BundleKey:
        """The (language_code, locale_code) pair identifying this bundle."""
        return (self.language_code, self.locale_code)

    @property
    def name(self) -> str:
        """Bundle name as used for archive entries (e.g., "en_US")."""
        return f"{self.language_code}{BUNDLE_NAME_SEPARATOR}{self.locale_code}"

    def matches(self, language_code: LanguageCode, locale_code: LocaleCode) -> bool:
        """Check whether this bundle is keyed by the given pair."""
        return self.language_code == language_code and self.locale_code == locale_code

    def get(self, key: TextKey, fallback: str = FALLBACK_MISSING_TEXT) -> str:
        """Return the text for ``key``, or ``fallback`` if absent."""
        return self.text_map.get(key, fallback)

    def __contains__(self, key: object) -> bool:
        return key in self.text_map
