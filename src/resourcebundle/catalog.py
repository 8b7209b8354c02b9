"""Reference catalog of supported languages.

A fixed, read-only table of (display name, language code, locale code)
triples for populating language selection UIs. The container never
consults it: bundles may use any codes.

Localized display names come from Babel's CLDR data when the optional
``babel`` extra is installed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resourcebundle.constants import BUNDLE_NAME_SEPARATOR
from resourcebundle.core.babel_compat import get_unknown_locale_error
from resourcebundle.locale_utils import get_babel_locale
from resourcebundle.localization.types import LanguageCode, LocaleCode

__all__ = [
    "LANGUAGES",
    "Language",
    "find_language",
    "languages_for",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Language:
    """One selectable language/locale pair.

    Attributes:
        name: English display name (e.g., "English (UK)")
        language_code: Language identifier (e.g., "en")
        locale_code: Locale identifier (e.g., "GB")
    """

    name: str
    language_code: LanguageCode
    locale_code: LocaleCode

    @property
    def tag(self) -> str:
        """Bundle name for this pair (e.g., "en_GB")."""
        return f"{self.language_code}{BUNDLE_NAME_SEPARATOR}{self.locale_code}"

    def display_name(self, in_locale: str = "en") -> str:
        """Language name as written in ``in_locale``, from CLDR data.

        Only the language code is looked up; several catalog locale codes
        are not CLDR territories. Falls back to ``name`` when Babel does not
        know either locale.

        Raises:
            BabelImportError: If Babel is not installed

        Example:
            >>> find_language("de", "DE").display_name("de")
            'Deutsch'
        """
        unknown_locale_error = get_unknown_locale_error()
        try:
            locale = get_babel_locale(self.language_code)
            display = locale.get_display_name(get_babel_locale(in_locale))
        except (unknown_locale_error, ValueError) as e:
            logger.debug("No CLDR name for %s in %s: %s", self.tag, in_locale, e)
            return self.name
        return display or self.name


LANGUAGES: tuple[Language, ...] = (
    Language("Amharic", "am", "AM"),
    Language("Arabic", "ar", "AR"),
    Language("Basque", "eu", "EU"),
    Language("Bengali", "bn", "BN"),
    Language("English (UK)", "en", "GB"),
    Language("Portuguese (Brazil)", "pt", "BR"),
    Language("Bulgarian", "bg", "BG"),
    Language("Catalan", "ca", "CA"),
    Language("Cherokee", "chr", "CHR"),
    Language("Croatian", "hr", "HR"),
    Language("Czech", "cs", "CS"),
    Language("Danish", "da", "DA"),
    Language("Dutch", "nl", "NL"),
    Language("English (US)", "en", "EN"),
    Language("Estonian", "et", "ET"),
    Language("Filipino", "fil", "FIL"),
    Language("Finnish", "fi", "FI"),
    Language("French", "fr", "FR"),
    Language("German", "de", "DE"),
    Language("Greek", "el", "EL"),
    Language("Gujarati", "gu", "GU"),
    Language("Hebrew", "iw", "IW"),
    Language("Hindi", "hi", "HI"),
    Language("Hungarian", "hu", "HU"),
    Language("Icelandic", "is", "IS"),
    Language("Indonesian", "id", "ID"),
    Language("Italian", "it", "IT"),
    Language("Japanese", "ja", "JA"),
    Language("Kannada", "kn", "KN"),
    Language("Korean", "ko", "KO"),
    Language("Latvian", "lv", "LV"),
    Language("Lithuanian", "lt", "LT"),
    Language("Malay", "ms", "MS"),
    Language("Malayalam", "ml", "ML"),
    Language("Marathi", "mr", "MR"),
    Language("Norwegian", "no", "NO"),
    Language("Polish", "pl", "PL"),
    Language("Portuguese (Portugal)", "pt", "PT"),
    Language("Romanian", "ro", "RO"),
    Language("Russian", "ru", "RU"),
    Language("Serbian", "sr", "SR"),
    Language("Chinese (PRC)", "zh", "CN"),
    Language("Slovak", "sk", "SK"),
    Language("Slovenian", "sl", "SL"),
    Language("Spanish", "es", "ES"),
    Language("Swahili", "sw", "SW"),
    Language("Swedish", "sv", "SV"),
    Language("Tamil", "ta", "TA"),
    Language("Telugu", "te", "TE"),
    Language("Thai", "th", "TH"),
    Language("Chinese (Taiwan)", "zh", "TW"),
    Language("Turkish", "tr", "TR"),
    Language("Urdu", "ur", "UR"),
    Language("Ukrainian", "uk", "UK"),
    Language("Vietnamese", "vi", "VI"),
    Language("Welsh", "cy", "CY"),
)


def languages_for(language_code: LanguageCode) -> tuple[Language, ...]:
    """All catalog entries for a language, in catalog order.

    Example:
        >>> [lang.locale_code for lang in languages_for("pt")]
        ['BR', 'PT']
    """
    return tuple(lang for lang in LANGUAGES if lang.language_code == language_code)


def find_language(language_code: LanguageCode, locale_code: LocaleCode) -> Language | None:
    """The catalog entry for an exact pair, or None."""
    for lang in LANGUAGES:
        if lang.language_code == language_code and lang.locale_code == locale_code:
            return lang
    return None
