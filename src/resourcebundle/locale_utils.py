"""Locale utilities for target selection and CLDR access.

Centralizes locale code handling: BCP-47 to POSIX normalization, splitting
a locale code into the (language_code, locale_code) pair that bundles are
keyed by, cached Babel locale access, and process locale detection.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from resourcebundle.constants import BUNDLE_NAME_SEPARATOR
from resourcebundle.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale",
]

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_FALLBACK_SYSTEM_LOCALE = "en_US"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while bundle names and Babel use
    underscores (en_US). Case is preserved: bundle pairs compare exactly.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", BUNDLE_NAME_SEPARATOR)


def split_locale(locale_code: str) -> tuple[str, str]:
    """Split a locale code into (language_code, locale_code).

    The split happens at the first separator, so script or variant
    subtags stay with the locale part. A bare language yields an empty
    locale part, which only ever matches through language-only fallback.

    Args:
        locale_code: Locale code such as "en_GB", "en-GB" or "en"

    Returns:
        Tuple of (language_code, locale_code)

    Example:
        >>> split_locale("en-GB")
        ('en', 'GB')
        >>> split_locale("zh_Hant_TW")
        ('zh', 'Hant_TW')
        >>> split_locale("fr")
        ('fr', '')
    """
    language, _, locale = normalize_locale(locale_code).partition(BUNDLE_NAME_SEPARATOR)
    return language, locale


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel locales."""
    get_babel_locale.cache_clear()


def _usable_locale(value: str | None) -> str | None:
    """Strip the encoding suffix; None for empty or pseudo locales."""
    if not value:
        return None
    code = value.partition(".")[0]
    if not code or code in _PSEUDO_LOCALES:
        return None
    return normalize_locale(code)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale code of the running process, for use as a lookup target.

    Pass the result to ResourceBundle.set_target_locale() so that get()
    resolves against the user's locale: an exact bundle if one exists,
    otherwise a bundle of the same language, otherwise the default.

    Sources, first usable one wins:
    1. locale.getlocale()
    2. LC_ALL, then LC_MESSAGES, then LANG

    "C" and "POSIX" are not usable; encoding suffixes (".UTF-8") are
    dropped.

    Args:
        raise_on_failure: Raise instead of returning "en_US" when no source
            is usable

    Returns:
        POSIX locale code such as "de_DE"

    Raises:
        RuntimeError: If raise_on_failure is True and no source is usable

    Example:
        >>> rb = ResourceBundle("en", "US")
        >>> rb.set_target_locale(get_system_locale())
        >>> rb.target  # with LANG=de_DE.UTF-8
        ('de', 'DE')
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        # Unparseable OS locale; the environment variables still apply.
        system_locale = None

    candidates = [system_locale, *(os.environ.get(var) for var in _LOCALE_ENV_VARS)]
    for candidate in candidates:
        code = _usable_locale(candidate)
        if code is not None:
            return code

    if raise_on_failure:
        msg = (
            "Could not determine the process locale for the lookup target. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return _FALLBACK_SYSTEM_LOCALE
