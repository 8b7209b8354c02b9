"""Resource bundle container with fallback lookup.

ResourceBundle owns an ordered list of Bundles (unique by language/locale
pair), a lookup target, and a default bundle shared by identity with its
entry in the list.

Lookup order for get():
    1. Bundle exactly matching the target (language_code, locale_code)
    2. First bundle matching the target language_code alone
    3. The default bundle
A bundle found in steps 1-2 that lacks the key defers to the default
bundle. Absence is never an error: get() returns an empty string.

Not safe for concurrent mutation; callers serialize writers themselves.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from resourcebundle.constants import FALLBACK_MISSING_TEXT
from resourcebundle.diagnostics import DuplicateBundleError, ErrorTemplate
from resourcebundle.locale_utils import split_locale
from resourcebundle.localization.bundle import Bundle
from resourcebundle.localization.types import (
    BundleKey,
    Document,
    LanguageCode,
    LocaleCode,
    TextKey,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["ResourceBundle"]

logger = logging.getLogger(__name__)


class ResourceBundle:
    """Set of bundles with a lookup target and a default bundle.

    The lookup target need not be present among the bundles; get() then
    resolves through the language-only match or the default bundle.

    Example:
        >>> us = Bundle("en", "US", {"greeting": "Hi"})
        >>> gb = Bundle("en", "GB", {"greeting": "Hello", "farewell": "Bye"})
        >>> rb = ResourceBundle("en", "GB")
        >>> rb.add_bundle(us, is_default=True)
        >>> rb.add_bundle(gb)
        >>> rb.get("farewell")
        'Bye'
        >>> rb.set_target("fr", "FR")
        >>> rb.get("greeting")
        'Hi'

    Attributes:
        language_code: Target language used by lookups
        locale_code: Target locale used by lookups
        default: Fallback bundle, an element of bundles by identity
        bundles: Bundles in insertion order
    """

    __slots__ = ("_bundles", "_default", "_language_code", "_locale_code")

    def __init__(
        self,
        language_code: LanguageCode,
        locale_code: LocaleCode,
        default: Bundle | None = None,
        bundles: Iterable[Bundle] | None = None,
    ) -> None:
        """Create a container directly.

        Neither uniqueness nor default membership is checked here. Pass a
        ``default`` that is already an element of ``bundles``, or build the
        container with add_bundle(..., is_default=True).

        Args:
            language_code: Target language for lookups
            locale_code: Target locale for lookups
            default: Fallback bundle (optional)
            bundles: Initial bundles (optional)
        """
        self._language_code = language_code
        self._locale_code = locale_code
        self._default = default
        self._bundles: list[Bundle] = list(bundles) if bundles is not None else []

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def language_code(self) -> LanguageCode:
        """Target language used by lookups."""
        return self._language_code

    @property
    def locale_code(self) -> LocaleCode:
        """Target locale used by lookups."""
        return self._locale_code

    @property
    def target(self) -> BundleKey:
        """Target (language_code, locale_code) pair."""
        return (self._language_code, self._locale_code)

    @property
    def default(self) -> Bundle | None:
        """Fallback bundle, or None if unset."""
        return self._default

    @property
    def bundles(self) -> tuple[Bundle, ...]:
        """Bundles in insertion order (read-only view)."""
        return tuple(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> Iterator[Bundle]:
        return iter(self._bundles)

    def __contains__(self, pair: object) -> bool:
        match pair:
            case (str() as language_code, str() as locale_code):
                return self.has_bundle(language_code, locale_code)
            case _:
                return False

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(rb)
            "ResourceBundle(target=('en', 'GB'), default='en_US', bundles=2)"
        """
        default = self._default.name if self._default is not None else None
        return (
            f"ResourceBundle(target={self.target!r}, default={default!r}, "
            f"bundles={len(self._bundles)})"
        )

    # ------------------------------------------------------------------
    # Target selection
    # ------------------------------------------------------------------

    def set_target(self, language_code: LanguageCode, locale_code: LocaleCode) -> None:
        """Change the (language_code, locale_code) pair lookups resolve against."""
        self._language_code = language_code
        self._locale_code = locale_code

    def set_target_locale(self, locale_code: str) -> None:
        """Change the lookup target from a single locale code.

        Accepts POSIX ("en_GB") and BCP-47 ("en-GB") spellings. A bare
        language ("en") sets an empty locale part.
        """
        self.set_target(*split_locale(locale_code))

    # ------------------------------------------------------------------
    # Bundle management
    # ------------------------------------------------------------------

    def has_bundle(self, language_code: LanguageCode, locale_code: LocaleCode) -> bool:
        """Check whether a bundle with exactly this pair is present."""
        return self._get_exact(language_code, locale_code) is not None

    def add_bundle(self, bundle: Bundle, is_default: bool = False) -> None:
        """Append a bundle, optionally making it the default.

        Args:
            bundle: Bundle to add (stored by reference, not copied)
            is_default: Also bind ``bundle`` as the default bundle

        Raises:
            DuplicateBundleError: If a bundle with the same pair exists.
                The container is left unchanged.
        """
        if self.has_bundle(bundle.language_code, bundle.locale_code):
            raise DuplicateBundleError(
                ErrorTemplate.duplicate_bundle(bundle.language_code, bundle.locale_code),
                language_code=bundle.language_code,
                locale_code=bundle.locale_code,
            )
        self._bundles.append(bundle)
        if is_default:
            self._default = bundle
        logger.debug("Added bundle %s (default=%s)", bundle.name, is_default)

    def remove_bundle(self, language_code: LanguageCode, locale_code: LocaleCode) -> Bundle:
        """Drop the bundle with this pair and return it.

        Removing the default bundle also clears the default.

        Raises:
            KeyError: If no bundle with this pair is present
        """
        bundle = self._get_exact(language_code, locale_code)
        if bundle is None:
            raise KeyError((language_code, locale_code))
        self._bundles = [b for b in self._bundles if b is not bundle]
        if bundle is self._default:
            logger.warning("Removed default bundle %s; default is now unset", bundle.name)
            self._default = None
        return bundle

    def set_default(self, language_code: LanguageCode, locale_code: LocaleCode) -> Bundle:
        """Bind the default to the list entry with this pair.

        Returns:
            The bundle now serving as default

        Raises:
            KeyError: If no bundle with this pair is present
        """
        bundle = self._get_exact(language_code, locale_code)
        if bundle is None:
            raise KeyError((language_code, locale_code))
        self._default = bundle
        return bundle

    def repair_default(self) -> bool:
        """Re-share the default bundle with its entry in the bundle list.

        Looks up the list entry whose pair equals the current default's
        pair and binds it as default, so that edits through either handle
        are visible through both.

        Returns:
            True if the default is now an element of the bundle list,
            False if there is no default or no entry with its pair
        """
        if self._default is None:
            return False
        entry = self._get_exact(self._default.language_code, self._default.locale_code)
        if entry is None:
            return False
        self._default = entry
        return True

    def _get_exact(self, language_code: LanguageCode, locale_code: LocaleCode) -> Bundle | None:
        for bundle in self._bundles:
            if bundle.matches(language_code, locale_code):
                return bundle
        return None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_bundle(
        self,
        language_code: LanguageCode | None = None,
        locale_code: LocaleCode | None = None,
    ) -> Bundle | None:
        """Find the bundle serving a language/locale pair.

        Tries an exact pair match first, then the first bundle with the
        same language regardless of locale. The default bundle is NOT
        consulted here.

        Args:
            language_code: Language to search for (defaults to the target)
            locale_code: Locale to search for (defaults to the target)

        Returns:
            Matching bundle, or None
        """
        if language_code is None:
            language_code = self._language_code
        if locale_code is None:
            locale_code = self._locale_code

        exact = self._get_exact(language_code, locale_code)
        if exact is not None:
            return exact
        for bundle in self._bundles:
            if bundle.language_code == language_code:
                return bundle
        return None

    def get(self, key: TextKey) -> str:
        """Look up the text for ``key`` using the current target.

        Returns:
            The localized text, or an empty string if neither the target's
            bundle nor the default bundle provides ``key``
        """
        bundle = self.find_bundle()
        if bundle is None:
            bundle = self._default
            if bundle is None:
                return FALLBACK_MISSING_TEXT

        if key in bundle.text_map:
            return bundle.text_map[key]

        if bundle is self._default or self._default is None:
            return FALLBACK_MISSING_TEXT

        text = self._default.text_map.get(key)
        if text is None:
            return FALLBACK_MISSING_TEXT
        logger.debug("Key '%s' resolved from default bundle %s", key, self._default.name)
        return text

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_archive(
        cls, language_code: LanguageCode, locale_code: LocaleCode, data: bytes
    ) -> ResourceBundle:
        """Import a container from archive bytes. See archive.import_archive()."""
        from resourcebundle.localization.archive import import_archive  # noqa: PLC0415

        return import_archive(language_code, locale_code, data)

    def to_archive(self) -> bytes:
        """Export this container as archive bytes. See archive.export_archive()."""
        from resourcebundle.localization.archive import export_archive  # noqa: PLC0415

        return export_archive(self)

    @classmethod
    def from_document(cls, document: Mapping[str, object]) -> ResourceBundle:
        """Import a container from an interchange document."""
        from resourcebundle.localization.document import import_document  # noqa: PLC0415

        return import_document(document)

    def to_document(self) -> Document:
        """Export this container as an interchange document."""
        from resourcebundle.localization.document import export_document  # noqa: PLC0415

        return export_document(self)

    @classmethod
    def from_json(cls, text: str | bytes) -> ResourceBundle:
        """Import a container from interchange JSON text."""
        from resourcebundle.localization.document import loads  # noqa: PLC0415

        return loads(text)

    def to_json(self, *, indent: int | None = None) -> str:
        """Export this container as interchange JSON text."""
        from resourcebundle.localization.document import dumps  # noqa: PLC0415

        return dumps(self, indent=indent)
