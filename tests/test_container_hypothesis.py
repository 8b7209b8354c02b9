"""Hypothesis property-based tests for ResourceBundle.

Validates uniqueness, lookup totality and the fallback ordering
(exact pair -> language only -> default) on generated containers.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from resourcebundle import Bundle, DuplicateBundleError, ResourceBundle
from tests.strategies import (
    language_codes,
    locale_codes,
    resource_bundles,
    text_keys,
    text_maps,
)


def _reference_get(rb: ResourceBundle, key: str) -> str:
    """Straightforward restatement of the lookup rules."""
    target_language, target_locale = rb.target
    exact = [b for b in rb.bundles if b.pair == (target_language, target_locale)]
    same_language = [b for b in rb.bundles if b.language_code == target_language]
    found = exact[0] if exact else same_language[0] if same_language else None

    if found is not None and key in found.text_map:
        return found.text_map[key]
    if found is not None and found is rb.default:
        return ""
    if rb.default is not None and key in rb.default.text_map:
        return rb.default.text_map[key]
    return ""


class TestContainerProperties:
    """Universal properties of generated containers."""

    @given(rb=resource_bundles(), key=text_keys)
    def test_get_matches_reference_rules(self, rb: ResourceBundle, key: str) -> None:
        """get() follows the documented resolution order for any key."""
        event(f"target_present={rb.target in rb}")
        assert rb.get(key) == _reference_get(rb, key)

    @given(rb=resource_bundles())
    def test_keys_of_resolved_bundle_returned_verbatim(self, rb: ResourceBundle) -> None:
        """Every key of the resolved bundle is returned verbatim."""
        found = rb.find_bundle()
        if found is None:
            found = rb.default
        assert found is not None
        for key, text in found.text_map.items():
            assert rb.get(key) == text

    @given(rb=resource_bundles())
    def test_default_is_list_entry(self, rb: ResourceBundle) -> None:
        """Generated containers keep the default shared with the list."""
        assert any(b is rb.default for b in rb.bundles)

    @given(rb=resource_bundles(), text_map=text_maps())
    def test_duplicate_add_rejected_and_unchanged(
        self, rb: ResourceBundle, text_map: dict[str, str]
    ) -> None:
        """Re-adding any present pair fails and leaves the container unchanged."""
        existing = rb.bundles[0]
        before = rb.bundles
        default = rb.default

        with pytest.raises(DuplicateBundleError):
            rb.add_bundle(Bundle(existing.language_code, existing.locale_code, text_map))

        assert rb.bundles == before
        assert all(a is b for a, b in zip(rb.bundles, before, strict=True))
        assert rb.default is default

    @given(
        language=language_codes,
        locales=st.lists(locale_codes, min_size=2, max_size=4, unique=True),
        key=text_keys,
    )
    def test_exact_match_beats_language_match(
        self, language: str, locales: list[str], key: str
    ) -> None:
        """With several same-language bundles the exact locale is preferred."""
        rb = ResourceBundle(language, locales[-1])
        for locale in locales:
            rb.add_bundle(Bundle(language, locale, {key: locale}), is_default=locale == locales[0])

        event(f"locale_count={len(locales)}")
        assert rb.get(key) == locales[-1]
