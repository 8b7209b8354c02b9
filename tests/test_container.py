"""Tests for ResourceBundle container management and fallback lookup.

Covers uniqueness, default identity sharing, target selection and the
locale -> language-only -> default resolution order.
"""

from __future__ import annotations

import logging

import pytest

from resourcebundle import Bundle, DuplicateBundleError, ResourceBundle
from resourcebundle.diagnostics import DiagnosticCode


class TestConstruction:
    """Test direct construction."""

    def test_empty_container(self) -> None:
        """New container has no bundles and no default."""
        rb = ResourceBundle("en", "US")

        assert rb.target == ("en", "US")
        assert rb.default is None
        assert rb.bundles == ()
        assert len(rb) == 0

    def test_constructor_keeps_default_reference(self, en_us: Bundle, en_gb: Bundle) -> None:
        """Default passed to the constructor is stored by reference."""
        rb = ResourceBundle("en", "GB", en_us, [en_us, en_gb])

        assert rb.default is en_us
        assert rb.bundles == (en_us, en_gb)

    def test_constructor_copies_list_not_bundles(self, en_us: Bundle) -> None:
        """Mutating the caller's list does not change the container."""
        source = [en_us]
        rb = ResourceBundle("en", "US", en_us, source)
        source.clear()

        assert rb.bundles[0] is en_us

    def test_repr(self, scenario: ResourceBundle) -> None:
        """repr shows target, default and bundle count."""
        assert repr(scenario) == (
            "ResourceBundle(target=('en', 'GB'), default='en_US', bundles=2)"
        )


class TestAddBundle:
    """Test add_bundle uniqueness and default binding."""

    def test_appends_in_order(self, en_us: Bundle, en_gb: Bundle) -> None:
        """Bundles keep insertion order."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(en_us)
        rb.add_bundle(en_gb)

        assert [b.name for b in rb] == ["en_US", "en_GB"]

    def test_is_default_shares_identity(self, en_us: Bundle) -> None:
        """is_default binds the very object that was appended."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(en_us, is_default=True)

        assert rb.default is rb.bundles[0]
        rb.default.text_map["new"] = "value"
        assert rb.bundles[0].text_map["new"] == "value"

    def test_duplicate_rejected(self, en_us: Bundle) -> None:
        """Second bundle with the same pair raises DuplicateBundleError."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(en_us)

        with pytest.raises(DuplicateBundleError) as exc_info:
            rb.add_bundle(Bundle("en", "US", {"other": "text"}))

        assert exc_info.value.language_code == "en"
        assert exc_info.value.locale_code == "US"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DUPLICATE_BUNDLE

    def test_duplicate_leaves_container_unchanged(self, en_us: Bundle) -> None:
        """Rejected insert changes neither bundles nor default."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(en_us, is_default=True)

        with pytest.raises(DuplicateBundleError):
            rb.add_bundle(Bundle("en", "US"), is_default=True)

        assert rb.bundles == (en_us,)
        assert rb.default is en_us

    def test_same_language_different_locale_allowed(self) -> None:
        """Uniqueness is by pair, not by language alone."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(Bundle("en", "US"))
        rb.add_bundle(Bundle("en", "GB"))

        assert len(rb) == 2

    def test_contains_by_pair(self, scenario: ResourceBundle) -> None:
        """Membership is tested with (language, locale) tuples."""
        assert ("en", "GB") in scenario
        assert ("fr", "FR") not in scenario
        assert "en_GB" not in scenario


class TestRemoveAndSetDefault:
    """Test remove_bundle, set_default and repair_default."""

    def test_remove_bundle(self, scenario: ResourceBundle, en_gb: Bundle) -> None:
        """remove_bundle drops and returns the bundle."""
        removed = scenario.remove_bundle("en", "GB")

        assert removed is en_gb
        assert not scenario.has_bundle("en", "GB")

    def test_remove_default_clears_default(
        self, scenario: ResourceBundle, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Removing the default bundle unsets the default with a warning."""
        with caplog.at_level(logging.WARNING, logger="resourcebundle"):
            scenario.remove_bundle("en", "US")

        assert scenario.default is None
        assert "Removed default bundle en_US" in caplog.text

    def test_remove_missing_raises(self, scenario: ResourceBundle) -> None:
        """Removing an absent pair raises KeyError."""
        with pytest.raises(KeyError):
            scenario.remove_bundle("fr", "FR")

    def test_set_default(self, scenario: ResourceBundle, en_gb: Bundle) -> None:
        """set_default binds the list entry with the pair."""
        assert scenario.set_default("en", "GB") is en_gb
        assert scenario.default is en_gb

    def test_set_default_missing_raises(self, scenario: ResourceBundle) -> None:
        """set_default for an absent pair raises KeyError and keeps the default."""
        default = scenario.default
        with pytest.raises(KeyError):
            scenario.set_default("fr", "FR")
        assert scenario.default is default

    def test_repair_default_rebinds_copy(self, en_us: Bundle) -> None:
        """A detached copy of a listed bundle is replaced by the list entry."""
        copy = Bundle("en", "US", dict(en_us.text_map))
        rb = ResourceBundle("en", "US", copy, [en_us])

        assert rb.repair_default() is True
        assert rb.default is en_us

    def test_repair_default_without_match(self, en_us: Bundle) -> None:
        """A default with no matching entry is left standalone."""
        standalone = Bundle("de", "DE")
        rb = ResourceBundle("en", "US", standalone, [en_us])

        assert rb.repair_default() is False
        assert rb.default is standalone

    def test_repair_default_without_default(self) -> None:
        """No default means nothing to repair."""
        assert ResourceBundle("en", "US").repair_default() is False


class TestFindBundle:
    """Test find_bundle resolution."""

    def test_exact_match_preferred(self, scenario: ResourceBundle, en_gb: Bundle) -> None:
        """Exact pair wins over an earlier same-language bundle."""
        assert scenario.find_bundle() is en_gb

    def test_language_only_fallback(self, scenario: ResourceBundle, en_us: Bundle) -> None:
        """Without an exact match the first same-language bundle is used."""
        scenario.set_target("en", "AU")
        assert scenario.find_bundle() is en_us

    def test_no_match(self, scenario: ResourceBundle) -> None:
        """Unknown language finds nothing; the default is not consulted."""
        scenario.set_target("fr", "FR")
        assert scenario.find_bundle() is None

    def test_explicit_arguments_drive_resolution(
        self, scenario: ResourceBundle, en_us: Bundle
    ) -> None:
        """Explicit language/locale arguments override the stored target."""
        assert scenario.find_bundle("en", "US") is en_us
        assert scenario.target == ("en", "GB")

    def test_partial_arguments_use_target_for_the_rest(
        self, scenario: ResourceBundle, en_us: Bundle
    ) -> None:
        """Omitted arguments fall back to the corresponding target field."""
        assert scenario.find_bundle(locale_code="US") is en_us
        assert scenario.find_bundle("fr") is None


class TestGet:
    """Test get() fallback semantics."""

    def test_reference_scenario(self, scenario: ResourceBundle) -> None:
        """Target en_GB, default en_US, then target fr_FR."""
        assert scenario.get("greeting") == "Hello"
        assert scenario.get("farewell") == "Bye"

        scenario.set_target("fr", "FR")
        assert scenario.get("greeting") == "Hi"
        assert scenario.get("unknown") == ""

    def test_found_bundle_missing_key_uses_default(self) -> None:
        """A key missing from the target bundle comes from the default."""
        rb = ResourceBundle("de", "DE")
        rb.add_bundle(Bundle("en", "US", {"only_default": "from default"}), is_default=True)
        rb.add_bundle(Bundle("de", "DE", {"greeting": "Hallo"}))

        assert rb.get("only_default") == "from default"

    def test_found_default_missing_key_returns_empty(self, en_us: Bundle) -> None:
        """When the resolved bundle is the default, a miss is final."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(en_us, is_default=True)

        assert rb.get("farewell") == ""

    def test_language_only_match_then_default(self) -> None:
        """Language-only match falls through to the default on a miss."""
        rb = ResourceBundle("en", "AU")
        rb.add_bundle(Bundle("de", "DE", {"a": "A-de", "b": "B-de"}), is_default=True)
        rb.add_bundle(Bundle("en", "GB", {"a": "A-gb"}))

        assert rb.get("a") == "A-gb"
        assert rb.get("b") == "B-de"

    def test_no_bundles_no_default(self) -> None:
        """Empty container returns empty text."""
        assert ResourceBundle("en", "US").get("anything") == ""

    def test_found_bundle_without_default(self) -> None:
        """A miss in the found bundle with no default returns empty text."""
        rb = ResourceBundle("en", "US")
        rb.add_bundle(Bundle("en", "US", {"a": "A"}))

        assert rb.get("a") == "A"
        assert rb.get("b") == ""

    def test_empty_value_is_a_hit(self) -> None:
        """An empty text is returned as found, not treated as missing."""
        rb = ResourceBundle("en", "GB")
        rb.add_bundle(Bundle("en", "US", {"k": "default"}), is_default=True)
        rb.add_bundle(Bundle("en", "GB", {"k": ""}))

        assert rb.get("k") == ""

    def test_edits_through_default_visible(self, scenario: ResourceBundle, en_us: Bundle) -> None:
        """Edits through the bundle handle are seen by later lookups."""
        scenario.set_target("fr", "FR")
        en_us.text_map["greeting"] = "Howdy"

        assert scenario.get("greeting") == "Howdy"


class TestTargetSelection:
    """Test set_target and set_target_locale."""

    def test_set_target(self, scenario: ResourceBundle) -> None:
        """set_target replaces both target fields."""
        scenario.set_target("en", "US")

        assert scenario.language_code == "en"
        assert scenario.locale_code == "US"
        assert scenario.get("greeting") == "Hi"

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en_GB", ("en", "GB")),
            ("en-GB", ("en", "GB")),
            ("fr", ("fr", "")),
        ],
    )
    def test_set_target_locale(
        self, scenario: ResourceBundle, code: str, expected: tuple[str, str]
    ) -> None:
        """Single locale codes are split into the target pair."""
        scenario.set_target_locale(code)
        assert scenario.target == expected

    def test_bare_language_uses_language_fallback(self, scenario: ResourceBundle) -> None:
        """A bare language target resolves through language-only matching."""
        scenario.set_target_locale("en")
        assert scenario.get("greeting") == "Hi"
