"""Hypothesis strategies for resourcebundle property-based testing.

Strategies are organized by domain:

- localization: codes, text maps, Bundles and ResourceBundles

Usage:
    from tests.strategies import resource_bundles, text_maps
"""

from .localization import (
    bundles,
    language_codes,
    locale_codes,
    resource_bundles,
    text_keys,
    text_maps,
    text_values,
)

__all__ = [
    "bundles",
    "language_codes",
    "locale_codes",
    "resource_bundles",
    "text_keys",
    "text_maps",
    "text_values",
]
