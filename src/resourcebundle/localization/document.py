"""Interchange document import and export for ResourceBundle.

The document is one JSON-compatible value:

    {
        "languageCode": "en",
        "localeCode": "GB",
        "default": {"languageCode": "en", "localeCode": "US", "textMap": {...}},
        "bundles": [{"languageCode": ..., "localeCode": ..., "textMap": {...}}, ...]
    }

JSON cannot say that "default" is the same object as one of the entries in
"bundles", so the default is written by value and re-shared on import by
matching its (languageCode, localeCode) pair against the bundle list.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from resourcebundle.constants import (
    DOCUMENT_BUNDLES_KEY,
    DOCUMENT_DEFAULT_KEY,
    DOCUMENT_LANGUAGE_KEY,
    DOCUMENT_LEGACY_LOCALE_KEY,
    DOCUMENT_LOCALE_KEY,
    DOCUMENT_TEXT_MAP_KEY,
)
from resourcebundle.diagnostics import DocumentFormatError, ErrorTemplate
from resourcebundle.localization.bundle import Bundle
from resourcebundle.localization.container import ResourceBundle
from resourcebundle.localization.types import Document

__all__ = [
    "dumps",
    "export_document",
    "import_document",
    "loads",
]

logger = logging.getLogger(__name__)


def _bundle_to_document(bundle: Bundle) -> Document:
    return {
        DOCUMENT_LANGUAGE_KEY: bundle.language_code,
        DOCUMENT_LOCALE_KEY: bundle.locale_code,
        DOCUMENT_TEXT_MAP_KEY: dict(bundle.text_map),
    }


def export_document(resource_bundle: ResourceBundle) -> Document:
    """Serialize a ResourceBundle to an interchange document.

    The default bundle is written by value; a container without a default
    writes ``null``.
    """
    default = resource_bundle.default
    return {
        DOCUMENT_LANGUAGE_KEY: resource_bundle.language_code,
        DOCUMENT_LOCALE_KEY: resource_bundle.locale_code,
        DOCUMENT_DEFAULT_KEY: _bundle_to_document(default) if default is not None else None,
        DOCUMENT_BUNDLES_KEY: [_bundle_to_document(bundle) for bundle in resource_bundle],
    }


def _expect_object(value: object, path: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise DocumentFormatError(
            ErrorTemplate.document_structure_invalid(path, "object", type(value).__name__)
        )
    return value


def _require_str(node: Mapping[str, object], key: str, path: str) -> str:
    if key not in node:
        raise DocumentFormatError(ErrorTemplate.document_field_missing(path, key))
    value = node[key]
    if not isinstance(value, str):
        raise DocumentFormatError(
            ErrorTemplate.document_structure_invalid(
                f"{path}.{key}", "string", type(value).__name__
            )
        )
    return value


def _require_locale(node: Mapping[str, object], path: str) -> str:
    if DOCUMENT_LOCALE_KEY not in node and DOCUMENT_LEGACY_LOCALE_KEY in node:
        return _require_str(node, DOCUMENT_LEGACY_LOCALE_KEY, path)
    return _require_str(node, DOCUMENT_LOCALE_KEY, path)


def _bundle_from_document(value: object, path: str) -> Bundle:
    node = _expect_object(value, path)
    language_code = _require_str(node, DOCUMENT_LANGUAGE_KEY, path)
    locale_code = _require_locale(node, path)

    map_path = f"{path}.{DOCUMENT_TEXT_MAP_KEY}"
    raw_map = _expect_object(node.get(DOCUMENT_TEXT_MAP_KEY, {}), map_path)
    text_map: dict[str, str] = {}
    for key, text in raw_map.items():
        if not isinstance(text, str):
            raise DocumentFormatError(
                ErrorTemplate.document_structure_invalid(
                    f"{map_path}.{key}", "string", type(text).__name__
                )
            )
        text_map[key] = text
    return Bundle(language_code, locale_code, text_map)


def import_document(document: Mapping[str, object]) -> ResourceBundle:
    """Build a ResourceBundle from an interchange document.

    After the bundles are added, the default is re-shared with the list
    entry of the same pair. If no entry matches, the default is kept as a
    standalone bundle outside the list.

    Args:
        document: Parsed interchange document

    Returns:
        New ResourceBundle

    Raises:
        DocumentFormatError: If the document structure is invalid
        DuplicateBundleError: If two bundles share a pair
    """
    root = _expect_object(document, "$")
    language_code = _require_str(root, DOCUMENT_LANGUAGE_KEY, "$")
    locale_code = _require_locale(root, "$")

    default_node = root.get(DOCUMENT_DEFAULT_KEY)
    default = (
        _bundle_from_document(default_node, f"$.{DOCUMENT_DEFAULT_KEY}")
        if default_node is not None
        else None
    )

    bundle_nodes = root.get(DOCUMENT_BUNDLES_KEY, [])
    if not isinstance(bundle_nodes, list):
        raise DocumentFormatError(
            ErrorTemplate.document_structure_invalid(
                f"$.{DOCUMENT_BUNDLES_KEY}", "array", type(bundle_nodes).__name__
            )
        )

    resource_bundle = ResourceBundle(language_code, locale_code, default=default)
    for index, node in enumerate(bundle_nodes):
        resource_bundle.add_bundle(
            _bundle_from_document(node, f"$.{DOCUMENT_BUNDLES_KEY}[{index}]")
        )

    if default is not None and not resource_bundle.repair_default():
        logger.warning(
            "Document default %s is not among its bundles; keeping it standalone",
            default.name,
        )

    logger.info("Imported %d bundles from document", len(resource_bundle))
    return resource_bundle


def dumps(resource_bundle: ResourceBundle, *, indent: int | None = None) -> str:
    """Serialize a ResourceBundle to interchange JSON text."""
    return json.dumps(export_document(resource_bundle), ensure_ascii=False, indent=indent)


def loads(text: str | bytes) -> ResourceBundle:
    """Build a ResourceBundle from interchange JSON text.

    Raises:
        DocumentFormatError: If the text is not valid JSON or the document
            structure is invalid
        DuplicateBundleError: If two bundles share a pair
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentFormatError(ErrorTemplate.document_unreadable(str(e))) from e
    return import_document(document)
