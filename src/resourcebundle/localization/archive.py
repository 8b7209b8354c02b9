"""Archive import and export for ResourceBundle.

Archive layout (ZIP):
    meta.properties             defaultLang=<code>\\ndefaultLocal=<code>
    <lang>_<locale>.properties  key=value lines, one per text

Every non-metadata entry name is split at its first "." (the extension is
otherwise ignored) and the stem at its first "_" into the bundle's
(language_code, locale_code). Malformed names fail the whole import.

Archives are built and read fully in memory.

Python 3.13+.
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib

from resourcebundle import codec
from resourcebundle.constants import (
    ARCHIVE_ENTRY_TIMESTAMP,
    BUNDLE_ENTRY_EXTENSION,
    BUNDLE_NAME_SEPARATOR,
    KEY_VALUE_SEPARATOR,
    META_DEFAULT_LANGUAGE_KEY,
    META_DEFAULT_LOCALE_KEY,
    META_ENTRY_NAME,
    TEXT_ENCODING,
    TEXT_ERRORS,
)
from resourcebundle.diagnostics import (
    ArchiveFormatError,
    ErrorTemplate,
    MissingDefaultBundleError,
)
from resourcebundle.localization.bundle import Bundle
from resourcebundle.localization.container import ResourceBundle
from resourcebundle.localization.types import BundleKey, LanguageCode, LocaleCode

__all__ = [
    "entry_name",
    "export_archive",
    "import_archive",
    "parse_entry_name",
]

logger = logging.getLogger(__name__)


def entry_name(bundle: Bundle) -> str:
    """Archive entry name for ``bundle`` (e.g., "en_US.properties").

    The name must parse back to the same pair, so the language code cannot
    hold "_" and neither code can hold ".". The locale code may hold "_"
    (e.g., "zh_Hant_TW.properties").

    Raises:
        ArchiveFormatError: If the pair cannot be written as an entry name
    """
    name = f"{bundle.name}.{BUNDLE_ENTRY_EXTENSION}"
    if BUNDLE_NAME_SEPARATOR in bundle.language_code:
        reason = f"language code '{bundle.language_code}' contains '{BUNDLE_NAME_SEPARATOR}'"
    elif "." in bundle.name:
        reason = f"bundle name '{bundle.name}' contains '.'"
    else:
        return name
    raise ArchiveFormatError(
        ErrorTemplate.archive_entry_name_invalid(name, reason), entry_name=name
    )


def parse_entry_name(name: str) -> BundleKey:
    """Split an archive entry name into (language_code, locale_code).

    Args:
        name: Entry name such as "en_US.properties"

    Returns:
        Tuple of (language_code, locale_code)

    Raises:
        ArchiveFormatError: If the name has no "." or no "_" before it

    Example:
        >>> parse_entry_name("pt_BR.properties")
        ('pt', 'BR')
        >>> parse_entry_name("zh_Hant_TW.properties")
        ('zh', 'Hant_TW')
    """
    stem, dot, _ = name.partition(".")
    if not dot:
        raise ArchiveFormatError(
            ErrorTemplate.archive_entry_name_invalid(name, "no '.' before an extension"),
            entry_name=name,
        )
    language_code, separator, locale_code = stem.partition(BUNDLE_NAME_SEPARATOR)
    if not separator:
        raise ArchiveFormatError(
            ErrorTemplate.archive_entry_name_invalid(
                name, f"no '{BUNDLE_NAME_SEPARATOR}' between language and locale"
            ),
            entry_name=name,
        )
    return language_code, locale_code


_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    # Unsupported compression method
    NotImplementedError,
    # Encrypted entry without a password
    RuntimeError,
)


def _read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> dict[str, str]:
    """Decode one entry; the entry stream is closed on every exit path.

    Damaged, encrypted or unsupported entries raise ArchiveFormatError.
    """
    try:
        with archive.open(info) as stream:
            return codec.decode_stream(stream)
    except _ENTRY_READ_ERRORS as e:
        raise ArchiveFormatError(
            ErrorTemplate.archive_unreadable(f"{info.filename}: {e}"),
            entry_name=info.filename,
        ) from e


def import_archive(
    language_code: LanguageCode, locale_code: LocaleCode, data: bytes
) -> ResourceBundle:
    """Build a ResourceBundle from archive bytes.

    The target pair is not taken from the archive; the caller supplies
    it. The default is bound to the bundle named by the metadata entry.
    If the metadata is missing or names no bundle in the archive, the
    default stays unset (lookups still resolve through the target).

    Args:
        language_code: Target language of the new container
        locale_code: Target locale of the new container
        data: Archive bytes as produced by export_archive()

    Returns:
        New ResourceBundle holding every bundle in the archive

    Raises:
        ArchiveFormatError: If the bytes are not a readable archive, an
            entry cannot be decompressed, or an entry name is malformed
        DuplicateBundleError: If two entries name the same pair
        OSError: If reading an entry fails
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise ArchiveFormatError(ErrorTemplate.archive_unreadable(str(e))) from e

    resource_bundle = ResourceBundle(language_code, locale_code)
    default_pair: BundleKey | None = None

    with archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            if info.filename == META_ENTRY_NAME:
                meta = _read_entry(archive, info)
                default_language = meta.get(META_DEFAULT_LANGUAGE_KEY)
                default_locale = meta.get(META_DEFAULT_LOCALE_KEY)
                if default_language is not None and default_locale is not None:
                    default_pair = (default_language, default_locale)
                continue

            bundle_language, bundle_locale = parse_entry_name(info.filename)
            text_map = _read_entry(archive, info)
            resource_bundle.add_bundle(Bundle(bundle_language, bundle_locale, text_map))
            logger.debug("Imported archive entry %s (%d keys)", info.filename, len(text_map))

    if default_pair is None:
        logger.warning("Archive has no usable %s; default bundle is unset", META_ENTRY_NAME)
    elif resource_bundle.has_bundle(*default_pair):
        resource_bundle.set_default(*default_pair)
    else:
        logger.warning(
            "Archive default %s names no bundle in the archive; default bundle is unset",
            BUNDLE_NAME_SEPARATOR.join(default_pair),
        )

    logger.info("Imported %d bundles from archive", len(resource_bundle))
    return resource_bundle


def _meta_text(default: Bundle) -> bytes:
    text = (
        f"{META_DEFAULT_LANGUAGE_KEY}{KEY_VALUE_SEPARATOR}{default.language_code}\n"
        f"{META_DEFAULT_LOCALE_KEY}{KEY_VALUE_SEPARATOR}{default.locale_code}"
    )
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def _write_entry(archive: zipfile.ZipFile, name: str, data: bytes) -> None:
    info = zipfile.ZipInfo(name, date_time=ARCHIVE_ENTRY_TIMESTAMP)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    archive.writestr(info, data)


def export_archive(resource_bundle: ResourceBundle) -> bytes:
    """Serialize a ResourceBundle to archive bytes.

    Writes the metadata entry first, then one entry per bundle in
    container order (the default bundle included under its own name).
    Entry timestamps are fixed, so equal containers produce identical bytes.

    Args:
        resource_bundle: Container to export

    Returns:
        ZIP archive bytes

    Raises:
        MissingDefaultBundleError: If the container has no default bundle
        ArchiveFormatError: If a bundle's pair cannot be written as an
            entry name
    """
    default = resource_bundle.default
    if default is None:
        raise MissingDefaultBundleError(ErrorTemplate.default_bundle_missing("Archive export"))

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        _write_entry(archive, META_ENTRY_NAME, _meta_text(default))
        for bundle in resource_bundle:
            _write_entry(archive, entry_name(bundle), bundle.to_text())

    logger.info("Exported %d bundles to archive (default %s)", len(resource_bundle), default.name)
    return buffer.getvalue()
