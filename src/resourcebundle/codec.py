"""Key-value text codec.

Encodes and decodes flat string-to-string mappings in a line-oriented
``key=value`` format. Each line holding a separator is split at its FIRST
occurrence; everything before is the key and everything after (further
separators included) is the value. Lines without a separator are skipped.
There is no escaping, no comment syntax and no whitespace trimming.

Decoding is total: malformed lines are never an error, and undecodable
bytes survive via ``surrogateescape`` so that re-encoding reproduces them.
Encoding fails only for lone surrogates that no byte sequence decodes to.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import BinaryIO

from resourcebundle.constants import KEY_VALUE_SEPARATOR, TEXT_ENCODING, TEXT_ERRORS
from resourcebundle.diagnostics import BundleFormatError, ErrorTemplate

__all__ = [
    "decode",
    "decode_stream",
    "encode",
    "iter_lines",
]


def encode(mapping: Mapping[str, str]) -> bytes:
    """Encode a mapping as ``key=value`` lines.

    Entries are emitted in the mapping's iteration order, one line each,
    every line terminated by a newline.

    Args:
        mapping: Keys and texts to encode

    Returns:
        Encoded bytes

    Raises:
        BundleFormatError: If a key or text holds a lone surrogate outside
            the U+DC80..U+DCFF range that decoding produces

    Example:
        >>> encode({"greeting": "Hi", "expr": "a=b"})
        b'greeting=Hi\\nexpr=a=b\\n'
    """
    chunks: list[bytes] = []
    for key, value in mapping.items():
        line = f"{key}{KEY_VALUE_SEPARATOR}{value}\n"
        try:
            chunks.append(line.encode(TEXT_ENCODING, TEXT_ERRORS))
        except UnicodeEncodeError as e:
            raise BundleFormatError(ErrorTemplate.text_unencodable(repr(key), e.reason)) from e
    return b"".join(chunks)


def iter_lines(data: bytes) -> Iterator[str]:
    """Yield the decoded lines of ``data``.

    Lines end at ``\\n``; one trailing ``\\r`` per line is dropped so that
    CRLF input reads like LF input. A final newline does not start an
    extra empty line.
    """
    lines = data.split(b"\n")
    if lines and not lines[-1]:
        lines.pop()
    for raw in lines:
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        yield raw.decode(TEXT_ENCODING, TEXT_ERRORS)


def decode(data: bytes) -> dict[str, str]:
    """Decode ``key=value`` lines into a mapping.

    Later lines win when a key repeats.

    Args:
        data: Encoded bytes

    Returns:
        Decoded mapping (empty for empty input)

    Example:
        >>> decode(b"greeting=Hi\\njunk line\\nexpr=a=b")
        {'greeting': 'Hi', 'expr': 'a=b'}
    """
    mapping: dict[str, str] = {}
    for line in iter_lines(data):
        key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
        if separator:
            mapping[key] = value
    return mapping


def decode_stream(stream: BinaryIO) -> dict[str, str]:
    """Decode a binary stream of ``key=value`` lines.

    The stream is read to the end; the caller owns (and closes) it.

    Raises:
        OSError: If reading the stream fails
    """
    return decode(stream.read())
