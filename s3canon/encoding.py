"""Percent-encoding of object paths and query strings for S3-compatible requests."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

logger = logging.getLogger("s3canon.encoding")

# RFC 3986 section 2.3 unreserved characters, plus "/" which stays literal in paths.
_UNRESERVED_CHARACTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~/"
)
_UNRESERVED_RE = re.compile(r"[A-Za-z0-9\-_.~/]+")


def encode_path(path_name: str) -> str:
    """
    Percent-encode an object path the way S3 expects it on the request line.

    Characters outside the unreserved set are UTF-8 encoded and each byte is
    written as ``%XX``. Strings made only of unreserved characters are returned
    as-is. If a character has no UTF-8 form (a lone surrogate), the input is
    returned unchanged rather than raising.
    """

    if _UNRESERVED_RE.fullmatch(path_name):
        return path_name

    encoded: list[str] = []
    for char in path_name:
        if char in _UNRESERVED_CHARACTERS:
            encoded.append(char)
            continue
        try:
            raw = char.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("encode_path_fallback codepoint=U+%04X", ord(char))
            return path_name
        encoded.extend(f"%{byte:02X}" for byte in raw)
    return "".join(encoded)


def percent_encode_slash(value: str) -> str:
    """Escape "/" as %2F. Expects the ASCII output of encode_path."""

    return value.replace("/", "%2F")


def query_encode(params: Mapping[str, Sequence[str]] | None) -> str:
    """
    Build a canonical query string from a multi-valued parameter mapping.

    Keys are emitted in sorted order and each key's values in the order given,
    so the result is stable across dict orderings. Repeated values produce
    repeated ``key=value`` pairs.
    """

    if not params:
        return ""

    pairs: list[str] = []
    for key in sorted(params):
        prefix = percent_encode_slash(encode_path(key)) + "="
        for value in params[key]:
            pairs.append(prefix + percent_encode_slash(encode_path(value)))
    return "&".join(pairs)
