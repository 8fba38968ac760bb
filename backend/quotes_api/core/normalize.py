"""Normalization: canonical forms for author and tag comparison.

Invariants:
    - normalize_author: percent-decode, strip, lowercase (in that order)
    - normalize_tag: lowercase only; tags are plain labels, never decoded
    - Malformed escapes raise MalformedEncodingError, never pass through silently
"""

import re
from urllib.parse import unquote

from quotes_api.core.errors import MalformedEncodingError

# "%" not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(raw: str, parameter: str = "authors") -> str:
    """Strict percent-decoding: rejects stray '%' and invalid UTF-8 sequences.

    `parameter` names the request field the value came from, for the error.
    """
    if _BAD_ESCAPE.search(raw):
        raise MalformedEncodingError(raw, parameter)
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedEncodingError(raw, parameter) from e


def normalize_author(raw: str) -> str:
    return percent_decode(raw).strip().lower()


def normalize_tag(raw: str) -> str:
    return raw.lower()
