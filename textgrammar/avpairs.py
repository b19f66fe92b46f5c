"""Attribute-value pair lists: `attr=value; attr="quoted value"; flag`.

Attributes and unquoted values are HTTP tokens; a value may also be a
double-quoted string with slosh escapes. Two entry points:

- `parse_av_pairs_strict` accepts only a complete, well-formed list.
- `parse_av_pairs` is forgiving: extra whitespace and empty segments are
  skipped, and parsing stops (keeping what it has) at the first bad pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .quotes import QuoteSyntaxError, get_quoted, quote_string
from .result import NOT_FOUND, Found, ScanResult, require_text
from .tokenizer import HTTP_TOKEN_CHARS, is_http_token

logger = logging.getLogger(__name__)

WS = " \t"


class AVPairSyntaxError(ValueError):
    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


@dataclass(frozen=True)
class AVPair:
    attribute: str
    value: str | None = None  # None: flag-only attribute

    @property
    def is_flag(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        if self.value is None:
            return self.attribute
        if is_http_token(self.value):
            return f"{self.attribute}={self.value}"
        return f"{self.attribute}={quote_string(self.value)}"


def skip_ws(text: str, offset: int) -> int:
    while offset < len(text) and text[offset] in WS:
        offset += 1
    return offset


def get_http_token(text: str, offset: int) -> tuple[str, int]:
    """Return `(token, new_offset)`; the token is empty if none starts at `offset`."""
    offset0 = offset
    while offset < len(text) and text[offset] in HTTP_TOKEN_CHARS:
        offset += 1
    return text[offset0:offset], offset


def get_av_pair(text: str, offset: int, *, lenient: bool = False) -> tuple[AVPair, int]:
    """Scan one `attr[=value]` starting at `offset`; return `(pair, new_offset)`.

    With `lenient`, whitespace is allowed on either side of the `=`.
    """
    attribute, offset = get_http_token(text, offset)
    if not attribute:
        raise AVPairSyntaxError("expected an attribute name", offset)

    after_attr = offset
    if lenient:
        offset = skip_ws(text, offset)
    if not text.startswith("=", offset):
        return AVPair(attribute), after_attr
    offset += 1
    if lenient:
        offset = skip_ws(text, offset)

    if text.startswith('"', offset):
        try:
            value, offset = get_quoted(text, offset, '"', unescape_all=True)
        except QuoteSyntaxError as e:
            raise AVPairSyntaxError("unterminated quoted value", e.offset) from e
        return AVPair(attribute, value), offset

    value, offset = get_http_token(text, offset)
    if not value:
        raise AVPairSyntaxError(f"expected a value for {attribute!r}", offset)
    return AVPair(attribute, value), offset


def get_av_pairs(text: str, offset: int = 0) -> tuple[tuple[AVPair, ...], int]:
    """Scan `pair (";" WS* pair)*` strictly from `offset`.

    Return `(pairs, new_offset)`; stops at the first character that cannot
    continue the list. A `;` must be followed by another pair.
    """
    pairs: list[AVPair] = []
    while True:
        pair, offset = get_av_pair(text, offset)
        pairs.append(pair)
        if not text.startswith(";", offset):
            return tuple(pairs), offset
        offset = skip_ws(text, offset + 1)


def parse_av_pairs_strict(text: str) -> ScanResult[tuple[AVPair, ...]]:
    """Parse a complete attribute-value pair list, or return NOT_FOUND."""
    require_text(text)
    try:
        pairs, offset = get_av_pairs(text)
    except AVPairSyntaxError as e:
        logger.debug("rejecting %r: %s", text, e)
        return NOT_FOUND
    if offset != len(text):
        logger.debug("rejecting %r: unexpected %r at offset %d", text, text[offset], offset)
        return NOT_FOUND
    return Found(pairs)


def parse_av_pairs(text: str) -> ScanResult[tuple[AVPair, ...]]:
    """Best-effort parse: return the pairs read before the first malformed one.

    NOT_FOUND only when no pair could be read at all.
    """
    require_text(text)

    pairs: list[AVPair] = []
    offset = skip_ws(text, 0)
    while offset < len(text):
        if text[offset] == ";":
            offset = skip_ws(text, offset + 1)
            continue
        try:
            pair, offset = get_av_pair(text, offset, lenient=True)
        except AVPairSyntaxError as e:
            logger.debug("stopping at bad pair in %r: %s", text, e)
            break
        pairs.append(pair)
        offset = skip_ws(text, offset)
        if offset < len(text) and text[offset] != ";":
            logger.debug("stopping at unexpected %r at offset %d in %r", text[offset], offset, text)
            break

    if not pairs:
        return NOT_FOUND
    return Found(tuple(pairs))


def format_av_pairs(pairs: Iterable[AVPair]) -> str:
    """Render pairs so that `parse_av_pairs_strict` reads them back unchanged."""
    out: list[str] = []
    for p in pairs:
        if not is_http_token(p.attribute):
            raise ValueError(f"attribute is not an HTTP token: {p.attribute!r}")
        out.append(str(p))
    return "; ".join(out)
