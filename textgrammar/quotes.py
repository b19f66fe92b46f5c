from __future__ import annotations

import logging
import re

from .result import NOT_FOUND, Found, ScanResult, require_text

logger = logging.getLogger(__name__)

SLOSH = "\\"

# At each position a double-quoted span is tried before a single-quoted one.
ANY_QUOTED_RE = re.compile(r'"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\'')


class QuoteSyntaxError(ValueError):
    """A quoted span could not be scanned."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


def _check_quote_char(quote_char: str) -> str:
    if not isinstance(quote_char, str) or len(quote_char) != 1:
        raise ValueError(f"quote_char must be a single character, got {quote_char!r}")
    if quote_char == SLOSH:
        raise ValueError("the escape character cannot be used as a quote")
    return quote_char


def find_first_quoted(text: str, quote_char: str = "'") -> ScanResult[str]:
    """Return the text between the first pair of `quote_char` (no escapes).

    "this is some 'text' and some 'additional text'" -> Found("text")
    "an empty string '' and another 'string'"       -> Found("")
    """
    require_text(text)
    _check_quote_char(quote_char)

    start = text.find(quote_char)
    if start < 0:
        return NOT_FOUND
    end = text.find(quote_char, start + 1)
    if end < 0:
        return NOT_FOUND
    return Found(text[start + 1 : end])


def find_single_quoted(text: str) -> ScanResult[str]:
    return find_first_quoted(text, "'")


def find_double_quoted(text: str) -> ScanResult[str]:
    return find_first_quoted(text, '"')


def find_all_quoted(text: str) -> list[str]:
    """Return the contents of every single- or double-quoted span, left to right.

    A quote of the other kind inside a span is an ordinary character:
    `quote '"this"'` -> ['"this"'].
    """
    require_text(text)

    out: list[str] = []
    for m in ANY_QUOTED_RE.finditer(text):
        dq = m.group("dq")
        out.append(dq if dq is not None else m.group("sq"))
    return out


def get_quoted(
    text: str,
    offset: int,
    quote_char: str,
    *,
    unescape_all: bool = False,
    require_close: bool = True,
) -> tuple[str, int]:
    r"""Scan the quoted span opening at `text[offset]`.

    Return `(contents, new_offset)` where `new_offset` is just past the
    closing quote.

    A slosh always consumes the character after it, so `\\'` is an escaped
    slosh followed by a real delimiter. With `unescape_all` every `\x` pair
    decodes to `x` (HTTP quoted-pair); otherwise only slosh-quote is decoded
    and other pairs are kept verbatim.

    If the span is never closed, raise `QuoteSyntaxError` when
    `require_close` is set, else return everything up to the end of `text`.
    """
    if not text.startswith(quote_char, offset):
        raise QuoteSyntaxError(f"expected opening {quote_char!r}", offset)
    offset0 = offset
    offset += 1

    chunks: list[str] = []
    slen = len(text)
    while offset < slen:
        c = text[offset]
        if c == quote_char:
            return "".join(chunks), offset + 1
        if c == SLOSH:
            if offset + 1 >= slen:
                chunks.append(c)
                offset += 1
                continue
            nxt = text[offset + 1]
            if unescape_all or nxt == quote_char:
                chunks.append(nxt)
            else:
                chunks.append(c + nxt)
            offset += 2
            continue
        end = offset + 1
        while end < slen and text[end] != quote_char and text[end] != SLOSH:
            end += 1
        chunks.append(text[offset:end])
        offset = end

    if require_close:
        raise QuoteSyntaxError(f"unterminated {quote_char!r} string opened", offset0)
    return "".join(chunks), offset


def find_all_quoted_with_escapes(text: str, quote_char: str = "'") -> list[str]:
    """Return every `quote_char` span, treating slosh-quote as a literal quote.

    "'This is not wrong' and 'this is isn\\'t either" -> ["This is not wrong", "this is isn't either"]
    "No quoted \\'text\\' here"                        -> []

    An escaped quote outside a span never opens one. A span left open runs
    to the end of the input.
    """
    require_text(text)
    _check_quote_char(quote_char)

    out: list[str] = []
    offset = 0
    slen = len(text)
    while offset < slen:
        c = text[offset]
        if c == SLOSH:
            offset += 2
        elif c == quote_char:
            try:
                span, end = get_quoted(text, offset, quote_char)
            except QuoteSyntaxError as e:
                logger.debug("%s, taking it to end of input", e)
                span, end = get_quoted(text, offset, quote_char, require_close=False)
            out.append(span)
            offset = end
        else:
            offset += 1
    return out


def quote_string(value: str, quote_char: str = '"') -> str:
    """Quote `value`, escaping sloshes and `quote_char`; inverse of `get_quoted(..., unescape_all=True)`."""
    _check_quote_char(quote_char)
    return quote_char + value.replace(SLOSH, SLOSH * 2).replace(quote_char, SLOSH + quote_char) + quote_char
