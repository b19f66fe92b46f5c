from __future__ import annotations

import re
import string

from .result import require_text

# A token: word characters and single-quoted spans with nothing in between.
TOKEN_RE = re.compile(r"(?:\w|'[^']*')+")

# RFC 9110 tchar
HTTP_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


def tokenize(text: str) -> list[str]:
    """Split `text` into tokens, dropping everything that is not part of one.

    Quotes are stripped from the embedded spans, so a bare `''` is an empty token.

    "this-string 'has only three tokens'" -> ["this", "string", "has only three tokens"]
    "this*string'has only two@tokens'"    -> ["this", "stringhas only two@tokens"]
    """
    require_text(text)
    return [m.group(0).replace("'", "") for m in TOKEN_RE.finditer(text)]


def is_http_token(text: str) -> bool:
    return bool(text) and all(c in HTTP_TOKEN_CHARS for c in text)
