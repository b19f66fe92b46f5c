"""Small string grammars: quoted spans, tokens, cookie dates and attribute-value pairs.

Every entry point is a pure function of its input string. A failed parse is
reported as NOT_FOUND (or an empty list for the find-all scanners), never by
raising.
"""

from .result import NOT_FOUND, Found, NotFound, ScanResult
from .quotes import (
    QuoteSyntaxError,
    find_all_quoted,
    find_all_quoted_with_escapes,
    find_double_quoted,
    find_first_quoted,
    find_single_quoted,
    get_quoted,
    quote_string,
)
from .tokenizer import is_http_token, tokenize
from .date import MONTH_ABBREVIATIONS, DatePolicy, ParsedDate, parse_date
from .avpairs import AVPair, AVPairSyntaxError, format_av_pairs, parse_av_pairs, parse_av_pairs_strict
from .parser import TextGrammarParser

__version__ = "0.1.0"
