from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .avpairs import AVPair, parse_av_pairs, parse_av_pairs_strict
from .date import DatePolicy, ParsedDate, parse_date
from .quotes import find_all_quoted, find_all_quoted_with_escapes, find_first_quoted
from .result import ScanResult
from .tokenizer import tokenize


@dataclass(frozen=True)
class TextGrammarParser:
    """All entry points behind one object, sharing a date policy.

    Holds no mutable state, so one instance can be shared between threads.
    """

    date_policy: DatePolicy = field(default_factory=DatePolicy)

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "TextGrammarParser":
        return cls(date_policy=DatePolicy.from_env(dotenv_path))

    def find_first_quoted(self, text: str, quote_char: str = "'") -> ScanResult[str]:
        return find_first_quoted(text, quote_char)

    def find_all_quoted(self, text: str) -> list[str]:
        return find_all_quoted(text)

    def find_all_quoted_with_escapes(self, text: str, quote_char: str = "'") -> list[str]:
        return find_all_quoted_with_escapes(text, quote_char)

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)

    def parse_date(self, text: str) -> ScanResult[ParsedDate]:
        return parse_date(text, self.date_policy)

    def parse_av_pairs(self, text: str) -> ScanResult[tuple[AVPair, ...]]:
        return parse_av_pairs(text)

    def parse_av_pairs_strict(self, text: str) -> ScanResult[tuple[AVPair, ...]]:
        return parse_av_pairs_strict(text)
