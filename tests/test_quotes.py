from __future__ import annotations

import pytest

from textgrammar.quotes import (
    QuoteSyntaxError,
    find_all_quoted,
    find_all_quoted_with_escapes,
    find_double_quoted,
    find_first_quoted,
    find_single_quoted,
    get_quoted,
    quote_string,
)
from textgrammar.result import NOT_FOUND, Found


def test_find_first_quoted_returns_first_span() -> None:
    assert find_first_quoted("a 'x' b", "'") == Found("x")
    assert find_single_quoted("this is some 'text' and some 'additional text'") == Found("text")


def test_find_first_quoted_empty_span_is_found() -> None:
    out = find_single_quoted("this is an empty string '' and another 'string'")
    assert out == Found("")
    assert out.found


def test_find_first_quoted_not_found() -> None:
    assert find_first_quoted("no quotes", "'") is NOT_FOUND
    assert not find_first_quoted("only 'one quote", "'")


def test_find_double_quoted_ignores_single_quotes() -> None:
    assert find_double_quoted("it's \"here\" now") == Found("here")


def test_find_first_quoted_rejects_bad_quote_char() -> None:
    with pytest.raises(ValueError):
        find_first_quoted("abc", "''")
    with pytest.raises(TypeError):
        find_first_quoted(None, "'")  # type: ignore[arg-type]


def test_find_all_quoted_mixed_kinds() -> None:
    assert find_all_quoted("quote '\"this\"'") == ['"this"']
    assert find_all_quoted("a \"b\" c 'd' e ''") == ["b", "d", ""]
    assert find_all_quoted("nothing here") == []


def test_find_all_quoted_with_escapes_examples() -> None:
    text = "'This is not wrong' and 'this is isn\\'t either"
    assert find_all_quoted_with_escapes(text, "'") == ["This is not wrong", "this is isn't either"]
    assert find_all_quoted_with_escapes("No quoted \\'text\\' here", "'") == []


def test_find_all_quoted_with_escapes_adjacent_spans() -> None:
    assert find_all_quoted_with_escapes("'a''b'") == ["a", "b"]
    assert find_all_quoted_with_escapes("''") == [""]


def test_find_all_quoted_with_escapes_double_slosh_closes_span() -> None:
    # \\' is an escaped slosh followed by a real delimiter
    assert find_all_quoted_with_escapes("'a\\\\' b") == ["a\\\\"]
    # an escaped slosh before an opening quote does not escape it
    assert find_all_quoted_with_escapes("x\\\\'y'") == ["y"]


def test_find_all_quoted_with_escapes_double_quotes() -> None:
    text = 'say "he said \\"hi\\"" and "bye"'
    assert find_all_quoted_with_escapes(text, '"') == ['he said "hi"', "bye"]


def test_find_all_quoted_with_escapes_is_linear_on_adversarial_input() -> None:
    text = "'" + "\\'" * 50_000 + "x"
    out = find_all_quoted_with_escapes(text)
    assert out == ["'" * 50_000 + "x"]


def test_get_quoted_unescape_all_and_unterminated() -> None:
    assert get_quoted('"a\\"b\\\\c" rest', 0, '"', unescape_all=True) == ('a"b\\c', 9)
    with pytest.raises(QuoteSyntaxError) as ei:
        get_quoted('x "abc', 2, '"')
    assert ei.value.offset == 2
    assert get_quoted('"abc', 0, '"', require_close=False) == ("abc", 4)


def test_quote_string_is_read_back_by_get_quoted() -> None:
    raw = 'semi;colon "quoted" back\\slash'
    q = quote_string(raw)
    assert get_quoted(q, 0, '"', unescape_all=True) == (raw, len(q))
