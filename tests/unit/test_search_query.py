"""Query classification: prompt-code shortcuts vs free text."""

import pytest

from app.domain.search import build_search_query, escape_like


@pytest.mark.parametrize(
    ("raw", "code"),
    [("1234", "1234"), ("#0007", "0007"), ("#9999", "9999")],
)
def test_four_digits_are_a_code_shortcut(raw: str, code: str) -> None:
    query = build_search_query(raw)
    assert query.is_code_shortcut is True
    assert query.code_value == code


@pytest.mark.parametrize(
    "raw",
    ["12345", "123", "ab12", "##1234", "# 1234", "12 34", "neon", "  4521 ", " 1234", "1234\n"],
)
def test_other_input_is_free_text(raw: str) -> None:
    query = build_search_query(raw)
    assert query.is_code_shortcut is False
    assert query.code_value is None


def test_normalized_is_trimmed_but_raw_is_kept() -> None:
    query = build_search_query("  neon city ")
    assert query.raw == "  neon city "
    assert query.normalized == "neon city"


def test_none_and_whitespace_are_blank() -> None:
    assert build_search_query(None).is_blank
    assert build_search_query("   ").is_blank
    assert not build_search_query("a").is_blank


def test_min_length_counts_raw_input() -> None:
    assert not build_search_query("a").meets_min_length(2)
    assert build_search_query("ab").meets_min_length(2)
    # Untrimmed length counts, but blank input never qualifies.
    assert build_search_query(" a").meets_min_length(2)
    assert not build_search_query("   ").meets_min_length(2)


def test_like_pattern_escapes_metacharacters() -> None:
    assert build_search_query("neon").like_pattern == "%neon%"
    assert build_search_query("50%_off").like_pattern == "%50\\%\\_off%"
    assert escape_like("a\\b") == "a\\\\b"
