"""Tests for "<phrase> meaning" matching."""

import pytest

from meaning_words.phrase import match_meaning_phrase


class TestMatchMeaningPhrase:
    """Tests for match_meaning_phrase."""

    def test_simple_phrase(self) -> None:
        assert match_meaning_phrase("ubiquitous meaning") == "ubiquitous"

    def test_lowercases_phrase(self) -> None:
        assert match_meaning_phrase("Quixotic Meaning") == "quixotic"

    @pytest.mark.parametrize("query", ["foo meaning", "Foo Meaning", "foo MEANING", "FOO meaning"])
    def test_case_variants_share_key(self, query: str) -> None:
        assert match_meaning_phrase(query) == "foo"

    def test_trims_whitespace_around_query(self) -> None:
        assert match_meaning_phrase("   serendipity meaning  ") == "serendipity"

    def test_collapses_whitespace_before_keyword(self) -> None:
        assert match_meaning_phrase("foo   meaning") == "foo"

    def test_keeps_internal_whitespace(self) -> None:
        assert match_meaning_phrase("carpe  diem meaning") == "carpe  diem"

    def test_multi_word_phrase(self) -> None:
        assert match_meaning_phrase("raison d'être meaning") == "raison d'être"

    def test_tab_before_keyword(self) -> None:
        assert match_meaning_phrase("foo\tmeaning") == "foo"

    def test_only_last_keyword_is_stripped(self) -> None:
        assert match_meaning_phrase("meaning meaning") == "meaning"

    @pytest.mark.parametrize(
        "query",
        [
            "",
            "   ",
            "meaning",
            "  meaning  ",
            "MEANING",
        ],
    )
    def test_no_phrase_returns_none(self, query: str) -> None:
        assert match_meaning_phrase(query) is None

    @pytest.mark.parametrize(
        "query",
        [
            "foo",
            "meaning of foo",
            "foo meanings",
            "foo meaningful",
            "foomeaning",
            "foo meaning bar",
            "define foo",
        ],
    )
    def test_non_matching_queries(self, query: str) -> None:
        assert match_meaning_phrase(query) is None
