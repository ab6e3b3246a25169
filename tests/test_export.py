"""Tests for JSON/CSV export and ranking."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from meaning_words.aggregator.query import QueryAggregator
from meaning_words.data import AggregateResult, HistoryRecord
from meaning_words.export import load_json, rank, to_csv, to_json, write_csv, write_json


@pytest.fixture
def result() -> AggregateResult:
    return AggregateResult.from_dicts(
        {"zeal": 2, "apple": 2, "quixotic": 5, "ennui": 1},
        {
            "zeal": ["https://www.google.com/search?q=zeal+meaning"],
            "apple": ["https://bing.com/search?q=apple+meaning"],
            "quixotic": [f"https://duckduckgo.com/?q=quixotic+meaning&n={i}" for i in range(3)],
            "ennui": ["https://www.google.com/search?q=ennui+meaning"],
        },
    )


def test_rank_by_count_then_phrase(result: AggregateResult) -> None:
    assert rank(result) == [("quixotic", 5), ("apple", 2), ("zeal", 2), ("ennui", 1)]


def test_rank_empty() -> None:
    assert rank(AggregateResult()) == []


def test_to_json_shape(result: AggregateResult) -> None:
    data = json.loads(to_json(result))
    assert set(data) == {"emw_counts", "emw_examples"}
    assert data["emw_counts"]["quixotic"] == 5
    assert data["emw_examples"]["zeal"] == ["https://www.google.com/search?q=zeal+meaning"]
    assert len(data["emw_examples"]["quixotic"]) == 3


def test_to_json_keeps_non_ascii() -> None:
    text = to_json(AggregateResult.from_dicts({"café": 1}, {"café": ["u"]}))
    assert "café" in text


def test_to_csv_sorted_by_phrase(result: AggregateResult) -> None:
    assert to_csv(result) == "word,count\napple,2\nennui,1\nquixotic,5\nzeal,2\n"


def test_to_csv_empty() -> None:
    assert to_csv(AggregateResult()) == "word,count\n"


def test_to_csv_quotes_special_fields() -> None:
    result = AggregateResult.from_dicts(
        {"a,b": 1, 'say "hi"': 2, "line\nbreak": 3, "plain": 4, "foo\rbar": 5},
        {},
    )
    lines = to_csv(result)
    assert lines == (
        "word,count\n"
        '"a,b",1\n'
        '"foo\rbar",5\n'
        '"line\nbreak",3\n'
        "plain,4\n"
        '"say ""hi""",2\n'
    )


def test_write_and_load_json(tmp_path: Path, result: AggregateResult) -> None:
    path = write_json(result, tmp_path / "out" / "meaning_words.json")
    loaded = load_json(path)
    assert dict(loaded.counts) == dict(result.counts)
    assert dict(loaded.examples) == dict(result.examples)


def test_load_json_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"emw_counts": {"foo": 3}}))
    loaded = load_json(path)
    assert dict(loaded.counts) == {"foo": 3}
    assert dict(loaded.examples) == {}


def test_load_json_drops_orphan_examples(tmp_path: Path) -> None:
    path = tmp_path / "orphan.json"
    path.write_text(json.dumps({"emw_counts": {}, "emw_examples": {"foo": ["u"]}}))
    assert dict(load_json(path).examples) == {}


def test_load_json_invalid(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"emw_counts": {"foo": "many"}}))
    with pytest.raises(ValidationError):
        load_json(path)


def test_write_csv(tmp_path: Path, result: AggregateResult) -> None:
    path = write_csv(result, tmp_path / "meaning_words.csv")
    assert path.read_bytes().decode("utf-8").splitlines()[0] == "word,count"
    assert b"\r" not in path.read_bytes()


def test_to_csv_quotes_carriage_return_from_scan() -> None:
    chunk = [HistoryRecord(url="https://www.google.com/search?q=foo%0Dbar+meaning")]
    result = QueryAggregator().scan([chunk])
    assert to_csv(result) == 'word,count\n"foo\rbar",1\n'


@pytest.mark.parametrize("count", [0, -2])
def test_load_json_rejects_non_positive_counts(tmp_path: Path, count: int) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"emw_counts": {"foo": count}, "emw_examples": {"foo": ["u"]}}))
    with pytest.raises(ValidationError):
        load_json(path)
