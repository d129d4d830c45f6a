import json

import pytest

from state.score_entry import ScoreEntry
from state.serializer import table_from_json, table_to_json


def names_and_scores(table):
    return [(e.name, e.score) for e in table]


def test_load_missing_file_is_empty(store):
    assert not store.path.exists()
    assert store.load() == []


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        '{"name": "A"}',
        '[{"name": "A"}]',
        '[{"name": "A", "score": -1, "date": "x"}]',
    ],
)
def test_load_corrupt_file_is_empty(store, content):
    store.path.write_text(content, encoding="utf-8")
    assert store.load() == []


def test_load_deeply_nested_file_is_empty(store):
    store.path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    assert store.load() == []


def test_load_directory_path_is_empty(tmp_path):
    from state.persistence import ScoreStore

    assert ScoreStore(tmp_path).load() == []


def test_save_orders_descending(store):
    store.save(ScoreEntry("A", 3))
    store.save(ScoreEntry("B", 5))
    store.save(ScoreEntry("C", 1))

    assert names_and_scores(store.load()) == [("B", 5), ("A", 3), ("C", 1)]


def test_save_keeps_top_five(store):
    for i, score in enumerate([4, 9, 1, 7, 3, 6]):
        store.save(ScoreEntry(f"P{i}", score))

    table = store.load()
    assert len(table) == 5
    assert [e.score for e in table] == [9, 7, 6, 4, 3]


def test_save_returns_rank(store):
    for score in [10, 8, 6, 4, 2]:
        store.save(ScoreEntry("X", score))

    assert store.save(ScoreEntry("new", 7)) == 3
    assert store.save(ScoreEntry("low", 0)) is None
    assert len(store.load()) == 5


def test_ties_keep_insertion_order(store):
    store.save(ScoreEntry("first", 2))
    store.save(ScoreEntry("second", 2))

    assert names_and_scores(store.load()) == [("first", 2), ("second", 2)]


def test_file_format_is_pretty_json_array(store):
    store.save(ScoreEntry("A", 3, date="2026-01-01T00:00:00.000Z"))

    text = store.path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert json.loads(text) == [
        {"name": "A", "score": 3, "date": "2026-01-01T00:00:00.000Z"}
    ]


def test_reset_then_load_is_empty(store):
    store.save(ScoreEntry("A", 3))
    store.reset()

    assert store.load() == []
    assert json.loads(store.path.read_text(encoding="utf-8")) == []


def test_save_write_failure_propagates(tmp_path):
    from state.persistence import ScoreStore

    store = ScoreStore(tmp_path / "missing-dir" / "scores.json")
    with pytest.raises(OSError):
        store.save(ScoreEntry("A", 1))


def test_show(store):
    assert store.show() == "No high scores yet."

    store.save(ScoreEntry("A", 3, date="d1"))
    store.save(ScoreEntry("B", 5, date="d2"))
    assert store.show() == "High Scores:\n1. B - 5 points (d2)\n2. A - 3 points (d1)"


def test_score_entry_validation():
    with pytest.raises(ValueError):
        ScoreEntry("A", -1)
    with pytest.raises(ValueError):
        ScoreEntry("A", 1.5)
    with pytest.raises(ValueError):
        ScoreEntry.from_dict({"name": "A", "date": "x"})


def test_score_entry_is_frozen_and_dated():
    entry = ScoreEntry("A", 1)
    assert entry.date.endswith("Z")
    with pytest.raises(AttributeError):
        entry.score = 2


def test_serializer_roundtrip_keeps_order():
    entries = [ScoreEntry("B", 5, "d2"), ScoreEntry("A", 3, "d1")]
    assert table_from_json(table_to_json(entries)) == entries


def test_serializer_rejects_non_array():
    with pytest.raises(ValueError):
        table_from_json('{"name": "A", "score": 1, "date": "x"}')


def test_malformed_entry_is_skipped_and_others_survive_save(store):
    store.path.write_text(
        json.dumps(
            [
                {"name": "A", "score": 7, "date": "d1"},
                {"name": "B", "score": "lots", "date": "d2"},
                {"name": "C", "date": "d3"},
                {"name": "D", "score": 2, "date": "d4"},
            ]
        ),
        encoding="utf-8",
    )

    assert names_and_scores(store.load()) == [("A", 7), ("D", 2)]

    store.save(ScoreEntry("E", 5))
    assert names_and_scores(store.load()) == [("A", 7), ("E", 5), ("D", 2)]


def test_whole_number_float_scores_are_kept(store):
    store.path.write_text(
        '[{"name": "A", "score": 7, "date": "d"}, {"name": "B", "score": 3.0, "date": "d"}]',
        encoding="utf-8",
    )

    table = store.load()
    assert names_and_scores(table) == [("A", 7), ("B", 3)]
    assert isinstance(table[1].score, int)


def test_serializer_skips_invalid_items():
    text = '[{"name": "A", "score": 1, "date": "x"}, 42, {"name": "B", "score": 2.5, "date": "x"}]'
    assert table_from_json(text) == [ScoreEntry("A", 1, "x")]
