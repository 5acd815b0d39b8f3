import json
import logging
from datetime import datetime

import pytest

from conftest import apple_export, apple_row
from strength_tracker.core.errors import TimestampParseError
from strength_tracker.storage.source_directory import SourceDirectory


def write_export(storage_dir, name, text):
    (storage_dir / name).write_text(text, encoding="utf-8")


def test_load_reads_every_stored_export(store, storage_dir, bench_export, squat_export):
    write_export(storage_dir, "alice", bench_export)
    write_export(storage_dir, "bob", squat_export)

    data = store.load()

    assert sorted(data) == ["alice", "bob"]
    assert store.users() == ["alice", "bob"]
    bench = store.query("alice")["Bench"]
    assert bench[0].timestamp == datetime(2024, 1, 1, 10, 0, 0)
    assert bench[0].max_one_rep_max == 112.5
    squat = store.query("bob")["Squat"]
    assert squat[0].max_weight == 90.0
    assert squat[0].total_volume == 670.0


def test_query_unknown_user_returns_none(store):
    store.load()

    assert store.query("nobody") is None
    assert store.users() == []


def test_bad_file_is_skipped_without_aborting_load(store, storage_dir, bench_export, caplog):
    write_export(storage_dir, "alice", bench_export)
    write_export(storage_dir, "broken", apple_export(apple_row("yesterday", "Bench", 100, 5)))

    with caplog.at_level(logging.ERROR):
        data = store.load()

    assert list(data) == ["alice"]
    assert store.query("broken") is None
    assert "Skipping export broken" in caplog.text


def test_hidden_files_are_ignored(store, storage_dir, bench_export):
    write_export(storage_dir, ".alice.upload", bench_export)

    assert store.load() == {}


def test_load_replaces_previous_contents(store, storage_dir, bench_export):
    write_export(storage_dir, "alice", bench_export)
    store.load()
    (storage_dir / "alice").unlink()

    store.load()

    assert store.query("alice") is None


def test_snapshot_is_not_affected_by_later_loads(store, storage_dir, bench_export, squat_export):
    write_export(storage_dir, "alice", bench_export)
    store.load()
    before = store.snapshot()

    write_export(storage_dir, "bob", squat_export)
    store.load()

    assert list(before) == ["alice"]
    assert sorted(store.snapshot()) == ["alice", "bob"]


def test_ingest_upload_stores_and_indexes_export(store, storage_dir, bench_export):
    series = store.ingest_upload("alice", bench_export.encode("utf-8"))

    assert list(series) == ["Bench"]
    assert store.query("alice") == series
    assert (storage_dir / "alice").read_text(encoding="utf-8") == bench_export


def test_ingest_upload_replaces_user_data(store, bench_export, squat_export):
    store.ingest_upload("alice", bench_export.encode("utf-8"))
    store.ingest_upload("alice", squat_export.encode("utf-8"))

    assert list(store.query("alice")) == ["Squat"]


def test_rejected_upload_keeps_previous_file(store, storage_dir, bench_export):
    store.ingest_upload("alice", bench_export.encode("utf-8"))
    bad = apple_export(apple_row("not a date", "Bench", 100, 5)).encode("utf-8")

    with pytest.raises(TimestampParseError):
        store.ingest_upload("alice", bad)

    assert list(store.query("alice")) == ["Bench"]
    assert (storage_dir / "alice").read_text(encoding="utf-8") == bench_export


def test_ingest_upload_sanitizes_user_name(store, storage_dir, bench_export):
    store.ingest_upload("../eve smith", bench_export.encode("utf-8"))

    assert store.users() == ["_eve_smith"]
    assert (storage_dir / "_eve_smith").exists()


def test_to_json_dict_groups_every_user(store, bench_export, squat_export):
    store.ingest_upload("alice", bench_export.encode("utf-8"))
    store.ingest_upload("bob", squat_export.encode("utf-8"))

    payload = store.to_json_dict("day")

    assert list(payload) == ["alice", "bob"]
    assert payload["bob"]["Squat"] == [
        {
            "timestamp": "2024-01-02T00:00:00Z",
            "maxWeight": 90.0,
            "maxOneRepMax": pytest.approx(90 * 36 / 34),
            "totalVolume": 670.0,
        }
    ]


@pytest.mark.parametrize("name, expected", [
    ("alice", "alice"),
    ("  bob  ", "bob"),
    ("a/b\\c", "a_b_c"),
    ("..hidden", "hidden"),
])
def test_sanitize_source_id(name, expected):
    assert SourceDirectory.sanitize_source_id(name) == expected


@pytest.mark.parametrize("name", ["", "   ", "..."])
def test_sanitize_source_id_rejects_empty_names(name):
    with pytest.raises(ValueError):
        SourceDirectory.sanitize_source_id(name)


def test_save_source_leaves_no_temporary_file(storage_dir):
    sources = SourceDirectory(str(storage_dir))

    sources.save_source("alice", b"data")

    assert [p.name for p in storage_dir.iterdir()] == ["alice"]
    assert sources.list_sources() == ["alice"]


@pytest.mark.parametrize("name", ["john doe", "José", "eve+1"])
def test_load_keeps_file_names_as_user_keys(store, storage_dir, bench_export, name):
    write_export(storage_dir, name, bench_export)

    data = store.load()

    assert list(data) == [name]
    assert list(store.query(name)) == ["Bench"]


def test_load_does_not_confuse_names_with_their_sanitized_form(store, storage_dir, bench_export, squat_export):
    write_export(storage_dir, "a b", bench_export)
    write_export(storage_dir, "a_b", squat_export)

    store.load()

    assert list(store.query("a b")) == ["Bench"]
    assert list(store.query("a_b")) == ["Squat"]


def test_reloading_unchanged_files_gives_identical_output(store, storage_dir, bench_export, squat_export):
    write_export(storage_dir, "alice", bench_export)
    write_export(storage_dir, "bob", squat_export)

    store.load()
    first = json.dumps(store.to_json_dict(), sort_keys=True)
    store.load()
    second = json.dumps(store.to_json_dict(), sort_keys=True)

    assert first == second


def test_bad_weight_loads_as_zero_with_warning(store, storage_dir, caplog):
    write_export(storage_dir, "alice", apple_export(
        apple_row("2024-01-01 10:00:00", "Bench", "abc", 5),
    ))

    with caplog.at_level(logging.WARNING):
        store.load()

    (point,) = store.query("alice")["Bench"]
    assert point.max_weight == 0.0
    assert point.max_one_rep_max == 0.0
    assert point.total_volume == 0.0
    assert "Parsing weight failed at row 0" in caplog.text


@pytest.mark.parametrize("source_id", ["", ".", "..", "../alice", "sub/alice"])
def test_path_for_rejects_names_outside_the_root(storage_dir, source_id):
    with pytest.raises(ValueError):
        SourceDirectory(str(storage_dir)).path_for(source_id)
