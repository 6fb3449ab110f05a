"""Test public API surface and the high-level entry points."""

import pytest
from pydantic import ValidationError

import exstatus
from exstatus.api import (
    dump_statuses,
    load_statuses,
    merge_statuses,
    parse_statuses,
    persist_statuses,
    records_from_results,
)


def test_package_exports():
    for name in exstatus.__all__:
        assert hasattr(exstatus, name), name
    assert exstatus.UNKNOWN_STATUS == "unknown"
    assert exstatus.ExampleStatusValue.FAILED == "failed"


def test_merge_statuses_uses_filesystem_by_default(in_tmp_project):
    (in_tmp_project / "spec").mkdir()
    (in_tmp_project / "spec" / "kept_spec.rb").write_text("", encoding="utf-8")
    previous = [
        {"example_id": "spec/kept_spec.rb[1]", "status": "failed"},
        {"example_id": "spec/deleted_spec.rb[1]", "status": "failed"},
    ]

    merged = merge_statuses([], previous)

    assert [r["example_id"] for r in merged] == ["spec/kept_spec.rb[1]"]


def test_merge_statuses_with_custom_predicate():
    previous = [{"example_id": "spec/gone_spec.rb[1]", "status": "failed"}]
    assert merge_statuses([], previous, file_exists=lambda path: True) == previous


def test_unknown_status_preference():
    merged = merge_statuses(
        [{"example_id": "A[1]", "status": "unknown"}],
        [{"example_id": "A[1]", "status": "failed"}],
        file_exists=lambda path: False,
    )
    assert merged == [{"example_id": "A[1]", "status": "failed"}]


def test_dump_and_parse_statuses():
    records = records_from_results([
        {"id": "spec/a_spec.rb[1:2]", "status": "failed", "run_time": 0.25},
        {"example_id": "spec/a_spec.rb[1:1]"},
    ])
    assert parse_statuses(dump_statuses(records)) == records
    assert dump_statuses([]) is None
    assert parse_statuses("") == []


def test_records_from_results():
    records = records_from_results([
        {"id": "spec/a_spec.rb[1]", "status": "passed", "run_time": 1.5},
        {"example_id": "spec/a_spec.rb[2]", "status": None},
    ])
    assert records == [
        {"example_id": "spec/a_spec.rb[1]", "status": "passed", "run_time": "1.5 seconds"},
        {"example_id": "spec/a_spec.rb[2]", "status": "unknown", "run_time": ""},
    ]


def test_records_from_results_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        records_from_results([{"id": "spec/a_spec.rb[1]", "outcome": "passed"}])


def test_load_and_persist_accept_str_paths(in_tmp_project):
    path = str(in_tmp_project / "examples.txt")
    (in_tmp_project / "spec").mkdir()
    (in_tmp_project / "spec" / "a_spec.rb").write_text("", encoding="utf-8")
    records = records_from_results([{"id": "spec/a_spec.rb[1]", "status": "failed"}])

    persist_statuses(records, path)

    assert load_statuses(path) == records
