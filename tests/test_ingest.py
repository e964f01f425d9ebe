"""Tests for loading records from exported files."""

import json
import tempfile
from pathlib import Path

import pytest

from term_atlas.config import DEFAULT_CONFIG
from term_atlas.ingest.loader import load_records, row_to_record
from term_atlas.layout import UNCLASSIFIED, build_atlas


def _write(suffix: str, content: str) -> Path:
    with tempfile.NamedTemporaryFile(suffix=suffix, mode="w", delete=False) as f:
        f.write(content)
        f.flush()
        return Path(f.name)


def test_row_to_record_maps_fields():
    record = row_to_record(
        {"id": 7, "term": "No cap", "definition": "For real", "example": None, "term_type_id": 3},
        DEFAULT_CONFIG,
    )
    assert record.id == 7
    assert record.texts == ("No cap", "For real")
    assert record.group == 3
    assert record.document == "no cap for real"


def test_row_without_text_has_empty_document():
    record = row_to_record({"id": "x"}, DEFAULT_CONFIG)
    assert record.texts == ()
    assert record.document == ""
    assert record.group is None


def test_load_json_list():
    rows = [
        {"id": 1, "term": "Spill the tea", "term_type_id": 1},
        {"term": "no id here"},
        {"id": 2, "term": "Throw shade", "term_type_id": None},
    ]
    records = load_records(_write(".json", json.dumps(rows)), DEFAULT_CONFIG)
    assert [r.id for r in records] == [1, 2]
    assert records[1].group is None


def test_load_json_wrapped():
    payload = {"data": [{"id": "a", "term": "Salty"}]}
    records = load_records(_write(".json", json.dumps(payload)), DEFAULT_CONFIG)
    assert len(records) == 1
    assert records[0].id == "a"


def test_load_yaml():
    content = "- id: 1\n  term: Ghosting\n  term_type_id: 2\n"
    records = load_records(_write(".yaml", content), DEFAULT_CONFIG)
    assert records[0].texts == ("Ghosting",)
    assert records[0].group == 2


def test_load_csv_coerces_values():
    content = "id,term,definition,term_type_id\n1,Rizz,Charm,2\n2,Mid,,\n"
    records = load_records(_write(".csv", content), DEFAULT_CONFIG)
    assert [r.id for r in records] == [1, 2]
    assert records[0].group == 2
    assert records[1].texts == ("Mid",)
    assert records[1].group is None


def test_custom_field_names():
    config = {"records": {"id_field": "caption_id", "text_fields": ["content"], "group_field": "image_id"}}
    rows = [{"caption_id": "c1", "content": "When the code compiles", "image_id": "img-9"}]
    records = load_records(_write(".json", json.dumps(rows)), config)
    assert records[0].id == "c1"
    assert records[0].group == "img-9"


def test_unsupported_format():
    with pytest.raises(ValueError):
        load_records(_write(".xyz", "whatever"), DEFAULT_CONFIG)


def test_non_list_payload():
    with pytest.raises(ValueError):
        load_records(_write(".json", json.dumps({"id": 1})), DEFAULT_CONFIG)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_records("/nonexistent/records.json", DEFAULT_CONFIG)


def test_unhashable_group_is_unclassified():
    rows = [
        {"id": 1, "term": "Bussin", "term_type_id": [1, 2]},
        {"id": 2, "term": "Slay", "term_type_id": {"id": 3}},
        {"id": 3, "term": "Cheugy", "term_type_id": None},
    ]
    records = load_records(_write(".json", json.dumps(rows)), DEFAULT_CONFIG)
    assert [r.group for r in records] == [None, None, None]
    clusters = build_atlas(records)
    assert len(clusters) == 1
    assert clusters[0].member_count == 3


def test_csv_extra_cells_ignored():
    content = "id,term,term_type_id\n1,Rizz,2,EXTRA\n"
    records = load_records(_write(".csv", content), DEFAULT_CONFIG)
    assert len(records) == 1
    assert records[0].id == 1
    assert records[0].group == 2
    assert records[0].texts == ("Rizz",)


def test_blank_group_joins_unclassified():
    rows = [
        {"id": 1, "term": "Yeet", "term_type_id": ""},
        {"id": 2, "term": "Sus", "term_type_id": None},
        {"id": 3, "term": "Stan", "term_type_id": "  "},
    ]
    records = load_records(_write(".json", json.dumps(rows)), DEFAULT_CONFIG)
    clusters = build_atlas(records)
    assert [(c.key, c.name, c.member_count) for c in clusters] == [(None, UNCLASSIFIED, 3)]
