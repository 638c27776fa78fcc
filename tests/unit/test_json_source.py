"""
Tests for JSON row sources.
"""

import json
from pathlib import Path

import pytest

from registry.adapters.json_source import (
    InMemoryRowSource,
    JsonProfileSource,
    JsonSettingsSource,
    SourceError,
)


class TestJsonProfileSource:
    def test_reads_array(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text(json.dumps([{"id": "1"}, {"id": "2"}]))

        assert JsonProfileSource(path).fetch_rows() == [{"id": "1"}, {"id": "2"}]

    def test_reads_wrapped_object(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text(json.dumps({"owners": [{"id": "1"}]}))

        assert JsonProfileSource(path).fetch_rows() == [{"id": "1"}]

    def test_rereads_on_each_call(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text(json.dumps([{"id": "1"}]))
        source = JsonProfileSource(path)
        source.fetch_rows()

        path.write_text(json.dumps([{"id": "1"}, {"id": "2"}]))

        assert len(source.fetch_rows()) == 2

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert JsonProfileSource(tmp_path / "nope.json").fetch_rows() == []

    def test_non_objects_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text(json.dumps([{"id": "1"}, "junk", 3]))

        assert JsonProfileSource(path).fetch_rows() == [{"id": "1"}]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text("{not json")

        with pytest.raises(SourceError):
            JsonProfileSource(path).fetch_rows()

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "owners.json"
        path.write_text(json.dumps("owners"))

        with pytest.raises(SourceError):
            JsonProfileSource(path).fetch_rows()


def test_settings_source_wrapper_key(tmp_path: Path) -> None:
    path = tmp_path / "site_content.json"
    path.write_text(json.dumps({"site_content": [{"key": "site_title", "value": "X"}]}))

    assert JsonSettingsSource(path).fetch_rows() == [{"key": "site_title", "value": "X"}]


def test_in_memory_source_returns_copies() -> None:
    source = InMemoryRowSource([{"id": "1"}])

    rows = source.fetch_rows()
    rows[0]["id"] = "changed"

    assert source.fetch_rows() == [{"id": "1"}]
    assert source.fetch_count == 2
