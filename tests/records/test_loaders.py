"""
tests/records/test_loaders.py - record file loader tests
"""

import json

import pytest

from excel_download.export.columns import resolve_columns
from excel_download.export.models import WorksheetSpec
from excel_download.records import load_records


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name, city, age\nAda, London, 36\nGrace, , \n")
    return path


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "people.json"
    path.write_text(json.dumps([
        {"name": "Ada", "hired": "2022-01-15", "address": {"city": "London"}},
        {"name": "Grace", "hired": None, "address": {"city": "Arlington"}},
    ]))
    return path


class TestLoadCsv:
    """CSV records"""

    def test_column_order_and_values(self, csv_file):
        records = load_records(str(csv_file))

        assert list(records[0].keys()) == ["name", "city", "age"]
        assert records[0]["name"] == "Ada"
        assert records[0]["city"] == "London"
        assert records[0]["age"] == 36

    def test_empty_cells_become_none(self, csv_file):
        records = load_records(str(csv_file))

        assert records[1]["city"] is None
        assert records[1]["age"] is None

    def test_records_feed_inferred_columns(self, csv_file):
        worksheet = WorksheetSpec(records=load_records(str(csv_file)))

        assert [c.id for c in resolve_columns(worksheet)] == ["name", "city", "age"]


class TestLoadJson:
    """JSON records"""

    def test_nested_objects_and_dates_are_kept(self, json_file):
        records = load_records(str(json_file))

        assert records[0]["address"] == {"city": "London"}
        assert records[0]["hired"] == "2022-01-15"
        assert records[1]["hired"] is None


class TestUnsupported:
    """Unsupported inputs"""

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "people.txt"
        path.write_text("name\nAda\n")

        with pytest.raises(ValueError, match="Unsupported record file"):
            load_records(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records(str(tmp_path / "absent.csv"))
