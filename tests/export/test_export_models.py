"""
tests/export/test_export_models.py - spec model validation tests
"""

import pytest
from pydantic import ValidationError

from excel_download.export.models import ColumnSpec, WorkbookSpec, WorksheetSpec


class TestColumnSpec:
    """ColumnSpec validation and derived values"""

    def test_defaults(self):
        column = ColumnSpec(key="email")

        assert column.alt_key is None
        assert column.label is None
        assert column.width is None
        assert column.render is None
        assert column.column_id == "email"
        assert column.header == "email"

    def test_alt_key_id(self):
        column = ColumnSpec(key="address", alt_key="zip_code", label="ZIP")

        assert column.column_id == "address_zip_code"
        assert column.header == "ZIP"

    @pytest.mark.parametrize("width", ["auto", 1, 20, 12.5])
    def test_valid_widths(self, width):
        assert ColumnSpec(key="a", width=width).width == width

    @pytest.mark.parametrize("width", [0, -5, "wide", "AUTO "])
    def test_invalid_widths(self, width):
        with pytest.raises(ValidationError):
            ColumnSpec(key="a", width=width)

    def test_render_must_be_callable(self):
        with pytest.raises(ValidationError):
            ColumnSpec(key="a", render="upper")


class TestWorksheetSpec:
    """WorksheetSpec defaults"""

    def test_defaults(self):
        worksheet = WorksheetSpec()

        assert worksheet.records == []
        assert worksheet.columns is None
        assert worksheet.default_column_width is None
        assert worksheet.has_custom_columns is False

    def test_invalid_default_width(self):
        with pytest.raises(ValidationError):
            WorksheetSpec(default_column_width=0)


class TestWorkbookSpec:
    """WorkbookSpec defaults"""

    def test_worksheets_default_to_empty(self):
        assert WorkbookSpec(filename="report").worksheets == []
