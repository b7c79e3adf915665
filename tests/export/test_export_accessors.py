"""
tests/export/test_export_accessors.py - record field accessor tests
"""

from collections import OrderedDict
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from excel_download.export.accessors import (
    AttributeFieldAccessor,
    DataclassFieldAccessor,
    MappingFieldAccessor,
    ModelFieldAccessor,
    get_accessor,
    get_field,
)


class Product(BaseModel):
    sku: str
    name: str
    stock: int = 0


@dataclass
class Shipment:
    carrier: str
    weight: float


class Plain:
    def __init__(self):
        self.title = "Report"
        self.pages = 12
        self._cache = {}


class TestGetAccessor:
    """Accessor selection"""

    @pytest.mark.parametrize("record, expected", [
        ({"a": 1}, MappingFieldAccessor),
        (OrderedDict(a=1), MappingFieldAccessor),
        (Product(sku="A", name="Widget"), ModelFieldAccessor),
        (Shipment("UPS", 1.5), DataclassFieldAccessor),
        (Plain(), AttributeFieldAccessor),
    ])
    def test_selects_accessor_by_shape(self, record, expected):
        assert get_accessor(record) is expected

    @pytest.mark.parametrize("record", [42, "text", (1, 2), None])
    def test_unsupported_records_raise(self, record):
        with pytest.raises(TypeError, match="Unsupported record type"):
            get_accessor(record)


class TestFieldNames:
    """Natural field order per record shape"""

    def test_mapping_insertion_order(self):
        assert MappingFieldAccessor.field_names({"b": 1, "a": 2}) == ["b", "a"]

    def test_mapping_keys_are_listed_as_text(self):
        assert MappingFieldAccessor.field_names({1: "x", "b": 2}) == ["1", "b"]

    def test_model_declaration_order(self):
        assert ModelFieldAccessor.field_names(Product(sku="A", name="W")) == ["sku", "name", "stock"]

    def test_dataclass_declaration_order(self):
        assert DataclassFieldAccessor.field_names(Shipment("DHL", 2.0)) == ["carrier", "weight"]

    def test_plain_object_skips_private_attributes(self):
        assert AttributeFieldAccessor.field_names(Plain()) == ["title", "pages"]


class TestGetField:
    """Reading single fields"""

    def test_present_fields(self):
        assert get_field({"a": 1}, "a") == 1
        assert get_field(Product(sku="A", name="W", stock=3), "stock") == 3
        assert get_field(Shipment("UPS", 4.0), "carrier") == "UPS"
        assert get_field(Plain(), "pages") == 12

    @pytest.mark.parametrize("record", [
        {"a": 1},
        Product(sku="A", name="W"),
        Shipment("UPS", 1.0),
        Plain(),
    ])
    def test_absent_fields_are_none(self, record):
        assert get_field(record, "missing") is None

    def test_model_methods_are_not_fields(self):
        assert get_field(Product(sku="A", name="W"), "model_dump") is None

    def test_non_string_mapping_keys_are_read_by_their_listed_name(self):
        record = {1: "x", "b": 2}

        assert [get_field(record, name) for name in MappingFieldAccessor.field_names(record)] == ["x", 2]
