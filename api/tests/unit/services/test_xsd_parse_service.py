#!/usr/bin/env python3

import json
import logging

import pytest

from xsd_tree_api.services.domain.schema.errors import (
    EmptyInputError,
    MalformedDocumentError,
    RecursiveTypeDefinitionError,
    RootElementNotFoundError,
)
from xsd_tree_api.services.xsd_parse_service import deserialize_from_json, parse_xsd, serialize_to_json


@pytest.mark.unit
class TestParseXsd:
    """Test suite for the parse service entry point"""

    def test_parses_order_schema(self, order_xsd):
        root = parse_xsd(order_xsd, "order.xsd")

        assert root.name == "Order"
        assert [c.name for c in root.children] == ["Id", "Lines"]
        assert [c.name for c in root.children[1].children] == ["Sku"]

    @pytest.mark.parametrize("content", [b"", None])
    def test_empty_input_is_rejected(self, content):
        with pytest.raises(EmptyInputError) as exc_info:
            parse_xsd(content)

        assert exc_info.value.code == "EMPTY_INPUT"

    def test_empty_input_never_reaches_reader(self, monkeypatch):
        def fail(_content):
            raise AssertionError("reader must not be called")

        monkeypatch.setattr("xsd_tree_api.services.xsd_parse_service.read_schema_events", fail)

        with pytest.raises(EmptyInputError):
            parse_xsd(b"")

    def test_malformed_xml(self, malformed_xsd):
        with pytest.raises(MalformedDocumentError):
            parse_xsd(malformed_xsd)

    def test_missing_root_element(self, no_root_xsd):
        with pytest.raises(RootElementNotFoundError):
            parse_xsd(no_root_xsd)

    def test_recursive_schema(self, recursive_xsd):
        with pytest.raises(RecursiveTypeDefinitionError):
            parse_xsd(recursive_xsd)

    def test_calls_are_independent(self, order_xsd, person_xsd):
        first = parse_xsd(order_xsd)
        second = parse_xsd(person_xsd)
        again = parse_xsd(order_xsd)

        assert first == again
        assert first is not again
        assert second.name == "Person"

    def test_failure_is_logged_with_error_code(self, no_root_xsd, caplog):
        with caplog.at_level(logging.ERROR, logger="xsd_tree_api.services.xsd_parse_service"):
            with pytest.raises(RootElementNotFoundError):
                parse_xsd(no_root_xsd, "types.xsd")

        assert "ROOT_ELEMENT_NOT_FOUND" in caplog.text
        assert caplog.records[-1].schema_file == "types.xsd"


@pytest.mark.unit
class TestJsonSerialization:
    """Test suite for JSON conversion of parsed trees"""

    def test_json_shape(self, person_xsd):
        data = json.loads(serialize_to_json(parse_xsd(person_xsd)))

        assert data["name"] == "Person"
        assert data["type"] == "test:PersonType"
        assert data["attrs"] == {}
        assert data["selectable"] is True
        assert data["children"][1] == {
            "name": "SurName",
            "type": "xs:string",
            "attrs": {"minOccurs": "0"},
            "children": [],
            "selectable": True,
        }

    def test_round_trip_is_lossless(self, order_xsd):
        root = parse_xsd(order_xsd)

        restored = deserialize_from_json(serialize_to_json(root))

        assert restored == root

    def test_absent_name_and_type_serialize_as_null(self, order_xsd):
        data = json.loads(serialize_to_json(parse_xsd(order_xsd)))

        assert data["type"] is None
        assert data["children"][0]["type"] == "xsd:string"

    @pytest.mark.parametrize("payload", ["[]", "42", '"text"'])
    def test_non_object_json_is_rejected(self, payload):
        with pytest.raises(ValueError):
            deserialize_from_json(payload)

    def test_invalid_json_is_rejected(self):
        with pytest.raises(ValueError):
            deserialize_from_json("{not json")
