#!/usr/bin/env python3

import pytest

from xsd_tree_api.services.domain.schema.errors import MalformedDocumentError
from xsd_tree_api.services.domain.schema.xsd_events import (
    XS_NS,
    EventKind,
    SchemaEvent,
    is_schema_tag,
    local_name_of,
    read_schema_events,
)


@pytest.mark.unit
class TestSchemaTagMatching:
    """Test suite for namespace-aware tag matching"""

    def test_matches_schema_namespace_and_local_name(self):
        event = SchemaEvent(EventKind.START, XS_NS, "element", {"name": "Order"})
        assert is_schema_tag(event, "element") is True

    def test_rejects_other_local_name(self):
        event = SchemaEvent(EventKind.START, XS_NS, "element")
        assert is_schema_tag(event, "complexType") is False

    def test_rejects_foreign_namespace(self):
        event = SchemaEvent(EventKind.START, "http://example.com/not-xsd", "element")
        assert is_schema_tag(event, "element") is False

    def test_rejects_unqualified_tag(self):
        event = SchemaEvent(EventKind.START, None, "element")
        assert is_schema_tag(event, "element") is False

    def test_end_tags_match_like_start_tags(self):
        event = SchemaEvent(EventKind.END, XS_NS, "sequence")
        assert is_schema_tag(event, "sequence") is True

    @pytest.mark.parametrize("prefix", ["xs", "xsd", "schema"])
    def test_prefix_does_not_matter(self, prefix):
        content = (
            f'<{prefix}:schema xmlns:{prefix}="{XS_NS}">'
            f'<{prefix}:element name="A"/>'
            f'</{prefix}:schema>'
        ).encode()

        events = read_schema_events(content)

        assert is_schema_tag(events[1], "element")

    def test_default_namespace_is_recognized(self):
        content = f'<schema xmlns="{XS_NS}"><element name="A"/></schema>'.encode()

        events = read_schema_events(content)

        assert all(is_schema_tag(e, e.local_name) for e in events)


@pytest.mark.unit
class TestReadSchemaEvents:
    """Test suite for reading XSD bytes into schema events"""

    def test_events_are_balanced_and_in_document_order(self, order_xsd):
        events = read_schema_events(order_xsd)

        starts = [e.local_name for e in events if e.is_start]
        ends = [e for e in events if e.is_end]

        assert starts[:4] == ["schema", "element", "complexType", "sequence"]
        assert len(starts) == len(ends)
        assert events[0].is_start and events[-1].is_end

    def test_start_events_carry_attributes(self, person_xsd):
        events = read_schema_events(person_xsd)

        surname = next(e for e in events if e.is_start and e.attr("name") == "SurName")

        assert surname.attr("type") == "xs:string"
        assert surname.attr("minOccurs") == "0"
        assert surname.attr("missing") is None

    def test_qualified_attributes_keep_namespace(self):
        content = (
            f'<xs:schema xmlns:xs="{XS_NS}" xmlns:ext="http://example.com/ext">'
            f'<xs:element name="A" ext:label="Alpha"/>'
            f'</xs:schema>'
        ).encode()

        events = read_schema_events(content)
        element = events[1]

        assert element.attrs["{http://example.com/ext}label"] == "Alpha"
        assert element.attr("label") is None
        assert local_name_of("{http://example.com/ext}label") == "label"

    def test_malformed_document_raises(self, malformed_xsd):
        with pytest.raises(MalformedDocumentError) as exc_info:
            read_schema_events(malformed_xsd)

        assert exc_info.value.code == "MALFORMED_DOCUMENT"
        assert exc_info.value.__cause__ is not None

    def test_entity_expansion_is_rejected(self):
        content = b"""<?xml version="1.0"?>
        <!DOCTYPE schema [<!ENTITY boom "boom">]>
        <xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
          <xs:element name="A" type="xs:string">&boom;</xs:element>
        </xs:schema>"""

        with pytest.raises(MalformedDocumentError):
            read_schema_events(content)
