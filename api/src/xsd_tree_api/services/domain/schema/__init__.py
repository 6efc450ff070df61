"""
XSD Schema Tree Domain

Turns an XML Schema document into a selectable element tree:
- Event reading and namespace-aware tag matching (xsd_events)
- Global type collection for forward references (type_collector)
- Element tree building with type expansion and group flattening (xsd_tree)
"""

from .errors import (
    EmptyInputError,
    MalformedDocumentError,
    RecursiveTypeDefinitionError,
    RootElementNotFoundError,
    XsdParseError,
)
from .type_collector import collect_global_types
from .xsd_events import EventKind, SchemaEvent, is_schema_tag, read_schema_events
from .xsd_tree import XsdNode, build_tree, parse_complex_type, parse_element, resolve_type_reference

__all__ = [
    # Errors
    "XsdParseError",
    "EmptyInputError",
    "MalformedDocumentError",
    "RootElementNotFoundError",
    "RecursiveTypeDefinitionError",
    # Events
    "EventKind",
    "SchemaEvent",
    "is_schema_tag",
    "read_schema_events",
    # Tree building
    "collect_global_types",
    "XsdNode",
    "build_tree",
    "parse_element",
    "parse_complex_type",
    "resolve_type_reference",
]
