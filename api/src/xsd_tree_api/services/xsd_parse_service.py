#!/usr/bin/env python3
"""
XSD Parse Service

Parses an XSD document into an XsdNode tree and converts trees to and from
their JSON representation. Stateless: every call builds its own type map and
tree, so concurrent callers need no locking.
"""

import json
import logging
from typing import Optional

from .domain.schema.errors import EmptyInputError, XsdParseError
from .domain.schema.type_collector import collect_global_types
from .domain.schema.xsd_events import read_schema_events
from .domain.schema.xsd_tree import XsdNode, build_tree

logger = logging.getLogger(__name__)


def parse_xsd(content: Optional[bytes], filename: Optional[str] = None) -> XsdNode:
    """Parse XSD bytes into the element tree of its first top-level element.

    The document is read once into memory; type collection and tree building
    then run as two passes over the same event list, which allows types to be
    referenced before they are defined.

    Args:
        content: Raw XSD bytes
        filename: Original filename, used for logging only

    Returns:
        Root XsdNode

    Raises:
        EmptyInputError: If content is empty
        MalformedDocumentError: If content is not well-formed XML
        RootElementNotFoundError: If no top-level <xs:element> exists
        RecursiveTypeDefinitionError: If a type references itself
    """
    log_extra = {"schema_file": filename}

    if not content:
        logger.warning("Rejected empty XSD content", extra=log_extra)
        raise EmptyInputError()

    try:
        events = read_schema_events(content)
        type_map = collect_global_types(events)
        root = build_tree(events, type_map)
    except XsdParseError as e:
        logger.error(f"XSD parsing failed [{e.code}]: {e}", extra=log_extra)
        raise

    logger.info(
        f"Successfully built XSD node tree with root '{root.name}' ({len(type_map)} global types)",
        extra=log_extra
    )
    return root


def serialize_to_json(root: XsdNode) -> str:
    """Serialize a tree using the name/type/attrs/children/selectable field names."""
    return json.dumps(root.to_dict())


def deserialize_from_json(payload: str) -> XsdNode:
    """Rebuild a tree from serialize_to_json output.

    Raises:
        ValueError: If payload is not valid JSON or not a JSON object
    """
    data = json.loads(payload)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for an XSD tree, got {type(data).__name__}")
    return XsdNode.from_dict(data)
