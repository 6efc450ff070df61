#!/usr/bin/env python3
"""Schema event reader and namespace-aware tag matching.

The XSD document is read once into a flat list of start/end events. Both the
global type collector and the tree builder walk that list, so neither of them
depends on a particular XML parser.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Optional

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from .errors import MalformedDocumentError

# XSD namespace
XS_NS = "http://www.w3.org/2001/XMLSchema"

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Kind of schema event."""
    START = "start"
    END = "end"


@dataclass(frozen=True)
class SchemaEvent:
    """A start or end tag from the schema document."""
    kind: EventKind
    namespace: Optional[str]                    # Namespace URI, None when unqualified
    local_name: str                             # Tag name without prefix
    attrs: dict[str, str] = field(default_factory=dict)  # Raw attributes, {uri}local when qualified

    @property
    def is_start(self) -> bool:
        return self.kind is EventKind.START

    @property
    def is_end(self) -> bool:
        return self.kind is EventKind.END

    def attr(self, name: str) -> Optional[str]:
        """Return an unqualified attribute value, or None if absent."""
        return self.attrs.get(name)


def split_clark_name(name: str) -> tuple[Optional[str], str]:
    """Split ``{uri}local`` into (uri, local); unqualified names get a None uri."""
    if name.startswith("{"):
        uri, _, local = name[1:].partition("}")
        return uri, local
    return None, name


def local_name_of(name: str) -> str:
    """Local part of a Clark-notation tag or attribute name."""
    return split_clark_name(name)[1]


def is_schema_tag(event: SchemaEvent, local_name: str) -> bool:
    """Check whether an event is the XML Schema tag ``local_name``.

    The prefix used in the document is irrelevant; only the namespace URI and
    local name are compared. Start and end events are treated alike.
    """
    return event.namespace == XS_NS and event.local_name == local_name


def read_schema_events(content: bytes) -> list[SchemaEvent]:
    """Read an XML document into an ordered list of start/end events.

    Args:
        content: Raw document bytes

    Returns:
        Events in document order; every start event has a matching end event

    Raises:
        MalformedDocumentError: If the bytes are not well-formed XML, or the
            document uses constructs rejected by defusedxml (entity expansion,
            external references)
    """
    events = []
    try:
        for action, elem in ET.iterparse(BytesIO(content), events=("start", "end")):
            namespace, local = split_clark_name(elem.tag)
            if action == "start":
                events.append(SchemaEvent(EventKind.START, namespace, local, dict(elem.attrib)))
            else:
                events.append(SchemaEvent(EventKind.END, namespace, local))
    except ET.ParseError as e:
        raise MalformedDocumentError(f"Error parsing XSD: {e}") from e
    except DefusedXmlException as e:
        raise MalformedDocumentError(f"Unsafe XML construct rejected: {e}") from e

    logger.debug(f"Read {len(events)} schema events")
    return events
