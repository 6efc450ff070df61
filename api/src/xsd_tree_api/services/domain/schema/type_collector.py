#!/usr/bin/env python3
"""Global type collection for XSD type reference resolution.

Type definitions may appear before or after the elements that reference them,
so all named complexType/simpleType spans are captured up front and replayed
by the tree builder whenever a reference is met.
"""

import logging
from typing import Iterable

from .xsd_events import SchemaEvent, is_schema_tag

logger = logging.getLogger(__name__)

TYPE_TAGS = ("complexType", "simpleType")


def _is_type_definition(event: SchemaEvent) -> bool:
    return event.is_start and any(is_schema_tag(event, tag) for tag in TYPE_TAGS)


def collect_global_types(events: Iterable[SchemaEvent]) -> dict[str, list[SchemaEvent]]:
    """Capture the event span of every named complexType/simpleType.

    A span runs from the opening tag to its balancing close tag, both included.
    Balancing only counts tags with the same local name as the opening tag;
    nothing else in XSD shares those two names.

    Definitions without a ``name`` attribute are skipped. The name is stored
    as written; prefixes are only stripped from references.

    Args:
        events: Schema events in document order

    Returns:
        Dictionary mapping type name to its captured events
    """
    type_map = {}
    stream = iter(events)

    for event in stream:
        if not _is_type_definition(event):
            continue

        type_name = event.attr("name")
        if type_name is None:
            continue

        span = [event]
        depth = 1
        for next_event in stream:
            span.append(next_event)
            if next_event.local_name == event.local_name:
                depth += 1 if next_event.is_start else -1
            if depth == 0:
                break

        type_map[type_name] = span
        logger.debug(f"Registered type definition: {type_name}")

    return type_map
