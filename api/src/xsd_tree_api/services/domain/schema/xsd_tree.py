#!/usr/bin/env python3
"""XSD element tree builder for the schema selection UI.

Turns the schema event list into a tree of XsdNode objects. Each <xs:element>
becomes a node; its children come either from a referenced global type or from
an inline complexType. Structural groups (sequence, choice, all) contribute no
node of their own: their member elements are spliced into the enclosing node
in document order.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .errors import RecursiveTypeDefinitionError, RootElementNotFoundError
from .xsd_events import SchemaEvent, is_schema_tag, local_name_of

logger = logging.getLogger(__name__)

GROUP_TAGS = ("sequence", "all", "choice")

# Attributes carried as node fields instead of attrs
RESERVED_ATTRS = ("name", "type")


@dataclass
class XsdNode:
    """Node in the XSD element tree."""
    name: Optional[str] = None                          # Declared element name
    type: Optional[str] = None                          # Type reference as written (e.g. "xs:string")
    attrs: dict[str, str] = field(default_factory=dict)  # minOccurs, maxOccurs, nillable, ...
    children: list['XsdNode'] = field(default_factory=list)
    selectable: bool = True                             # False only for internal complexType wrappers

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "attrs": dict(self.attrs),
            "children": [child.to_dict() for child in self.children],
            "selectable": self.selectable,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'XsdNode':
        return cls(
            name=data.get("name"),
            type=data.get("type"),
            attrs=dict(data.get("attrs") or {}),
            children=[cls.from_dict(child) for child in data.get("children") or []],
            selectable=data.get("selectable", True),
        )


def strip_prefix(type_ref: str) -> str:
    """Remove a namespace prefix from a type reference ("xs:string" -> "string")."""
    return type_ref.split(":", 1)[1] if ":" in type_ref else type_ref


def _is_group(event: SchemaEvent) -> bool:
    return any(is_schema_tag(event, tag) for tag in GROUP_TAGS)


def _skip_element_body(stream: Iterator[SchemaEvent]) -> None:
    """Consume events up to and including the current element's close tag."""
    depth = 0
    for event in stream:
        if not is_schema_tag(event, "element"):
            continue
        if event.is_start:
            depth += 1
        elif depth == 0:
            return
        else:
            depth -= 1


def resolve_type_reference(
    type_name: str,
    type_map: dict[str, list[SchemaEvent]],
    expanding: tuple[str, ...] = ()
) -> list[XsdNode]:
    """Expand a global type into the children it contributes.

    The captured span is replayed from a fresh iterator, so the same type can
    be expanded any number of times.

    Args:
        type_name: Unprefixed type name present in type_map
        type_map: Global type spans from collect_global_types
        expanding: Types currently being expanded on this branch, outermost first

    Returns:
        Child nodes of the type

    Raises:
        RecursiveTypeDefinitionError: If type_name is already being expanded
    """
    if type_name in expanding:
        raise RecursiveTypeDefinitionError([*expanding, type_name])

    span = type_map[type_name]
    # Skip the opening complexType/simpleType tag itself
    wrapper = parse_complex_type(iter(span[1:]), type_map, (*expanding, type_name))
    return wrapper.children


def parse_element(
    stream: Iterator[SchemaEvent],
    start: SchemaEvent,
    type_map: dict[str, list[SchemaEvent]],
    expanding: tuple[str, ...] = ()
) -> XsdNode:
    """Build a node for an <xs:element>.

    The stream must be positioned just after ``start``; on return it is
    positioned just after the element's close tag.

    A type that resolves through type_map fully determines the children and any
    inline body is skipped. Otherwise an inline complexType supplies them.
    Primitive and undefined types both yield a leaf.
    """
    name = start.attr("name")
    type_ref = start.attr("type")
    node = XsdNode(name=name, type=type_ref, selectable=True)

    for attr_name, value in start.attrs.items():
        local = local_name_of(attr_name)
        if local not in RESERVED_ATTRS:
            node.attrs[local] = value

    if type_ref is not None and strip_prefix(type_ref) in type_map:
        node.children = resolve_type_reference(strip_prefix(type_ref), type_map, expanding)
        _skip_element_body(stream)
        logger.debug(f"Expanded type reference '{type_ref}' for node '{name}'")
        return node

    # Inline complexType, or nothing (simpleType, annotation, ...)
    depth = 0
    for event in stream:
        if event.is_start:
            if depth == 0 and is_schema_tag(event, "complexType"):
                node.children = parse_complex_type(stream, type_map, expanding).children
            elif is_schema_tag(event, "element"):
                depth += 1
        elif is_schema_tag(event, "element"):
            if depth == 0:
                break
            depth -= 1

    return node


def parse_complex_type(
    stream: Iterator[SchemaEvent],
    type_map: dict[str, list[SchemaEvent]],
    expanding: tuple[str, ...] = ()
) -> XsdNode:
    """Collect the elements of a complexType body into an unselectable wrapper.

    Consumes events up to the matching </xs:complexType>, or until the stream
    is exhausted when replaying a simpleType span. Elements inside groups and
    direct element children end up side by side in document order.
    """
    wrapper = XsdNode(selectable=False)

    for event in stream:
        if event.is_start:
            if _is_group(event):
                _flatten_group(stream, wrapper, type_map, expanding)
            elif is_schema_tag(event, "element"):
                wrapper.children.append(parse_element(stream, event, type_map, expanding))
        elif is_schema_tag(event, "complexType"):
            break

    return wrapper


def _flatten_group(
    stream: Iterator[SchemaEvent],
    parent: XsdNode,
    type_map: dict[str, list[SchemaEvent]],
    expanding: tuple[str, ...]
) -> None:
    """Append every element of a sequence/choice/all group to parent.

    Nested groups are flattened into the same parent. The group kind is not
    kept: choice and all members appear as ordinary siblings.
    """
    for event in stream:
        if event.is_start:
            if is_schema_tag(event, "element"):
                parent.children.append(parse_element(stream, event, type_map, expanding))
            elif _is_group(event):
                _flatten_group(stream, parent, type_map, expanding)
        elif _is_group(event):
            return


def build_tree(events: list[SchemaEvent], type_map: dict[str, list[SchemaEvent]]) -> XsdNode:
    """Build the tree rooted at the first top-level <xs:element>.

    Top-level means a direct child of the document element (<xs:schema>).

    Raises:
        RootElementNotFoundError: If no top-level element is declared
        RecursiveTypeDefinitionError: If a type (transitively) references itself
    """
    stream = iter(events)
    depth = 0
    for event in stream:
        if event.is_start:
            if depth == 1 and is_schema_tag(event, "element"):
                return parse_element(stream, event, type_map)
            depth += 1
        else:
            depth -= 1

    raise RootElementNotFoundError()
