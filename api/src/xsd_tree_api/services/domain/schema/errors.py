#!/usr/bin/env python3
"""Errors raised while turning an XSD document into a node tree."""

from typing import Sequence


class XsdParseError(Exception):
    """Base class for failures reported by the XSD tree parser.

    Each subclass carries a stable ``code`` that the API layer passes through
    to clients unchanged.
    """

    code = "XSD_PARSE_ERROR"


class EmptyInputError(XsdParseError):
    """Raised when no schema bytes were supplied."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = "Provided XSD content is empty."):
        super().__init__(message)


class MalformedDocumentError(XsdParseError):
    """Raised when the schema bytes are not well-formed (or safe) XML."""

    code = "MALFORMED_DOCUMENT"


class RootElementNotFoundError(XsdParseError):
    """Raised when the schema declares no top-level <xs:element>."""

    code = "ROOT_ELEMENT_NOT_FOUND"

    def __init__(self, message: str = "Root <xs:element> not found in schema."):
        super().__init__(message)


class RecursiveTypeDefinitionError(XsdParseError):
    """Raised when a type reference re-enters a type that is still being expanded."""

    code = "RECURSIVE_TYPE_DEFINITION"

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__(f"Recursive type definition: {' -> '.join(self.chain)}")
