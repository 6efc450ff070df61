#!/usr/bin/env python3

from typing import Any

from pydantic import BaseModel

# Pydantic Models


class XsdNodeModel(BaseModel):
    """Serialized XSD tree node as rendered by the selection UI."""

    name: str | None = None
    type: str | None = None
    attrs: dict[str, str] = {}  # minOccurs, maxOccurs, nillable, ...
    children: list["XsdNodeModel"] = []
    selectable: bool = True


XsdNodeModel.model_rebuild()


class XsdParseResponse(BaseModel):
    status: str  # 'success'
    file_name: str | None = None
    root: XsdNodeModel


class ErrorDetail(BaseModel):
    """Error payload returned in HTTPException.detail."""

    code: str  # e.g. 'EMPTY_INPUT', 'MALFORMED_DOCUMENT'
    message: str
    context: dict[str, Any] = {}
