from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from ..domain.xmlfmt import XmlFormatOptions


class IdsResponse(BaseModel):
    """A batch of freshly minted identifiers."""
    ids: list[str]


class HashRequest(BaseModel):
    text: str


class HashResponse(BaseModel):
    hash: str


class JsonFormatRequest(BaseModel):
    """A raw JSON body to re-serialize."""
    text: str
    indent: bool = True


class XmlFormatRequest(BaseModel):
    """A raw XML body plus optional pretty-print settings."""
    text: str
    options: Optional[XmlFormatOptions] = None


class FormatResponse(BaseModel):
    """Formatted body; `changed` is False when it already matched the output."""
    formatted: str
    changed: bool


class CodeMirrorRequest(BaseModel):
    value: Any = None


class CodeMirrorResponse(BaseModel):
    formatted: Any


class ContentTypeRequest(BaseModel):
    """Request headers as (name, value) pairs, in wire order."""
    headers: list[tuple[str, str]] = Field(default_factory=list)


class ContentTypeResponse(BaseModel):
    content_type: str
