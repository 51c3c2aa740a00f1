from __future__ import annotations

import os
import re
from typing import Any

from lxml import etree
from pydantic import BaseModel, Field

from ..logging_conf import get_logger, log_fallback
from .results import InvalidXmlError, Outcome
from .text import is_invalid_string

__all__ = [
    "XmlFormatOptions",
    "format_xml",
    "try_parse_xml",
    "safe_parse_xml",
]

logger = get_logger("domain.xmlfmt")

_DECLARATION_RE = re.compile(r"^\s*(<\?xml[^>]*\?>)\s*")


def get_indent_from_env() -> int:
    """Read XML_INDENT (spaces per level) from environment, defaulting to 4."""
    raw = os.getenv("XML_INDENT", "4")
    try:
        val = int(raw, 10)
    except ValueError as e:  # pragma: no cover
        raise ValueError("XML_INDENT must be an integer") from e
    if val < 0:
        raise ValueError("XML_INDENT must be >= 0")
    return val


class XmlFormatOptions(BaseModel):
    """Pretty-print settings for XML bodies."""

    indentation: str = Field(default_factory=lambda: " " * get_indent_from_env())
    line_separator: str = "\n"
    strip_comments: bool = False


def _parser(options: XmlFormatOptions) -> etree.XMLParser:
    # Never expand entities or fetch DTDs for a body we only want to display.
    return etree.XMLParser(
        remove_blank_text=True,
        remove_comments=options.strip_comments,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def format_xml(text: str, options: XmlFormatOptions | None = None) -> str:
    """Pretty-print an XML document.

    A leading XML declaration is kept verbatim; everything else is re-indented.

    Raises:
        InvalidXmlError: if `text` is not well-formed XML.
    """
    opts = options or XmlFormatOptions()
    declaration = ""
    m = _DECLARATION_RE.match(text)
    if m:
        declaration = m.group(1)
        text = text[m.end():]

    try:
        root = etree.fromstring(text, _parser(opts))
    except (etree.XMLSyntaxError, ValueError) as e:
        raise InvalidXmlError(str(e)) from e
    if root is None:
        raise InvalidXmlError("document has no root element")

    etree.indent(root, space=opts.indentation)
    body = etree.tostring(root, encoding="unicode")
    if declaration:
        body = f"{declaration}\n{body}"
    if opts.line_separator != "\n":
        body = body.replace("\n", opts.line_separator)
    return body


def try_parse_xml(text: Any, options: XmlFormatOptions | None = None) -> Outcome:
    if is_invalid_string(text):
        return Outcome.unchanged(text)
    try:
        return Outcome.converted(format_xml(text, options))
    except InvalidXmlError as e:
        log_fallback(logger, "xml.format", e)
        return Outcome.unchanged(text)


def safe_parse_xml(text: Any, options: XmlFormatOptions | None = None) -> Any:
    """Pretty-print XML, returning the input unchanged if it can't be parsed."""
    return try_parse_xml(text, options).value
