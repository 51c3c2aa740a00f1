from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

__all__ = [
    "JSON_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "get_content_type",
]

JSON_CONTENT_TYPE = "application/ld+json"
XML_CONTENT_TYPE = "application/xml"

# type/subtype with an optional vendor prefix: application/vnd.api+json, text/xml, ...
_JSON_RE = re.compile(r"^[\w\-]+/([\w\-]+\+)?json", re.ASCII)
_XML_RE = re.compile(r"^[\w\-]+/([\w\-]+\+)?xml", re.ASCII)

HeaderCollection = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _iter_headers(headers: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(headers, Mapping):
        return headers.items()
    if isinstance(headers, (str, bytes)) or not isinstance(headers, Iterable):
        return ()
    return (pair for pair in headers if isinstance(pair, (tuple, list)) and len(pair) == 2)


def get_content_type(headers: HeaderCollection | None) -> Any:
    """Classify the Content-Type header into a coarse family.

    - JSON-like (application/json, application/hal+json, ...) -> "application/ld+json"
    - XML-like (text/xml, application/atom+xml, ...)          -> "application/xml"
    - anything else is returned verbatim
    - "" when there is no Content-Type header at all

    Accepts a mapping (dict, httpx.Headers) or an iterable of (name, value) pairs.
    The header name is matched case-insensitively; the first match wins.
    """
    for name, value in _iter_headers(headers):
        if not isinstance(name, str) or name.lower() != "content-type":
            continue
        if isinstance(value, str):
            if _JSON_RE.match(value):
                return JSON_CONTENT_TYPE
            if _XML_RE.match(value):
                return XML_CONTENT_TYPE
        return value
    return ""
