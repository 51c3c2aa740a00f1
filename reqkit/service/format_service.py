from __future__ import annotations

import os
from typing import Any

from ..domain.headers import get_content_type
from ..domain.ids import generate_id, simple_hash
from ..domain.jsonfmt import parse_json, stringify_json, try_convert_to_codemirror_json
from ..domain.xmlfmt import XmlFormatOptions, format_xml
from ..logging_conf import get_logger

logger = get_logger("service.format")


def get_id_batch_max_from_env() -> int:
    """Return ID_BATCH_MAX from environment, defaulting to 100."""
    raw = os.getenv("ID_BATCH_MAX", "100")
    try:
        val = int(raw, 10)
    except ValueError as e:  # pragma: no cover
        raise ValueError("ID_BATCH_MAX must be an integer") from e
    if val < 1:
        raise ValueError("ID_BATCH_MAX must be >= 1")
    return val


# ------------------------
# Use-cases
# ------------------------

def issue_ids(*, count: int) -> list[str]:
    """Mint `count` fresh identifiers."""
    limit = get_id_batch_max_from_env()
    if not (1 <= count <= limit):
        raise ValueError(f"count must be between 1 and {limit}")
    ids = [generate_id() for _ in range(count)]
    logger.info("ids.issue", extra={"event": "ids_issue", "count": count})
    return ids


def hash_text(*, text: str) -> str:
    return simple_hash(text)


def format_json_body(*, text: str, indent: bool) -> dict:
    """Re-serialize a JSON body.

    Raises InvalidJsonError for bodies that don't parse.
    """
    formatted = stringify_json(parse_json(text), indent=indent)
    logger.info(
        "format.json",
        extra={"event": "format_json", "indent": indent, "length": len(text)},
    )
    return {"formatted": formatted, "changed": formatted != text}


def format_xml_body(*, text: str, options: XmlFormatOptions | None = None) -> dict:
    """Pretty-print an XML body. Raises InvalidXmlError for malformed input."""
    formatted = format_xml(text, options)
    logger.info("format.xml", extra={"event": "format_xml", "length": len(text)})
    return {"formatted": formatted, "changed": formatted != text}


def codemirror_body(*, value: Any) -> dict:
    outcome = try_convert_to_codemirror_json(value)
    return {"formatted": outcome.value}


def sniff_content_type(*, headers: list[tuple[str, str]]) -> str:
    content_type = get_content_type(headers)
    logger.info(
        "headers.sniff",
        extra={"event": "headers_sniff", "count": len(headers), "content_type": content_type},
    )
    return content_type
