"""Pure helpers for ids, JSON/XML bodies, headers, text, and dates.

These modules are free of FastAPI/HTTP concerns so they can be unit-tested and
imported directly by any client code.
"""
from .dates import humanize_date, relative_date
from .headers import get_content_type
from .ids import generate_id, simple_hash
from .jsonfmt import (
    convert_to_codemirror_json,
    safe_parse_json,
    safe_stringify_json,
    try_convert_to_codemirror_json,
    try_parse_json,
    try_stringify_json,
)
from .results import UNSET, FormatError, Outcome
from .text import normalize_file_name, pluralize_word, starts_with
from .ticks import wait_for_next_tick
from .xmlfmt import XmlFormatOptions, safe_parse_xml, try_parse_xml

__all__ = [
    "UNSET",
    "FormatError",
    "Outcome",
    "XmlFormatOptions",
    "convert_to_codemirror_json",
    "generate_id",
    "get_content_type",
    "humanize_date",
    "normalize_file_name",
    "pluralize_word",
    "relative_date",
    "safe_parse_json",
    "safe_parse_xml",
    "safe_stringify_json",
    "simple_hash",
    "starts_with",
    "try_convert_to_codemirror_json",
    "try_parse_json",
    "try_parse_xml",
    "try_stringify_json",
    "wait_for_next_tick",
]
