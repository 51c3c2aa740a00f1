from __future__ import annotations

import json
import math
from typing import Any

import json5

from ..logging_conf import get_logger, log_fallback
from .results import UNSET, InvalidJsonError, Outcome, UnserializableError
from .text import is_invalid_string

__all__ = [
    "parse_json",
    "stringify_json",
    "try_parse_json",
    "try_stringify_json",
    "try_convert_to_codemirror_json",
    "safe_parse_json",
    "safe_stringify_json",
    "convert_to_codemirror_json",
]

logger = get_logger("domain.jsonfmt")

_COMPACT = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _nulls_for_non_finite(value: Any, _path: frozenset[int] = frozenset()) -> Any:
    """Copy `value` with NaN/Infinity floats replaced by None.

    Mirrors browser JSON output, where non-finite numbers become null.

    Raises:
        ValueError: on a circular reference.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (dict, list, tuple)):
        if id(value) in _path:
            raise ValueError("Circular reference detected")
        path = _path | {id(value)}
        if isinstance(value, dict):
            return {k: _nulls_for_non_finite(v, path) for k, v in value.items()}
        return [_nulls_for_non_finite(v, path) for v in value]
    return value


# ------------------------
# Strict forms
# ------------------------

def parse_json(text: str) -> Any:
    """Parse strict JSON text.

    Raises:
        InvalidJsonError: if `text` is not valid JSON (NaN/Infinity included).
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise InvalidJsonError(str(e)) from e


def stringify_json(value: Any, indent: bool = False) -> str:
    """Serialize `value` to JSON text, compact unless `indent` is set (2 spaces).

    NaN and +/-Infinity are written as null.

    Raises:
        UnserializableError: for unsupported types or circular references.
    """
    try:
        value = _nulls_for_non_finite(value)
        if indent:
            return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        return json.dumps(value, separators=_COMPACT, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise UnserializableError(str(e)) from e


# ------------------------
# Best-effort forms
# ------------------------

def try_parse_json(text: Any) -> Outcome:
    if is_invalid_string(text):
        return Outcome.unchanged(text)
    try:
        return Outcome.converted(parse_json(text))
    except InvalidJsonError as e:
        log_fallback(logger, "json.parse", e)
        return Outcome.unchanged(text)


def try_stringify_json(value: Any, indent: bool = False) -> Outcome:
    if value is UNSET:
        return Outcome.unchanged(value)
    try:
        return Outcome.converted(stringify_json(value, indent=indent))
    except UnserializableError as e:
        log_fallback(logger, "json.stringify", e)
        return Outcome.unchanged(value)


def try_convert_to_codemirror_json(value: Any) -> Outcome:
    """JSON5-serialize `value` and strip its outer delimiters.

    A dict therefore becomes object-body text ready to embed in an editor
    buffer: {"a": 1} -> 'a: 1'; identifier keys stay unquoted, strings and
    other keys are quoted.
    """
    try:
        text = json5.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        log_fallback(logger, "json5.stringify", e)
        return Outcome.unchanged(value)
    return Outcome.converted(text[1:-1])


def safe_parse_json(text: Any) -> Any:
    """Parse JSON text, returning the input unchanged if it can't be parsed."""
    return try_parse_json(text).value


def safe_stringify_json(value: Any = UNSET, indent: bool = False) -> Any:
    """Serialize to JSON text, returning the input unchanged on failure.

    `UNSET` (no value) passes straight through; None serializes to "null".
    """
    return try_stringify_json(value, indent=indent).value


def convert_to_codemirror_json(value: Any) -> Any:
    return try_convert_to_codemirror_json(value).value
