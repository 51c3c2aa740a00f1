from __future__ import annotations

import re
from typing import Any

__all__ = [
    "is_invalid_string",
    "normalize_file_name",
    "starts_with",
    "pluralize_word",
]

# Anything outside word characters, whitespace and hyphen is unsafe in a file name.
_INVALID_FILENAME_CHARS_RE = re.compile(r"[^\w\s-]")


def is_invalid_string(value: Any) -> bool:
    """True for anything that is not a non-empty str."""
    return not isinstance(value, str) or not value


def normalize_file_name(name: Any) -> Any:
    """Replace every character unsafe in a file name with "-".

    Falsy input (None, "") is returned as is.
    """
    if not name:
        return name
    return _INVALID_FILENAME_CHARS_RE.sub("-", name)


def starts_with(text: Any, prefix: Any) -> bool:
    """Case-sensitive prefix check; False when either side is empty or not a str."""
    if is_invalid_string(text) or is_invalid_string(prefix):
        return False
    return text.startswith(prefix)


def pluralize_word(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"
