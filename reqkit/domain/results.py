from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

__all__ = [
    "UNSET",
    "Outcome",
    "FormatError",
    "InvalidJsonError",
    "InvalidXmlError",
    "UnserializableError",
]


class _Unset:
    """Marker for "no value at all", distinct from None (which is JSON null)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


@dataclass(frozen=True)
class Outcome:
    """Result of a best-effort conversion.

    `changed` is False when the helper fell back to returning its input as is.
    """

    value: Any
    changed: bool

    @classmethod
    def unchanged(cls, value: Any) -> Outcome:
        return cls(value=value, changed=False)

    @classmethod
    def converted(cls, value: Any) -> Outcome:
        return cls(value=value, changed=True)


# ------------------------
# Errors
# ------------------------
class FormatError(ValueError):
    """Base class for parse/format failures raised by the strict helpers.

    The `code` attribute lets the API map errors to stable machine codes.
    """

    code: str = "format_error"


class InvalidJsonError(FormatError):
    code = "invalid_json"


class InvalidXmlError(FormatError):
    code = "invalid_xml"


class UnserializableError(FormatError):
    code = "unserializable"
