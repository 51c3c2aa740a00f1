from __future__ import annotations

import secrets
import struct

__all__ = [
    "ID_ALPHABET",
    "ID_SIZE",
    "generate_id",
    "simple_hash",
]

# nanoid's URL alphabet without "_" and "-"
ID_ALPHABET = "useandom26T198340PX75pxJACKVERYMINDBUSHWOLFGQZbfghjklqvwyzrict"
ID_SIZE = 21

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT32_MASK = 0xFFFFFFFF


def generate_id(size: int = ID_SIZE) -> str:
    """Return a random identifier drawn from `ID_ALPHABET` using the OS CSPRNG."""
    if size <= 0:
        raise ValueError("size must be a positive integer")
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits: list[str] = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _utf16_units(text: str) -> tuple[int, ...]:
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return struct.unpack(f"<{len(raw) // 2}H", raw)


def simple_hash(text: str) -> str:
    """Return a short, deterministic, non-cryptographic hash of `text`.

    Polynomial rolling hash (h = h*31 + unit) over UTF-16 code units, kept to
    32 bits and rendered unsigned in base 36.
    """
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _UINT32_MASK
    return _to_base36(h)
