from __future__ import annotations

from .errors import FormatError

XRPL_ALPHABET = "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"
RADIX = 58

_ZERO = XRPL_ALPHABET[0]
_INDEX = {ch: i for i, ch in enumerate(XRPL_ALPHABET)}

if len(_INDEX) != RADIX or len(XRPL_ALPHABET) != RADIX:
    raise RuntimeError("alphabet must contain exactly 58 unique characters")


def to_text(raw: bytes) -> str:
    if not isinstance(raw, (bytes, bytearray)):
        raise TypeError("base58 encoder requires bytes")
    zeros = len(raw) - len(bytes(raw).lstrip(b"\x00"))
    n = int.from_bytes(raw, "big")
    chars: list[str] = []
    while n > 0:
        n, rem = divmod(n, RADIX)
        chars.append(XRPL_ALPHABET[rem])
    return (_ZERO * zeros) + "".join(reversed(chars))


def from_text(value: str) -> bytes:
    if not isinstance(value, str) or not value:
        raise FormatError("base58 text must be a non-empty string")
    n = 0
    for pos, ch in enumerate(value):
        digit = _INDEX.get(ch)
        if digit is None:
            raise FormatError(f"invalid base58 character {ch!r} at position {pos}")
        n = n * RADIX + digit
    zeros = len(value) - len(value.lstrip(_ZERO))
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    return (b"\x00" * zeros) + body
