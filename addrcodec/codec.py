"""Versioned base58check encode/decode/validate.

``decode`` and ``decode_any`` raise typed ``AddressCodecError`` subclasses.
``try_decode`` returns a ``DecodeResult`` instead, for callers that treat
malformed user input as an ordinary outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from . import base58, checksum
from .errors import (
    AddressCodecError,
    ChecksumError,
    FormatError,
    LengthError,
    PrefixMismatchError,
    UnrecognizedFormatError,
)
from .versions import VersionProfile, VersionSet

ProfileOrSet = Union[VersionProfile, VersionSet]


@dataclass(frozen=True)
class DecodedSeed:
    algorithm: str
    payload: bytes


@dataclass(frozen=True)
class DecodeResult:
    payload: bytes | None = None
    algorithm: str | None = None
    error: AddressCodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _require_bytes(payload: bytes) -> bytes:
    if not isinstance(payload, (bytes, bytearray)):
        raise TypeError(f"payload must be bytes, got {type(payload).__name__}")
    return bytes(payload)


def encode(payload: bytes, profile: VersionProfile) -> str:
    raw = _require_bytes(payload)
    if len(raw) != profile.payload_length:
        raise LengthError(
            f"{profile.name} payload must be {profile.payload_length} bytes, got {len(raw)}"
        )
    body = profile.prefix + raw
    return base58.to_text(body + checksum.compute(body))


def encode_with(payload: bytes, algorithm: str, version_set: VersionSet) -> str:
    return encode(payload, version_set.profile_for(algorithm))


def _unpack(text: str, *, min_length: int) -> bytes:
    """Base58-decode ``text`` and strip a verified checksum."""
    raw = base58.from_text(text)
    if len(raw) < min_length:
        raise FormatError(f"decoded value too short: {len(raw)} bytes")
    if not checksum.verify(raw):
        raise ChecksumError("checksum mismatch")
    return raw[: -checksum.CHECKSUM_LENGTH]


def _match(body: bytes, profile: VersionProfile) -> bytes:
    prefix = profile.prefix
    if len(body) < len(prefix):
        raise FormatError(f"decoded value too short for {profile.name}")
    if body[: len(prefix)] != prefix:
        raise PrefixMismatchError(
            f"prefix {body[: len(prefix)].hex()} does not match {profile.name} ({prefix.hex()})"
        )
    payload = body[len(prefix) :]
    if len(payload) != profile.payload_length:
        raise LengthError(
            f"{profile.name} payload must be {profile.payload_length} bytes, got {len(payload)}"
        )
    return payload


def decode(text: str, profile: VersionProfile) -> bytes:
    body = _unpack(text, min_length=len(profile.prefix) + checksum.CHECKSUM_LENGTH)
    return _match(body, profile)


def decode_any(text: str, version_set: VersionSet) -> DecodedSeed:
    """Decode against every member of ``version_set`` in declared order.

    Only prefix and length mismatches move on to the next candidate; format
    and checksum failures are the same for every member and raise at once.
    """
    shortest = min((len(p.prefix) for _, p in version_set), default=1)
    body = _unpack(text, min_length=shortest + checksum.CHECKSUM_LENGTH)
    for algorithm, profile in version_set:
        try:
            return DecodedSeed(algorithm=algorithm, payload=_match(body, profile))
        except (PrefixMismatchError, LengthError, FormatError):
            continue
    known = ", ".join(version_set.algorithms)
    raise UnrecognizedFormatError(f"value does not match any of: {known}")


def try_decode(text: str, target: ProfileOrSet) -> DecodeResult:
    if not isinstance(text, str):
        return DecodeResult(error=FormatError(f"expected str, got {type(text).__name__}"))
    try:
        if isinstance(target, VersionSet):
            seed = decode_any(text, target)
            return DecodeResult(payload=seed.payload, algorithm=seed.algorithm)
        return DecodeResult(payload=decode(text, target))
    except AddressCodecError as e:
        return DecodeResult(error=e)


def validate(text: str, target: ProfileOrSet) -> bool:
    return try_decode(text, target).ok
