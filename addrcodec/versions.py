"""Version profiles: the prefix bytes and payload length of each identifier kind.

Every profile and set below is a module-level constant. The prefix values are
fixed by the ledger protocol; changing any of them breaks interoperability
without raising an error anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import UnknownAlgorithmError

ACCOUNT_ID_LENGTH = 20
PUBLIC_KEY_LENGTH = 33
SEED_LENGTH = 16

SECP256K1 = "secp256k1"
ED25519 = "ed25519"


@dataclass(frozen=True)
class VersionProfile:
    name: str
    prefix: bytes
    payload_length: int

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, bytes) or not self.prefix:
            raise ValueError(f"version profile {self.name!r} requires at least one prefix byte")
        if not isinstance(self.payload_length, int) or self.payload_length <= 0:
            raise ValueError(f"version profile {self.name!r} requires a positive payload length")


@dataclass(frozen=True)
class VersionSet:
    """Ordered algorithm tag -> profile table for kinds that need inference.

    Decoding against a set tries the members in declared order and the first
    match wins.
    """

    members: tuple[tuple[str, VersionProfile], ...]

    def __post_init__(self) -> None:
        seen_tags: set[str] = set()
        seen_shapes: dict[tuple[bytes, int], str] = {}
        for tag, profile in self.members:
            if tag in seen_tags:
                raise ValueError(f"duplicate algorithm tag in version set: {tag!r}")
            seen_tags.add(tag)
            shape = (profile.prefix, profile.payload_length)
            if shape in seen_shapes:
                raise ValueError(
                    f"algorithms {seen_shapes[shape]!r} and {tag!r} share prefix and length"
                )
            seen_shapes[shape] = tag

    @classmethod
    def of(cls, *members: tuple[str, VersionProfile]) -> "VersionSet":
        return cls(members=tuple(members))

    def __iter__(self) -> Iterator[tuple[str, VersionProfile]]:
        return iter(self.members)

    @property
    def algorithms(self) -> tuple[str, ...]:
        return tuple(t for t, _ in self.members)

    def profile_for(self, tag: str) -> VersionProfile:
        for t, profile in self.members:
            if t == tag:
                return profile
        known = ", ".join(self.algorithms)
        raise UnknownAlgorithmError(f"unknown algorithm {tag!r} (expected one of: {known})")


ACCOUNT_ID = VersionProfile(name="account-id", prefix=b"\x00", payload_length=ACCOUNT_ID_LENGTH)
ACCOUNT_PUBLIC_KEY = VersionProfile(
    name="account-public-key", prefix=b"\x23", payload_length=PUBLIC_KEY_LENGTH
)
NODE_PUBLIC_KEY = VersionProfile(
    name="node-public-key", prefix=b"\x1c", payload_length=PUBLIC_KEY_LENGTH
)
SECP256K1_SEED = VersionProfile(name="seed-secp256k1", prefix=b"\x21", payload_length=SEED_LENGTH)
ED25519_SEED = VersionProfile(
    name="seed-ed25519", prefix=b"\x01\xe1\x4b", payload_length=SEED_LENGTH
)

ANY_SEED = VersionSet.of((SECP256K1, SECP256K1_SEED), (ED25519, ED25519_SEED))
