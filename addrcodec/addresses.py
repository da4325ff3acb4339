from __future__ import annotations

from . import codec
from .codec import DecodedSeed
from .versions import (
    ACCOUNT_ID,
    ACCOUNT_PUBLIC_KEY,
    ANY_SEED,
    NODE_PUBLIC_KEY,
    SECP256K1,
)


def encode_classic_address(account_id: bytes) -> str:
    return codec.encode(account_id, ACCOUNT_ID)


def decode_classic_address(classic_address: str) -> bytes:
    return codec.decode(classic_address, ACCOUNT_ID)


def encode_account_public_key(public_key: bytes) -> str:
    return codec.encode(public_key, ACCOUNT_PUBLIC_KEY)


def decode_account_public_key(account_public_key: str) -> bytes:
    return codec.decode(account_public_key, ACCOUNT_PUBLIC_KEY)


def encode_node_public_key(public_key: bytes) -> str:
    return codec.encode(public_key, NODE_PUBLIC_KEY)


def decode_node_public_key(node_public_key: str) -> bytes:
    return codec.decode(node_public_key, NODE_PUBLIC_KEY)


def encode_seed(entropy: bytes, algorithm: str = SECP256K1) -> str:
    """Encode 16 bytes of seed entropy for ``algorithm`` (secp256k1 or ed25519)."""
    return codec.encode_with(entropy, algorithm, ANY_SEED)


def decode_seed(seed: str) -> DecodedSeed:
    """Decode a seed and report which algorithm its prefix belongs to."""
    return codec.decode_any(seed, ANY_SEED)


def is_valid_classic_address(classic_address: str) -> bool:
    return codec.validate(classic_address, ACCOUNT_ID)


def is_valid_account_public_key(account_public_key: str) -> bool:
    return codec.validate(account_public_key, ACCOUNT_PUBLIC_KEY)


def is_valid_node_public_key(node_public_key: str) -> bool:
    return codec.validate(node_public_key, NODE_PUBLIC_KEY)


def is_valid_seed(seed: str) -> bool:
    return codec.validate(seed, ANY_SEED)


# Historical names used by the ledger's own tooling.
encode_account_id = encode_classic_address
decode_account_id = decode_classic_address
encode_public_key = encode_account_public_key
decode_public_key = decode_account_public_key
