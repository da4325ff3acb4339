"""Base58check codec for XRP Ledger account IDs, public keys and seeds.

Encoding and decoding are pure functions over immutable version tables, so
every call is safe to run concurrently. A small Typer CLI in ``addrcodec.cli``
exposes the same operations for shell use.
"""

from .addresses import (
    decode_account_id,
    decode_account_public_key,
    decode_classic_address,
    decode_node_public_key,
    decode_public_key,
    decode_seed,
    encode_account_id,
    encode_account_public_key,
    encode_classic_address,
    encode_node_public_key,
    encode_public_key,
    encode_seed,
    is_valid_account_public_key,
    is_valid_classic_address,
    is_valid_node_public_key,
    is_valid_seed,
)
from .base58 import XRPL_ALPHABET
from .codec import DecodedSeed, DecodeResult, decode, decode_any, encode, encode_with, try_decode, validate
from .errors import (
    AddressCodecError,
    ChecksumError,
    FormatError,
    LengthError,
    PrefixMismatchError,
    UnknownAlgorithmError,
    UnrecognizedFormatError,
)
from .versions import (
    ACCOUNT_ID,
    ACCOUNT_ID_LENGTH,
    ACCOUNT_PUBLIC_KEY,
    ANY_SEED,
    ED25519,
    ED25519_SEED,
    NODE_PUBLIC_KEY,
    PUBLIC_KEY_LENGTH,
    SECP256K1,
    SECP256K1_SEED,
    SEED_LENGTH,
    VersionProfile,
    VersionSet,
)

__all__ = [
    "__version__",
    "ACCOUNT_ID",
    "ACCOUNT_ID_LENGTH",
    "ACCOUNT_PUBLIC_KEY",
    "ANY_SEED",
    "AddressCodecError",
    "ChecksumError",
    "DecodeResult",
    "DecodedSeed",
    "ED25519",
    "ED25519_SEED",
    "FormatError",
    "LengthError",
    "NODE_PUBLIC_KEY",
    "PUBLIC_KEY_LENGTH",
    "PrefixMismatchError",
    "SECP256K1",
    "SECP256K1_SEED",
    "SEED_LENGTH",
    "UnknownAlgorithmError",
    "UnrecognizedFormatError",
    "VersionProfile",
    "VersionSet",
    "XRPL_ALPHABET",
    "decode",
    "decode_account_id",
    "decode_account_public_key",
    "decode_any",
    "decode_classic_address",
    "decode_node_public_key",
    "decode_public_key",
    "decode_seed",
    "encode",
    "encode_account_id",
    "encode_account_public_key",
    "encode_classic_address",
    "encode_node_public_key",
    "encode_public_key",
    "encode_seed",
    "encode_with",
    "is_valid_account_public_key",
    "is_valid_classic_address",
    "is_valid_node_public_key",
    "is_valid_seed",
    "try_decode",
    "validate",
]

__version__ = "0.1.0"
