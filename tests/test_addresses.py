import pytest

import addrcodec
from addrcodec.errors import (
    ChecksumError,
    LengthError,
    PrefixMismatchError,
    UnknownAlgorithmError,
    UnrecognizedFormatError,
)

ACCOUNT_ZERO = "rrrrrrrrrrrrrrrrrrrrrhoLvTp"
GENESIS_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
GENESIS_ACCOUNT_ID = "B5F762798A53D543A014CAF8B297CFF8F2F937E8"
MASTER_SEED = "snoPBrXtMeMyMHUVTgbuqAfg1SUTb"
MASTER_SEED_HEX = "DEDCE9CE67B451D852FD4E846FCDE31C"
MASTER_PUBLIC_KEY = "aBQG8RQAzjs1eTKFEAQXr2gS4utcDiEC9wmi7pfUPTi27VCahwgw"
MASTER_PUBLIC_KEY_HEX = "0330E7FC9D56BB25D6893BA3F317AE5BCF33B3291BD63DB32654A313222F7FD020"
NODE_PUBLIC_KEY = "n9MXXueo837zYH36DvMc13BwHcqtfAWNJY5czWVbp7uYTj7x17TH"
NODE_PUBLIC_KEY_HEX = "0388E5BA87A000CB807240DF8C848EB0B5FFA5C8E5A521BC8E105C0F0A44217828"
ED25519_SEED = "sEdTM1uX8pu2do5XvTnutH6HsouMaM2"
ED25519_SEED_HEX = "4C3A1D213FBDFB14C7C28D609469B341"


def test_zero_account_matches_published_vector():
    assert addrcodec.encode_classic_address(b"\x00" * 20) == ACCOUNT_ZERO
    assert addrcodec.decode_classic_address(ACCOUNT_ZERO) == b"\x00" * 20


def test_genesis_account_vector():
    raw = bytes.fromhex(GENESIS_ACCOUNT_ID)
    assert addrcodec.encode_classic_address(raw) == GENESIS_ADDRESS
    assert addrcodec.decode_classic_address(GENESIS_ADDRESS) == raw
    assert addrcodec.is_valid_classic_address(GENESIS_ADDRESS)


def test_account_public_key_vector():
    raw = bytes.fromhex(MASTER_PUBLIC_KEY_HEX)
    assert addrcodec.encode_account_public_key(raw) == MASTER_PUBLIC_KEY
    assert addrcodec.decode_account_public_key(MASTER_PUBLIC_KEY) == raw
    assert addrcodec.is_valid_account_public_key(MASTER_PUBLIC_KEY)


def test_node_public_key_vector():
    raw = bytes.fromhex(NODE_PUBLIC_KEY_HEX)
    assert addrcodec.encode_node_public_key(raw) == NODE_PUBLIC_KEY
    assert addrcodec.decode_node_public_key(NODE_PUBLIC_KEY) == raw
    assert addrcodec.is_valid_node_public_key(NODE_PUBLIC_KEY)
    assert not addrcodec.is_valid_account_public_key(NODE_PUBLIC_KEY)


def test_secp256k1_seed_vector():
    raw = bytes.fromhex(MASTER_SEED_HEX)
    assert addrcodec.encode_seed(raw, "secp256k1") == MASTER_SEED
    decoded = addrcodec.decode_seed(MASTER_SEED)
    assert decoded.algorithm == "secp256k1"
    assert decoded.payload == raw


def test_ed25519_seed_vector():
    raw = bytes.fromhex(ED25519_SEED_HEX)
    assert addrcodec.encode_seed(raw, "ed25519") == ED25519_SEED
    decoded = addrcodec.decode_seed(ED25519_SEED)
    assert decoded.algorithm == "ed25519"
    assert decoded.payload == raw


def test_seed_algorithm_defaults_to_secp256k1():
    raw = bytes.fromhex(MASTER_SEED_HEX)
    assert addrcodec.encode_seed(raw) == MASTER_SEED


@pytest.mark.parametrize("payload", [b"\x00" * 16, b"\xff" * 16, bytes(range(16))])
def test_seed_never_misreported_as_other_algorithm(payload):
    for algorithm, other in (("secp256k1", "ed25519"), ("ed25519", "secp256k1")):
        decoded = addrcodec.decode_seed(addrcodec.encode_seed(payload, algorithm))
        assert decoded.algorithm == algorithm
        assert decoded.algorithm != other
        assert decoded.payload == payload


def test_encode_seed_errors():
    with pytest.raises(UnknownAlgorithmError):
        addrcodec.encode_seed(b"\x00" * 16, "rsa")
    with pytest.raises(LengthError):
        addrcodec.encode_seed(b"\x00" * 15, "ed25519")


@pytest.mark.parametrize("size", [19, 21])
def test_classic_address_length_enforcement(size):
    with pytest.raises(LengthError):
        addrcodec.encode_classic_address(b"\x01" * size)


def test_decoding_the_wrong_kind_fails_with_typed_errors():
    with pytest.raises(PrefixMismatchError):
        addrcodec.decode_classic_address(MASTER_SEED)
    with pytest.raises(PrefixMismatchError):
        addrcodec.decode_account_public_key(NODE_PUBLIC_KEY)
    with pytest.raises(UnrecognizedFormatError):
        addrcodec.decode_seed(GENESIS_ADDRESS)


def test_corrupted_address_is_not_repaired():
    corrupted = GENESIS_ADDRESS[:-1] + "j"
    with pytest.raises(ChecksumError):
        addrcodec.decode_classic_address(corrupted)
    assert not addrcodec.is_valid_classic_address(corrupted)


@pytest.mark.parametrize(
    "value",
    ["", "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyT", "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh ", "0", None],
)
def test_is_valid_classic_address_rejects_without_raising(value):
    assert addrcodec.is_valid_classic_address(value) is False


def test_seed_is_not_a_classic_address():
    assert addrcodec.is_valid_seed(MASTER_SEED)
    assert addrcodec.is_valid_seed(ED25519_SEED)
    assert not addrcodec.is_valid_classic_address(MASTER_SEED)
    assert not addrcodec.is_valid_seed(GENESIS_ADDRESS)


def test_historical_aliases():
    assert addrcodec.encode_account_id is addrcodec.encode_classic_address
    assert addrcodec.decode_account_id is addrcodec.decode_classic_address
    assert addrcodec.encode_public_key is addrcodec.encode_account_public_key
    assert addrcodec.decode_public_key is addrcodec.decode_account_public_key
