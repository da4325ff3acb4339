from __future__ import annotations

import hashlib

CHECKSUM_LENGTH = 4


def compute(data: bytes) -> bytes:
    """Double SHA-256 over ``data``, truncated to the first 4 bytes."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:CHECKSUM_LENGTH]


def verify(data_with_checksum: bytes) -> bool:
    if len(data_with_checksum) < CHECKSUM_LENGTH:
        return False
    body = data_with_checksum[:-CHECKSUM_LENGTH]
    check = data_with_checksum[-CHECKSUM_LENGTH:]
    return compute(body) == bytes(check)
