from __future__ import annotations


class AddressCodecError(ValueError):
    """Base class for every encode/decode failure raised by this package."""


class FormatError(AddressCodecError):
    """Raised when text is empty, uses characters outside the alphabet, or is too short."""


class ChecksumError(AddressCodecError):
    """Raised when the trailing 4-byte checksum does not match the body."""


class PrefixMismatchError(AddressCodecError):
    """Raised when the decoded prefix bytes belong to a different identifier kind."""


class LengthError(AddressCodecError):
    """Raised when a payload is not the length its profile expects."""


class UnknownAlgorithmError(AddressCodecError):
    """Raised when an algorithm tag is not part of a version set."""


class UnrecognizedFormatError(AddressCodecError):
    """Raised when no profile of a version set accepts the decoded bytes."""
