"""
AES-GCM keys
============
Typed key handles for the Crypter facade.

A CryptoKey carries its metadata (type, algorithm, extractable, usages)
next to the raw material, so validity is decided by looking at a frozen
value rather than probing arbitrary objects. The material itself is kept
out of repr() and equality.

Key sizes: 128, 192 or 256 bits (16, 24 or 32 bytes).
Randomness and size checks are delegated to cryptography's AESGCM.

Dependencies: cryptography >= 41.0
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import KeyNotExportable, MissingArgument

logger = logging.getLogger(__name__)

ALGORITHM_NAME     = "AES-GCM"
KEY_TYPE           = "secret"
KEY_USAGES         = frozenset({"encrypt", "decrypt"})
DEFAULT_KEY_LENGTH = 128

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def as_bytes(value: BytesLike) -> bytes:
    """
    Normalize a bytes-like object or an iterable of ints to bytes.
    ints and strs are refused: bytes(5) would give five zero bytes.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (int, str)):
        raise TypeError(f"expected bytes-like value, got {type(value).__name__}")
    return bytes(value)


@dataclass(frozen=True)
class KeyAlgorithm:
    name:   str
    length: int


@dataclass(frozen=True, eq=False)
class CryptoKey:
    """Immutable AES-GCM key handle."""

    material:    bytes = field(repr=False)
    algorithm:   KeyAlgorithm
    type:        str = KEY_TYPE
    extractable: bool = True
    usages:      FrozenSet[str] = KEY_USAGES

    def __post_init__(self):
        if not isinstance(self.algorithm, KeyAlgorithm):
            raise TypeError(
                f"algorithm must be a KeyAlgorithm, got {type(self.algorithm).__name__}")
        object.__setattr__(self, "material", as_bytes(self.material))
        object.__setattr__(self, "usages", frozenset(self.usages))
        if len(self.material) * 8 != self.algorithm.length:
            raise ValueError(
                f"{self.algorithm.length}-bit algorithm given "
                f"{len(self.material) * 8}-bit material")
        if self.algorithm.name == ALGORITHM_NAME:
            # AESGCM rejects anything but 16/24/32 byte keys
            AESGCM(self.material)

    @classmethod
    def from_material(cls, material: BytesLike, extractable: bool = True) -> "CryptoKey":
        """Wrap raw material as an encrypt+decrypt AES-GCM key."""
        material = as_bytes(material)
        return cls(
            material=material,
            algorithm=KeyAlgorithm(ALGORITHM_NAME, len(material) * 8),
            extractable=extractable,
        )


def is_valid_key(key) -> bool:
    """True when key is a secret AES-GCM key usable for encrypt and decrypt."""
    return (
        isinstance(key, CryptoKey)
        and key.type == KEY_TYPE
        and getattr(key.algorithm, "name", None) == ALGORITHM_NAME
        and KEY_USAGES <= key.usages
    )


def generate_key(length: int = DEFAULT_KEY_LENGTH) -> CryptoKey:
    """
    Generate a random AES-GCM key of 128, 192 or 256 bits.
    Other lengths are rejected by cryptography (ValueError / TypeError).
    """
    key = CryptoKey.from_material(AESGCM.generate_key(bit_length=length))
    logger.debug(f"Generated key: {key.algorithm.length}b")
    return key


def import_key(raw_key: BytesLike) -> CryptoKey:
    """Import raw key bytes, as returned by export_key()."""
    if raw_key is None:
        raise MissingArgument("raw_key")
    key = CryptoKey.from_material(raw_key)
    logger.debug(f"Imported key: {key.algorithm.length}b")
    return key


def export_key(key: CryptoKey) -> bytes:
    """Return the raw key material of an extractable key."""
    if key is None:
        raise MissingArgument("key")
    if not key.extractable:
        raise KeyNotExportable()
    return key.material
