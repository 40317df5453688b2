"""
Crypter — AES-GCM facade
========================
Binds one AES-GCM key and enforces the contract around the cipher:
the key must be a secret AES-GCM key allowed to encrypt and decrypt,
and every IV must be exactly 96 bits.

Nonce:  96 bits (12 bytes), random per message unless supplied.
Tag:    128 bits (16 bytes), appended to the ciphertext by AESGCM.

The IV is not embedded in the ciphertext. encrypt() hands it back in a
CipherBundle and the caller keeps it next to the ciphertext.

Dependencies: cryptography >= 41.0
"""

import logging
import os
from typing import NamedTuple, Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from . import keys
from .errors import InvalidIVLength, InvalidKey, MissingArgument
from .keys import BytesLike, CryptoKey, as_bytes

logger = logging.getLogger(__name__)

IV_SIZE  = 12   # 96-bit nonce (GCM standard)
TAG_SIZE = 16   # 128-bit authentication tag


class CipherBundle(NamedTuple):
    """Ciphertext (with tag) and the IV it was produced under."""
    ciphertext: bytes
    iv:         bytes


class Crypter:
    """AES-GCM encrypt/decrypt bound to a single CryptoKey."""

    def __init__(self, key: CryptoKey):
        if key is None:
            raise MissingArgument("key")
        if not keys.is_valid_key(key):
            raise InvalidKey()
        self._key    = key
        self._aesgcm = AESGCM(key.material)

    @classmethod
    def create(cls, key: CryptoKey) -> "Crypter":
        return cls(key)

    @property
    def key(self) -> CryptoKey:
        return self._key

    # ── key / IV lifecycle ────────────────────────────────────────────────────
    is_valid_key = staticmethod(keys.is_valid_key)
    generate_key = staticmethod(keys.generate_key)
    import_key   = staticmethod(keys.import_key)
    export_key   = staticmethod(keys.export_key)

    @staticmethod
    def generate_iv() -> bytes:
        return os.urandom(IV_SIZE)

    # ── cipher operations ─────────────────────────────────────────────────────
    def encrypt(self, plaintext: BytesLike, iv: Optional[BytesLike] = None,
                aad: Optional[BytesLike] = None) -> CipherBundle:
        """
        Encrypt and authenticate plaintext.
        A fresh IV is generated when none is given; either way it is
        returned in the bundle and must be kept for decrypt().
        """
        if plaintext is None:
            raise MissingArgument("plaintext")
        if iv is None:
            iv = self.generate_iv()
        iv = _checked_iv(iv)
        ct = self._aesgcm.encrypt(iv, as_bytes(plaintext), _checked_aad(aad))
        logger.debug(f"Encrypt: ct={len(ct)}B")
        return CipherBundle(ct, iv)

    def decrypt(self, ciphertext: BytesLike, iv: BytesLike,
                aad: Optional[BytesLike] = None) -> bytes:
        """
        Decrypt and verify the authentication tag.
        Raises AuthenticationFailure (InvalidTag) on a wrong key, IV or AAD,
        or if the ciphertext was tampered with.
        """
        if ciphertext is None:
            raise MissingArgument("ciphertext")
        if iv is None:
            raise MissingArgument("iv")
        iv = _checked_iv(iv)
        pt = self._aesgcm.decrypt(iv, as_bytes(ciphertext), _checked_aad(aad))
        logger.debug(f"Decrypt: pt={len(pt)}B")
        return pt

    def __repr__(self):
        return f"Crypter({keys.ALGORITHM_NAME}-{self._key.algorithm.length})"


def _checked_iv(iv: BytesLike) -> bytes:
    iv = as_bytes(iv)
    if len(iv) != IV_SIZE:
        raise InvalidIVLength(len(iv))
    return iv


def _checked_aad(aad: Optional[BytesLike]) -> Optional[bytes]:
    return None if aad is None else as_bytes(aad)
