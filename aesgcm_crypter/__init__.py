"""
aesgcm_crypter
==============
A small authenticated-encryption facade over AES-GCM.

    key     = Crypter.generate_key()          # 128-bit by default
    crypter = Crypter.create(key)
    ct, iv  = crypter.encrypt(b"secret")
    pt      = crypter.decrypt(ct, iv)

The cipher itself is cryptography's AESGCM. This package only checks
keys and IVs and shapes inputs and outputs. Storing keys and shipping
the IV next to the ciphertext are left to the caller.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .crypter import Crypter, CipherBundle, IV_SIZE, TAG_SIZE
from .keys    import (CryptoKey, KeyAlgorithm, is_valid_key,
                      generate_key, import_key, export_key)
from .errors  import (CrypterError, MissingArgument, InvalidKey,
                      InvalidIVLength, KeyNotExportable, AuthenticationFailure)

__all__ = [
    "Crypter",
    "CipherBundle",
    "CryptoKey",
    "KeyAlgorithm",
    "is_valid_key",
    "generate_key",
    "import_key",
    "export_key",
    "CrypterError",
    "MissingArgument",
    "InvalidKey",
    "InvalidIVLength",
    "KeyNotExportable",
    "AuthenticationFailure",
    "IV_SIZE",
    "TAG_SIZE",
]
