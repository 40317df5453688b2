"""
Crypter errors
==============
Typed failures raised by the facade itself.

Anything raised by the underlying cipher propagates unchanged. Tag
verification failures surface as ``cryptography.exceptions.InvalidTag``,
re-exported here as ``AuthenticationFailure`` so callers can catch it
without importing from ``cryptography`` directly.
"""

from cryptography.exceptions import InvalidTag

AuthenticationFailure = InvalidTag


class CrypterError(Exception):
    """Base class for errors raised by aesgcm_crypter."""


class MissingArgument(CrypterError, ValueError):
    def __init__(self, param: str):
        super().__init__(f"expected {param} to be defined")
        self.param = param


class InvalidKey(CrypterError, ValueError):
    def __init__(self, message: str = "invalid CryptoKey given"):
        super().__init__(message)


class InvalidIVLength(CrypterError, ValueError):
    def __init__(self, length: int = None):
        super().__init__("iv was invalid length")
        self.length = length


class KeyNotExportable(CrypterError):
    """Raised when export is requested for a key created non-extractable."""

    def __init__(self):
        super().__init__("key is not extractable")
