from peerid.exceptions import (
    BasePeerIdError,
)


class CryptographyError(BasePeerIdError):
    pass


class InvalidKeySizeError(CryptographyError):
    """Raised for RSA key sizes outside the supported range."""


class MissingDeserializerError(CryptographyError):
    """
    Raised when a key envelope names a key type that has no deserializer,
    such as ECDSA.
    """


class KeyDeserializationError(CryptographyError):
    """Raised when serialized key material cannot be turned back into a key."""


class UnsupportedKeyTypeError(CryptographyError):
    """Raised when a key pair is requested for a key type we cannot generate."""
