"""
Secp256k1 keys backed by coincurve.

Public keys always serialize as the 33-byte compressed point, so a peer id
built from one carries the key inline. Uncompressed (65-byte) points are
accepted on input and compressed on output. Signatures are DER encoded ECDSA
over SHA-256.
"""

import coincurve

from peerid.crypto.exceptions import (
    CryptographyError,
)
from peerid.crypto.keys import (
    KeyPair,
    KeyType,
    PrivateKey,
    PublicKey,
)

SECRET_LENGTH = 32
COMPRESSED_POINT_LENGTH = 33
UNCOMPRESSED_POINT_LENGTH = 65


class Secp256k1PublicKey(PublicKey):
    key_type = KeyType.Secp256k1

    def __init__(self, impl: coincurve.PublicKey) -> None:
        self.impl = impl

    def to_bytes(self) -> bytes:
        return self.impl.format(compressed=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Secp256k1PublicKey":
        if len(data) not in (COMPRESSED_POINT_LENGTH, UNCOMPRESSED_POINT_LENGTH):
            raise CryptographyError(
                f"secp256k1 public key must be {COMPRESSED_POINT_LENGTH} or "
                f"{UNCOMPRESSED_POINT_LENGTH} bytes, got {len(data)}"
            )
        return cls(coincurve.PublicKey(data))

    def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            return self.impl.verify(signature, data)
        except ValueError:
            # malformed DER
            return False


class Secp256k1PrivateKey(PrivateKey):
    key_type = KeyType.Secp256k1

    def __init__(self, impl: coincurve.PrivateKey) -> None:
        self.impl = impl

    @classmethod
    def generate(cls, secret: bytes | None = None) -> "Secp256k1PrivateKey":
        return cls(coincurve.PrivateKey(secret))

    def to_bytes(self) -> bytes:
        return self.impl.secret

    @classmethod
    def from_bytes(cls, data: bytes) -> "Secp256k1PrivateKey":
        if len(data) != SECRET_LENGTH:
            raise CryptographyError(
                f"secp256k1 private key must be {SECRET_LENGTH} bytes, got {len(data)}"
            )
        return cls(coincurve.PrivateKey(data))

    def sign(self, data: bytes) -> bytes:
        return self.impl.sign(data)

    def get_public_key(self) -> Secp256k1PublicKey:
        return Secp256k1PublicKey(self.impl.public_key)


def create_new_key_pair(secret: bytes | None = None) -> KeyPair:
    """
    Create a key pair from ``secret``, 32 big-endian bytes below the curve
    order, or from a fresh random secret when ``secret`` is ``None``.
    """
    private_key = Secp256k1PrivateKey.generate(secret)
    return KeyPair(private_key, private_key.get_public_key())
