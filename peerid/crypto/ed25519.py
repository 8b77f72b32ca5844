"""
Ed25519 keys backed by PyNaCl.

The private key travels as 64 bytes, ``seed || public key``, the way the Go
and JS implementations write it; a bare 32-byte seed is accepted on input.
A serialized Ed25519 public key is 36 bytes, so peer ids built from one
always carry the key inline.
"""

from nacl.exceptions import (
    BadSignatureError,
)
from nacl.signing import (
    SigningKey,
    VerifyKey,
)

from peerid.crypto.exceptions import (
    CryptographyError,
)
from peerid.crypto.keys import (
    KeyPair,
    KeyType,
    PrivateKey,
    PublicKey,
)

SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32


def _split_private_key(data: bytes) -> tuple[bytes, bytes | None]:
    """Split private key bytes into the seed and the embedded public key, if any."""
    if len(data) == SEED_LENGTH:
        return data, None
    if len(data) == SEED_LENGTH + PUBLIC_KEY_LENGTH:
        return data[:SEED_LENGTH], data[SEED_LENGTH:]
    raise CryptographyError(
        f"Ed25519 private key must be {SEED_LENGTH} or "
        f"{SEED_LENGTH + PUBLIC_KEY_LENGTH} bytes, got {len(data)}"
    )


class Ed25519PublicKey(PublicKey):
    key_type = KeyType.Ed25519

    def __init__(self, impl: VerifyKey) -> None:
        self.impl = impl

    def to_bytes(self) -> bytes:
        return self.impl.encode()

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "Ed25519PublicKey":
        if len(key_bytes) != PUBLIC_KEY_LENGTH:
            raise CryptographyError(
                f"Ed25519 public key must be {PUBLIC_KEY_LENGTH} bytes, "
                f"got {len(key_bytes)}"
            )
        return cls(VerifyKey(key_bytes))

    def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            self.impl.verify(data, signature)
        except (BadSignatureError, ValueError):
            return False
        return True


class Ed25519PrivateKey(PrivateKey):
    key_type = KeyType.Ed25519

    def __init__(self, impl: SigningKey) -> None:
        self.impl = impl

    @classmethod
    def generate(cls, seed: bytes | None = None) -> "Ed25519PrivateKey":
        return cls(SigningKey(seed) if seed else SigningKey.generate())

    def to_bytes(self) -> bytes:
        return self.impl.encode() + self.impl.verify_key.encode()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ed25519PrivateKey":
        seed, embedded_public_key = _split_private_key(data)
        impl = SigningKey(seed)
        if (
            embedded_public_key is not None
            and impl.verify_key.encode() != embedded_public_key
        ):
            raise CryptographyError(
                "Ed25519 private key does not match its embedded public key"
            )
        return cls(impl)

    def sign(self, data: bytes) -> bytes:
        return self.impl.sign(data).signature

    def get_public_key(self) -> Ed25519PublicKey:
        return Ed25519PublicKey(self.impl.verify_key)


def create_new_key_pair(seed: bytes | None = None) -> KeyPair:
    private_key = Ed25519PrivateKey.generate(seed)
    return KeyPair(private_key, private_key.get_public_key())
