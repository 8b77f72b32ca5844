"""
Key types and the protobuf envelope keys travel in.

A serialized key is a ``PublicKey`` or ``PrivateKey`` message holding the key
type and the algorithm specific bytes returned by ``to_bytes``. Peer ids are
digests of the serialized public key, so ``serialize`` has to be byte stable
across implementations.
"""

from abc import (
    ABC,
    abstractmethod,
)
from dataclasses import (
    dataclass,
)
from enum import (
    Enum,
    unique,
)
from typing import (
    Any,
    ClassVar,
)

import multihash

from peerid.crypto.exceptions import (
    UnsupportedKeyTypeError,
)
from peerid.crypto.pb import (
    crypto_pb2,
)


@unique
class KeyType(Enum):
    RSA = crypto_pb2.KeyType.RSA
    Ed25519 = crypto_pb2.KeyType.Ed25519
    Secp256k1 = crypto_pb2.KeyType.Secp256k1
    ECDSA = crypto_pb2.KeyType.ECDSA

    @classmethod
    def from_name(cls, name: str) -> "KeyType":
        """Look up a ``KeyType`` by name, ignoring case (``"rsa"``, ``"ED25519"``)."""
        by_name = {key_type.name.lower(): key_type for key_type in cls}
        try:
            return by_name[name.lower()]
        except KeyError:
            raise UnsupportedKeyTypeError(f"unknown key type {name!r}") from None


class Key(ABC):
    """Algorithm specific key material tagged with its ``KeyType``."""

    key_type: ClassVar[KeyType]
    envelope: ClassVar[Any]

    @abstractmethod
    def to_bytes(self) -> bytes:
        """The algorithm specific encoding, without the envelope."""

    def get_type(self) -> KeyType:
        return self.key_type

    def serialize(self) -> bytes:
        """The envelope ``{key_type, data}`` as protobuf bytes."""
        message = self.envelope(key_type=self.key_type.value, data=self.to_bytes())
        return message.SerializeToString()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(self.serialize())


class PublicKey(Key):
    envelope = crypto_pb2.PublicKey

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        """Check ``signature`` over ``data``. Malformed signatures are ``False``."""

    def hash(self) -> bytes:
        """The sha2-256 multihash of ``serialize()``, whatever the key size."""
        return multihash.digest(self.serialize(), multihash.Func.sha2_256).encode()


class PrivateKey(Key):
    envelope = crypto_pb2.PrivateKey

    @abstractmethod
    def sign(self, data: bytes) -> bytes: ...

    @abstractmethod
    def get_public_key(self) -> PublicKey: ...


@dataclass(frozen=True)
class KeyPair:
    private_key: PrivateKey
    public_key: PublicKey

    @property
    def key_type(self) -> KeyType:
        return self.private_key.key_type
