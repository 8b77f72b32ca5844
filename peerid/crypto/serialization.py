"""
Turn serialized key envelopes back into key objects.

Every failure surfaces as a ``CryptographyError``: ``MissingDeserializerError``
for key types without a deserializer, ``KeyDeserializationError`` for
anything else, whatever the backing library raised.
"""

from collections.abc import (
    Callable,
)
import logging
from typing import (
    Any,
    TypeVar,
)

from google.protobuf.message import (
    DecodeError,
)
import trio

from peerid.crypto.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from peerid.crypto.exceptions import (
    CryptographyError,
    KeyDeserializationError,
    MissingDeserializerError,
)
from peerid.crypto.keys import (
    KeyType,
    PrivateKey,
    PublicKey,
)
from peerid.crypto.pb import (
    crypto_pb2,
)
from peerid.crypto.rsa import (
    RSAPrivateKey,
    RSAPublicKey,
)
from peerid.crypto.secp256k1 import (
    Secp256k1PrivateKey,
    Secp256k1PublicKey,
)

logger = logging.getLogger("peerid.crypto.serialization")

_K = TypeVar("_K", PublicKey, PrivateKey)

key_type_to_public_key_deserializer: dict[int, Callable[[bytes], PublicKey]] = {
    KeyType.Secp256k1.value: Secp256k1PublicKey.from_bytes,
    KeyType.RSA.value: RSAPublicKey.from_bytes,
    KeyType.Ed25519.value: Ed25519PublicKey.from_bytes,
}

key_type_to_private_key_deserializer: dict[int, Callable[[bytes], PrivateKey]] = {
    KeyType.Secp256k1.value: Secp256k1PrivateKey.from_bytes,
    KeyType.RSA.value: RSAPrivateKey.from_bytes,
    KeyType.Ed25519.value: Ed25519PrivateKey.from_bytes,
}


def _deserialize(
    data: bytes,
    envelope: Any,
    deserializers: dict[int, Callable[[bytes], _K]],
    kind: str,
) -> _K:
    try:
        message = envelope.FromString(data)
    except (DecodeError, TypeError) as e:
        raise KeyDeserializationError(f"not a serialized {kind} key") from e
    try:
        deserializer = deserializers[message.key_type]
    except KeyError as e:
        raise MissingDeserializerError(
            {"key_type": message.key_type, "key": f"{kind}_key"}
        ) from e
    try:
        return deserializer(message.data)
    except (CryptographyError, ValueError, TypeError, IndexError) as e:
        logger.debug(
            "rejected %s key data of length %d: %s", kind, len(message.data), e
        )
        raise KeyDeserializationError(f"invalid {kind} key data: {e}") from e


def deserialize_public_key(data: bytes) -> PublicKey:
    """
    Turn the canonical protobuf serialization of a public key back into a key.

    :raises MissingDeserializerError: if the key type is not supported.
    :raises KeyDeserializationError: if ``data`` is not a valid serialization.
    """
    return _deserialize(
        data, crypto_pb2.PublicKey, key_type_to_public_key_deserializer, "public"
    )


def deserialize_private_key(data: bytes) -> PrivateKey:
    """
    Turn the canonical protobuf serialization of a private key back into a key.

    :raises MissingDeserializerError: if the key type is not supported.
    :raises KeyDeserializationError: if ``data`` is not a valid serialization.
    """
    return _deserialize(
        data, crypto_pb2.PrivateKey, key_type_to_private_key_deserializer, "private"
    )


async def unmarshal_public_key(data: bytes) -> PublicKey:
    await trio.lowlevel.checkpoint()
    return deserialize_public_key(data)


async def unmarshal_private_key(data: bytes) -> PrivateKey:
    await trio.lowlevel.checkpoint()
    return deserialize_private_key(data)
