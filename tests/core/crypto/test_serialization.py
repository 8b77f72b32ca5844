import base64

import pytest

from peerid.crypto.ed25519 import (
    Ed25519PublicKey,
)
from peerid.crypto.exceptions import (
    KeyDeserializationError,
    MissingDeserializerError,
)
from peerid.crypto.keys import (
    KeyType,
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
)
from peerid.crypto.serialization import (
    deserialize_private_key,
    deserialize_public_key,
    unmarshal_private_key,
    unmarshal_public_key,
)
from tests.conftest import (
    ED25519_PUB_KEY,
    RSA_PRIV_KEY,
    RSA_PUB_KEY,
    SECP256K1_PRIV_KEY,
)


def test_public_key_canonical_bytes_preserved():
    for encoded in (RSA_PUB_KEY, ED25519_PUB_KEY):
        data = base64.b64decode(encoded)
        assert deserialize_public_key(data).serialize() == data


def test_deserialize_public_key_types():
    assert isinstance(
        deserialize_public_key(base64.b64decode(RSA_PUB_KEY)), RSAPublicKey
    )
    assert isinstance(
        deserialize_public_key(base64.b64decode(ED25519_PUB_KEY)), Ed25519PublicKey
    )


def test_deserialize_private_key_types():
    rsa_key = deserialize_private_key(base64.b64decode(RSA_PRIV_KEY))
    secp_key = deserialize_private_key(base64.b64decode(SECP256K1_PRIV_KEY))

    assert isinstance(rsa_key, RSAPrivateKey)
    assert isinstance(secp_key, Secp256k1PrivateKey)
    assert secp_key.serialize() == base64.b64decode(SECP256K1_PRIV_KEY)


def test_missing_deserializer():
    data = crypto_pb2.PublicKey(
        key_type=KeyType.ECDSA.value, data=b"\x00" * 10
    ).SerializeToString()
    with pytest.raises(MissingDeserializerError):
        deserialize_public_key(data)


@pytest.mark.parametrize("data", [b"", b"\xff\xff\xff", b"\x08\x01"])
def test_undecodable_public_key(data):
    with pytest.raises(KeyDeserializationError):
        deserialize_public_key(data)


def test_bad_key_data():
    data = crypto_pb2.PublicKey(
        key_type=KeyType.RSA.value, data=b"definitely not DER"
    ).SerializeToString()
    with pytest.raises(KeyDeserializationError, match="invalid public key data"):
        deserialize_public_key(data)

    data = crypto_pb2.PrivateKey(
        key_type=KeyType.Ed25519.value, data=b"\x01" * 5
    ).SerializeToString()
    with pytest.raises(KeyDeserializationError, match="invalid private key data"):
        deserialize_private_key(data)


@pytest.mark.trio
async def test_unmarshal():
    public_key = await unmarshal_public_key(base64.b64decode(RSA_PUB_KEY))
    private_key = await unmarshal_private_key(base64.b64decode(RSA_PRIV_KEY))

    assert private_key.get_public_key() == public_key
