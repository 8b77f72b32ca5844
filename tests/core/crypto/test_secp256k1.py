import coincurve
import pytest

from peerid.crypto.exceptions import (
    CryptographyError,
)
from peerid.crypto.secp256k1 import (
    Secp256k1PrivateKey,
    Secp256k1PublicKey,
    create_new_key_pair,
)
from tests.conftest import (
    SECP256K1_PUB_HEX,
    SECP256K1_SECRET_HEX,
)


def test_known_secret():
    key_pair = create_new_key_pair(bytes.fromhex(SECP256K1_SECRET_HEX))

    assert key_pair.private_key.to_bytes().hex() == SECP256K1_SECRET_HEX
    assert key_pair.public_key.to_bytes().hex() == SECP256K1_PUB_HEX


def test_uncompressed_public_key_is_compressed():
    private_key = coincurve.PrivateKey(bytes.fromhex(SECP256K1_SECRET_HEX))
    uncompressed = private_key.public_key.format(compressed=False)

    public_key = Secp256k1PublicKey.from_bytes(uncompressed)

    assert len(uncompressed) == 65
    assert public_key.to_bytes().hex() == SECP256K1_PUB_HEX


@pytest.mark.parametrize("length", [0, 32, 34, 64])
def test_public_key_length_checked(length):
    with pytest.raises(CryptographyError):
        Secp256k1PublicKey.from_bytes(b"\x02" * length)


@pytest.mark.parametrize("length", [0, 31, 33])
def test_private_key_length_checked(length):
    with pytest.raises(CryptographyError):
        Secp256k1PrivateKey.from_bytes(b"\x01" * length)


def test_sign_and_verify():
    key_pair = create_new_key_pair()
    data = b"peer id"

    signature = key_pair.private_key.sign(data)

    assert key_pair.public_key.verify(data, signature)
    assert not key_pair.public_key.verify(b"other data", signature)
    assert not key_pair.public_key.verify(data, b"not a der signature")
