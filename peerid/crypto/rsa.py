"""
RSA keys backed by pycryptodome.

Public keys are DER ``SubjectPublicKeyInfo`` and private keys DER PKCS#1
``RSAPrivateKey``, the encodings the Go and JS implementations put in the key
envelope. Signatures are PKCS#1 v1.5 over SHA-256.
"""

from Crypto.Hash import (
    SHA256,
)
from Crypto.PublicKey import (
    RSA,
)
from Crypto.Signature import (
    pkcs1_15,
)

from peerid.crypto.exceptions import (
    CryptographyError,
    InvalidKeySizeError,
)
from peerid.crypto.keys import (
    KeyPair,
    KeyType,
    PrivateKey,
    PublicKey,
)

# pycryptodome refuses to generate anything smaller; existing smaller keys
# still import
MIN_RSA_KEY_SIZE = 1024
MAX_RSA_KEY_SIZE = 4096
PUBLIC_EXPONENT = 65537


def check_rsa_key_size(bits: int) -> None:
    """
    Check the size of an RSA key, generated or imported.

    :raises InvalidKeySizeError: if ``bits`` is not positive or exceeds
        ``MAX_RSA_KEY_SIZE``.
    """
    if bits <= 0:
        raise InvalidKeySizeError(f"RSA key size must be positive, got {bits}")
    if bits > MAX_RSA_KEY_SIZE:
        raise InvalidKeySizeError(
            f"RSA key size must be at most {MAX_RSA_KEY_SIZE} bits, got {bits}"
        )


def check_rsa_generation_size(bits: int) -> None:
    """
    :raises InvalidKeySizeError: unless ``bits`` lies within
        ``MIN_RSA_KEY_SIZE`` and ``MAX_RSA_KEY_SIZE``.
    """
    if not MIN_RSA_KEY_SIZE <= bits <= MAX_RSA_KEY_SIZE:
        raise InvalidKeySizeError(
            f"RSA key size must be between {MIN_RSA_KEY_SIZE} and "
            f"{MAX_RSA_KEY_SIZE} bits, got {bits}"
        )


def _import_der(data: bytes, private: bool) -> RSA.RsaKey:
    impl = RSA.import_key(data)
    if impl.has_private() != private:
        wanted, found = ("private", "public") if private else ("public", "private")
        raise CryptographyError(f"expected an RSA {wanted} key, got a {found} key")
    return impl


class _RSAKey:
    key_type = KeyType.RSA

    def __init__(self, impl: RSA.RsaKey) -> None:
        check_rsa_key_size(impl.size_in_bits())
        self.impl = impl

    @property
    def bits(self) -> int:
        return self.impl.size_in_bits()


class RSAPublicKey(_RSAKey, PublicKey):
    def to_bytes(self) -> bytes:
        return self.impl.export_key("DER")

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "RSAPublicKey":
        return cls(_import_der(key_bytes, private=False))

    def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            pkcs1_15.new(self.impl).verify(SHA256.new(data), signature)
        except (ValueError, TypeError):
            return False
        return True


class RSAPrivateKey(_RSAKey, PrivateKey):
    @classmethod
    def generate(cls, bits: int = 2048) -> "RSAPrivateKey":
        check_rsa_generation_size(bits)
        return cls(RSA.generate(bits, e=PUBLIC_EXPONENT))

    def to_bytes(self) -> bytes:
        return self.impl.export_key("DER", pkcs=1)

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "RSAPrivateKey":
        return cls(_import_der(key_bytes, private=True))

    def sign(self, data: bytes) -> bytes:
        return pkcs1_15.new(self.impl).sign(SHA256.new(data))

    def get_public_key(self) -> RSAPublicKey:
        return RSAPublicKey(self.impl.publickey())


def create_new_key_pair(bits: int = 2048) -> KeyPair:
    private_key = RSAPrivateKey.generate(bits)
    return KeyPair(private_key, private_key.get_public_key())
