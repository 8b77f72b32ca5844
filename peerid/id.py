"""
Peer identities.

A :class:`PeerId` names a peer by the multihash of its protobuf-serialized
public key. Small keys (Ed25519, Secp256k1) are inlined with the identity
hash function so the key can be recovered from the id alone; larger keys
(RSA) are hashed with sha2-256. The id is fixed at construction; the private
and public key slots can be filled in later.
"""

import base64
import binascii
from collections.abc import (
    Mapping,
)
import logging
from typing import (
    Any,
)

from google.protobuf.message import (
    DecodeError,
)
import multihash

from peerid.cid import (
    CID,
    CODEC_DAG_PB,
    CODEC_LIBP2P_KEY,
    create_v1,
    parse as parse_cid,
)
from peerid.crypto.exceptions import (
    CryptographyError,
)
from peerid.crypto.key_generation import (
    DEFAULT_KEY_TYPE,
    DEFAULT_RSA_BITS,
    generate_key_pair_async,
)
from peerid.crypto.keys import (
    KeyType,
    PrivateKey,
    PublicKey,
)
from peerid.crypto.serialization import (
    deserialize_public_key,
    unmarshal_private_key,
    unmarshal_public_key,
)
from peerid.exceptions import (
    ImmutableFieldError,
    InconsistentArgumentsError,
    InvalidCIDError,
    InvalidIdError,
    InvalidKeyInputError,
    KeyMismatchError,
    UnusableMaterialError,
)
from peerid.pb.peer_id_pb2 import (
    PeerIdProto,
)
from peerid.utils.encoding import (
    BASE58BTC_PREFIX,
    base58_to_bytes,
    bytes_to_base58,
    bytes_to_multibase,
    multibase_to_bytes,
)

logger = logging.getLogger("peerid.id")

# NOTE: On inlining...
# See: https://github.com/libp2p/specs/issues/138
# Keys whose serialization fits in 42 bytes are embedded verbatim, matching
# the Go and JS implementations.
MAX_INLINE_KEY_LENGTH = 42

IDENTITY_MULTIHASH_CODE = 0x00

# Shared by every copy of this module that may be loaded side by side.
PEER_ID_TAG = "peerid/peer-id/v1"

VALID_CID_CODECS = (CODEC_LIBP2P_KEY, CODEC_DAG_PB)

# Unprefixed base58btc: ``1...`` (identity multihash) and ``Qm...`` (sha2-256).
LEGACY_BASE58_PREFIXES = ("1", "Q")

PRINTABLE_SKIP_PREFIX = "Qm"
PRINTABLE_MAX_CHARS = 6

_MULTIHASH_ERRORS = (ValueError, KeyError, TypeError)


class IdentityHash:
    _digest: bytes

    def __init__(self) -> None:
        self._digest = b""

    def update(self, input: bytes) -> None:
        self._digest += input

    def digest(self) -> bytes:
        return self._digest


multihash.FuncReg.register(
    IDENTITY_MULTIHASH_CODE, "identity", hash_new=lambda: IdentityHash()
)


def compute_digest(serialized_key: bytes) -> bytes:
    """
    Return the peer id multihash for a serialized public key: the identity
    multihash when it fits in ``MAX_INLINE_KEY_LENGTH`` bytes, sha2-256
    otherwise.
    """
    algo = multihash.Func.sha2_256
    if len(serialized_key) <= MAX_INLINE_KEY_LENGTH:
        algo = IDENTITY_MULTIHASH_CODE
    return multihash.digest(serialized_key, algo).encode()


def compute_key_digest(public_key: PublicKey) -> bytes:
    return compute_digest(public_key.serialize())


def _decode_id(peer_id_bytes: bytes) -> multihash.Multihash:
    try:
        return multihash.decode(peer_id_bytes)
    except _MULTIHASH_ERRORS as e:
        raise InvalidIdError("invalid id provided: not a multihash") from e


def _id_matches_key(peer_id_bytes: bytes, public_key: PublicKey) -> bool:
    """
    Check ``peer_id_bytes`` against ``public_key`` using the id's own hash
    function, so sha2-256 ids of small keys (issued before inlining) pass.
    """
    decoded = _decode_id(peer_id_bytes)
    serialized_key = public_key.serialize()
    if decoded.func == IDENTITY_MULTIHASH_CODE:
        return decoded.digest == serialized_key
    try:
        return multihash.digest(serialized_key, decoded.func).digest == decoded.digest
    except ValueError:
        # no local implementation of the id's hash function
        return False


def _decode_inline_pub_key(peer_id_bytes: bytes) -> PublicKey | None:
    try:
        decoded = multihash.decode(peer_id_bytes)
        if decoded.func != IDENTITY_MULTIHASH_CODE:
            return None
        return deserialize_public_key(decoded.digest)
    except (*_MULTIHASH_ERRORS, CryptographyError) as e:
        logger.debug("no inline public key in %s: %s", peer_id_bytes.hex(), e)
        return None


def _key_input_to_bytes(key: Any) -> bytes:
    if isinstance(key, str):
        try:
            return base64.b64decode(key, validate=True)
        except binascii.Error as e:
            raise InvalidKeyInputError("Supplied key text is not valid base64") from e
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise InvalidKeyInputError("Supplied key is neither a base64 string nor bytes")


def _to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def is_peer_id(value: Any) -> bool:
    """
    Recognize peer ids structurally: an instance of this ``PeerId`` or of any
    other loaded copy of it carrying the same ``PEER_ID_TAG``.
    """
    if isinstance(value, PeerId):
        return True
    return getattr(type(value), "__peer_id_tag__", None) == PEER_ID_TAG and callable(
        getattr(value, "to_bytes", None)
    )


class PeerId:
    __peer_id_tag__ = PEER_ID_TAG

    _id: bytes
    _priv_key: PrivateKey | None
    _pub_key: PublicKey | None
    _b58_str: str
    _cid_str: str | None = None
    _inline_pub_key: PublicKey | None = None
    _inline_pub_key_resolved: bool = False

    def __init__(
        self,
        peer_id_bytes: bytes,
        priv_key: PrivateKey | None = None,
        pub_key: PublicKey | None = None,
    ) -> None:
        if not isinstance(peer_id_bytes, (bytes, bytearray)):
            raise InvalidIdError("invalid id provided")
        peer_id_bytes = bytes(peer_id_bytes)
        _decode_id(peer_id_bytes)

        if (
            priv_key is not None
            and pub_key is not None
            and priv_key.get_public_key().serialize() != pub_key.serialize()
        ):
            raise InconsistentArgumentsError("inconsistent arguments")

        key = pub_key
        if key is None and priv_key is not None:
            key = priv_key.get_public_key()
        if key is not None and not _id_matches_key(peer_id_bytes, key):
            raise InconsistentArgumentsError(
                "inconsistent arguments: id was not derived from the key"
            )

        self._id = peer_id_bytes
        self._b58_str = bytes_to_base58(peer_id_bytes)
        self._priv_key = priv_key
        self._pub_key = pub_key

    @property
    def id(self) -> bytes:
        return self._id

    @id.setter
    def id(self, value: bytes) -> None:
        raise ImmutableFieldError("id is immutable")

    @property
    def priv_key(self) -> PrivateKey | None:
        return self._priv_key

    @priv_key.setter
    def priv_key(self, priv_key: PrivateKey | None) -> None:
        # unchecked; see is_valid()
        self._priv_key = priv_key

    @property
    def pub_key(self) -> PublicKey | None:
        """
        The public key, resolved in order from the key set on this peer id,
        the private key, and an inline id.
        """
        if self._pub_key is not None:
            return self._pub_key
        if isinstance(self._priv_key, PrivateKey):
            return self._priv_key.get_public_key()
        if not self._inline_pub_key_resolved:
            self._inline_pub_key = _decode_inline_pub_key(self._id)
            self._inline_pub_key_resolved = True
        return self._inline_pub_key

    @pub_key.setter
    def pub_key(self, pub_key: PublicKey | None) -> None:
        # unchecked; see is_valid()
        self._pub_key = pub_key

    # Construction

    @classmethod
    async def create(
        cls,
        key_type: KeyType | str = DEFAULT_KEY_TYPE,
        bits: int = DEFAULT_RSA_BITS,
    ) -> "PeerId":
        """Generate a fresh key pair and the peer id derived from it."""
        if isinstance(key_type, str):
            key_type = KeyType.from_name(key_type)
        key_pair = await generate_key_pair_async(key_type, bits)
        peer_id = cls(
            compute_key_digest(key_pair.public_key),
            key_pair.private_key,
            key_pair.public_key,
        )
        logger.debug("created %s peer id %s", key_type.name, peer_id.to_base58())
        return peer_id

    @classmethod
    def from_bytes(cls, peer_id_bytes: bytes) -> "PeerId":
        return cls(peer_id_bytes)

    @classmethod
    def from_hex(cls, hex_str: str) -> "PeerId":
        try:
            peer_id_bytes = bytes.fromhex(hex_str)
        except (ValueError, TypeError) as e:
            raise InvalidIdError(f"invalid hex peer id {hex_str!r}") from e
        return cls(peer_id_bytes)

    @classmethod
    def from_base58(cls, b58_encoded_peer_id_str: str) -> "PeerId":
        try:
            peer_id_bytes = base58_to_bytes(b58_encoded_peer_id_str)
        except (ValueError, TypeError) as e:
            raise InvalidIdError(
                f"invalid base58 peer id {b58_encoded_peer_id_str!r}"
            ) from e
        return cls(peer_id_bytes)

    @classmethod
    def from_multibase(cls, text: str) -> "PeerId":
        """
        Decode multibase text. Text starting with ``1`` or ``Q`` is taken to
        be unprefixed base58btc.
        """
        if not isinstance(text, str) or not text:
            raise InvalidIdError("multibase peer id must be a non-empty string")
        if text.startswith(LEGACY_BASE58_PREFIXES):
            text = BASE58BTC_PREFIX + text
        try:
            peer_id_bytes = multibase_to_bytes(text)
        except ValueError as e:
            raise InvalidIdError(f"invalid multibase peer id {text!r}") from e
        return cls(peer_id_bytes)

    @classmethod
    def from_string(cls, text: str) -> "PeerId":
        """Parse a peer id printed either as legacy base58 or as a CID."""
        if isinstance(text, str) and text.startswith(LEGACY_BASE58_PREFIXES):
            return cls.from_base58(text)
        return cls.from_cid(text)

    @classmethod
    def from_cid(cls, cid: CID | bytes | str) -> "PeerId":
        parsed = parse_cid(cid)
        if parsed.codec not in VALID_CID_CODECS:
            raise InvalidCIDError(
                f"Supplied PeerID CID has invalid multicodec: {parsed.codec}"
            )
        return cls(parsed.multihash)

    @classmethod
    async def from_pubkey(cls, key: bytes | str) -> "PeerId":
        """Build from a serialized public key, as bytes or base64 text."""
        pub_key = await unmarshal_public_key(_key_input_to_bytes(key))
        return cls(compute_key_digest(pub_key), None, pub_key)

    @classmethod
    async def from_privkey(cls, key: bytes | str) -> "PeerId":
        """Build from a serialized private key, as bytes or base64 text."""
        priv_key = await unmarshal_private_key(_key_input_to_bytes(key))
        pub_key = priv_key.get_public_key()
        return cls(compute_key_digest(pub_key), priv_key, pub_key)

    @classmethod
    async def from_json(cls, obj: Mapping[str, Any]) -> "PeerId":
        """
        Build from ``{"id": base58, "privKey": base64, "pubKey": base64}``
        (the key fields are optional). Supplied keys are checked against the
        id and against each other.
        """
        if not isinstance(obj, Mapping) or not isinstance(obj.get("id"), str):
            raise InvalidIdError("JSON peer id must contain a base58 'id' string")
        try:
            peer_id_bytes = base58_to_bytes(obj["id"])
        except ValueError as e:
            raise InvalidIdError(f"invalid base58 peer id {obj['id']!r}") from e

        raw_priv_key = obj.get("privKey")
        raw_pub_key = obj.get("pubKey")
        pub_key = None
        if raw_pub_key:
            pub_key = await unmarshal_public_key(_key_input_to_bytes(raw_pub_key))

        if not raw_priv_key:
            if pub_key is not None and compute_key_digest(pub_key) != peer_id_bytes:
                raise KeyMismatchError("id/public key mismatch")
            return cls(peer_id_bytes, None, pub_key)

        priv_key = await unmarshal_private_key(_key_input_to_bytes(raw_priv_key))
        priv_digest = compute_key_digest(priv_key.get_public_key())
        if pub_key is not None and compute_key_digest(pub_key) != priv_digest:
            raise KeyMismatchError("public/private key mismatch")
        if priv_digest != peer_id_bytes:
            raise KeyMismatchError("id/private key mismatch")
        return cls(peer_id_bytes, priv_key, pub_key)

    @classmethod
    async def from_protobuf(cls, data: bytes | str) -> "PeerId":
        """
        Build from a serialized ``PeerIdProto``, as bytes or hex text. The id
        is derived from the private key if present, else from the public key,
        else taken from the ``id`` field.
        """
        if isinstance(data, str):
            try:
                data = bytes.fromhex(data)
            except ValueError as e:
                raise UnusableMaterialError("peer id protobuf is not valid hex") from e
        if not isinstance(data, (bytes, bytearray)):
            raise UnusableMaterialError("peer id protobuf must be bytes or hex text")
        try:
            proto = PeerIdProto.FromString(bytes(data))
        except DecodeError as e:
            raise UnusableMaterialError("cannot decode peer id protobuf") from e

        priv_key = None
        pub_key = None
        if proto.privKey:
            priv_key = await unmarshal_private_key(proto.privKey)
        if proto.pubKey:
            pub_key = await unmarshal_public_key(proto.pubKey)

        if priv_key is not None:
            derived_pub_key = priv_key.get_public_key()
            digest = compute_key_digest(derived_pub_key)
            if pub_key is not None and compute_key_digest(pub_key) != digest:
                raise KeyMismatchError("public/private key mismatch")
            peer_id = cls(digest, priv_key, derived_pub_key)
        elif pub_key is not None:
            peer_id = cls(compute_key_digest(pub_key), None, pub_key)
        elif proto.id:
            return cls(proto.id)
        else:
            raise UnusableMaterialError(
                "protobuf did not contain any usable key material"
            )

        if proto.id and proto.id != peer_id.to_bytes():
            logger.warning(
                "protobuf id %s does not match its key material, using %s",
                bytes_to_base58(proto.id),
                peer_id.to_base58(),
            )
        return peer_id

    @staticmethod
    def is_peer_id(value: Any) -> bool:
        return is_peer_id(value)

    # Serialization

    def to_bytes(self) -> bytes:
        return self._id

    def to_hex(self) -> str:
        return self._id.hex()

    def to_base58(self) -> str:
        return self._b58_str

    def to_multibase(self, encoding: str | None = None) -> str:
        """Encode the id as multibase text, by default in the configured encoding."""
        return bytes_to_multibase(self._id, encoding)

    def to_cid(self) -> CID:
        return create_v1(CODEC_LIBP2P_KEY, self._id)

    def to_string(self) -> str:
        """The id as a base32 CIDv1 tagged ``libp2p-key``."""
        if self._cid_str is None:
            self._cid_str = self.to_cid().encode("base32")
        return self._cid_str

    __str__ = to_string

    def to_printable(self) -> str:
        pid = self._b58_str
        # every sha2-256 id starts with Qm
        if pid.startswith(PRINTABLE_SKIP_PREFIX):
            pid = pid[len(PRINTABLE_SKIP_PREFIX) :]
        return f"<peer.ID {pid[:PRINTABLE_MAX_CHARS]}>"

    pretty = to_printable

    def marshal_pubkey(self) -> bytes | None:
        pub_key = self.pub_key
        if pub_key is None:
            return None
        return pub_key.serialize()

    def marshal_privkey(self) -> bytes | None:
        if self._priv_key is None:
            return None
        return self._priv_key.serialize()

    def marshal(self, exclude_private: bool = False) -> bytes:
        proto = PeerIdProto(id=self._id)
        pub_key_bytes = self.marshal_pubkey()
        if pub_key_bytes is not None:
            proto.pubKey = pub_key_bytes
        if not exclude_private:
            priv_key_bytes = self.marshal_privkey()
            if priv_key_bytes is not None:
                proto.privKey = priv_key_bytes
        return proto.SerializeToString()

    def to_json(self) -> dict[str, str]:
        result = {"id": self._b58_str}
        priv_key_bytes = self.marshal_privkey()
        if priv_key_bytes is not None:
            result["privKey"] = _to_base64(priv_key_bytes)
        pub_key_bytes = self.marshal_pubkey()
        if pub_key_bytes is not None:
            result["pubKey"] = _to_base64(pub_key_bytes)
        return result

    # Equality & validation

    def equals(self, other: "PeerId | bytes") -> bool:
        if isinstance(other, (bytes, bytearray)):
            return self._id == bytes(other)
        if is_peer_id(other):
            return self._id == other.to_bytes()
        raise TypeError(f"not a valid peer id: {type(other).__name__}")

    def is_valid(self) -> bool:
        """
        Check the private key -> public key chain. Needed after the key slots
        have been reassigned, since the setters do not check anything.
        """
        if not isinstance(self._priv_key, PrivateKey):
            return False
        pub_key = self.pub_key
        if not isinstance(pub_key, PublicKey):
            return False
        try:
            derived = self._priv_key.get_public_key().serialize()
            current = pub_key.serialize()
        except (CryptographyError, ValueError) as e:
            logger.debug("key serialization failed during validation: %s", e)
            return False
        return bool(derived) and derived == current

    def has_inline_public_key(self) -> bool:
        try:
            return multihash.decode(self._id).func == IDENTITY_MULTIHASH_CODE
        except _MULTIHASH_ERRORS:
            return False

    def __repr__(self) -> str:
        return f"<peerid.id.PeerId ({self._b58_str})>"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self._b58_str == other
        elif isinstance(other, (bytes, bytearray)):
            return self._id == bytes(other)
        elif is_peer_id(other):
            return self._id == other.to_bytes()  # type: ignore[attr-defined]
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)
