"""
Content identifiers (CIDs) for peer ids.

A peer id is rendered as a version 1 CID tagged ``libp2p-key``:
``<version varint><multicodec varint><multihash>`` in base32. Older peer ids
show up as version 0 CIDs (a bare base58 sha2-256 multihash, implicitly
``dag-pb``) or as version 1 CIDs tagged ``dag-pb``.
"""

import logging
from typing import (
    Any,
)

import multicodec
import multihash
import varint

from peerid.exceptions import (
    InvalidCIDError,
)
from peerid.utils.encoding import (
    base58_to_bytes,
    bytes_to_base58,
    bytes_to_multibase,
    multibase_to_bytes,
)

logger = logging.getLogger("peerid.cid")

CID_V0 = 0
CID_V1 = 1

CODEC_LIBP2P_KEY = "libp2p-key"
CODEC_DAG_PB = "dag-pb"

DEFAULT_CID_ENCODING = "base32"

# sha2-256, 32 byte digest
V0_MULTIHASH_PREFIX = bytes([0x12, 0x20])
V0_MULTIHASH_LENGTH = 34


def _is_v0_multihash(data: bytes) -> bool:
    return len(data) == V0_MULTIHASH_LENGTH and data.startswith(V0_MULTIHASH_PREFIX)


def _check_multihash(data: bytes) -> None:
    try:
        multihash.decode(data)
    except (ValueError, KeyError, TypeError) as e:
        raise InvalidCIDError("CID does not wrap a valid multihash") from e


class CID:
    """An immutable (version, codec, multihash) triple."""

    __slots__ = ("_version", "_codec", "_multihash")

    _version: int
    _codec: str
    _multihash: bytes

    def __init__(self, version: int, codec: str, multihash_bytes: bytes) -> None:
        if version == CID_V0:
            if codec != CODEC_DAG_PB:
                raise InvalidCIDError(
                    f"CIDv0 codec must be {CODEC_DAG_PB}, not {codec}"
                )
            if not _is_v0_multihash(multihash_bytes):
                raise InvalidCIDError("CIDv0 requires a sha2-256 multihash")
        elif version != CID_V1:
            raise InvalidCIDError(f"unsupported CID version {version}")
        _check_multihash(multihash_bytes)
        self._version = version
        self._codec = codec
        self._multihash = bytes(multihash_bytes)

    @property
    def version(self) -> int:
        return self._version

    @property
    def codec(self) -> str:
        return self._codec

    @property
    def multihash(self) -> bytes:
        return self._multihash

    @property
    def buffer(self) -> bytes:
        """The binary form of this CID."""
        if self._version == CID_V0:
            return self._multihash
        return varint.encode(self._version) + multicodec.add_prefix(
            self._codec, self._multihash
        )

    def encode(self, encoding: str | None = None) -> str:
        """
        Render as text: bare base58 for version 0, multibase for version 1
        (``encoding`` defaults to base32).
        """
        if self._version == CID_V0:
            if encoding not in (None, "base58btc"):
                raise InvalidCIDError("CIDv0 can only be rendered in base58btc")
            return bytes_to_base58(self._multihash)
        return bytes_to_multibase(self.buffer, encoding or DEFAULT_CID_ENCODING)

    def to_v1(self) -> "CID":
        if self._version == CID_V1:
            return self
        return CID(CID_V1, self._codec, self._multihash)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"CID(version={self._version}, codec={self._codec!r}, {self.encode()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CID):
            return NotImplemented
        return (self._version, self._codec, self._multihash) == (
            other._version,
            other._codec,
            other._multihash,
        )

    def __hash__(self) -> int:
        return hash((self._version, self._codec, self._multihash))


def create_v1(codec: str, multihash_bytes: bytes) -> CID:
    return CID(CID_V1, codec, multihash_bytes)


def from_bytes(data: bytes) -> CID:
    if _is_v0_multihash(data):
        return CID(CID_V0, CODEC_DAG_PB, data)
    try:
        version = varint.decode_bytes(data)
    except (EOFError, TypeError, IndexError) as e:
        raise InvalidCIDError("truncated CID") from e
    if version != CID_V1:
        raise InvalidCIDError(f"unsupported CID version {version}")
    rest = data[len(varint.encode(version)) :]
    try:
        codec = multicodec.get_codec(rest)
        multihash_bytes = multicodec.remove_prefix(rest)
    except (EOFError, ValueError, KeyError, TypeError, IndexError) as e:
        raise InvalidCIDError("CID carries an unknown multicodec") from e
    return CID(version, codec, multihash_bytes)


def from_string(text: str) -> CID:
    """
    Parse CID text: a bare base58 ``Qm...`` multihash is version 0, anything
    else must be multibase.
    """
    if not text:
        raise InvalidCIDError("empty CID text")
    try:
        if text.startswith("Qm") and len(text) == 46:
            data = base58_to_bytes(text)
        else:
            data = multibase_to_bytes(text)
    except ValueError as e:
        logger.debug("failed to decode CID text %r: %s", text, e)
        raise InvalidCIDError(f"cannot decode CID text {text!r}") from e
    return from_bytes(data)


def parse(value: Any) -> CID:
    """Coerce a ``CID``, CID bytes or CID text to a ``CID``."""
    if isinstance(value, CID):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(bytes(value))
    if isinstance(value, str):
        return from_string(value)
    raise InvalidCIDError(f"cannot build a CID from {type(value).__name__}")
