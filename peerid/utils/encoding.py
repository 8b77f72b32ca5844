import base58
import multibase

from peerid.encoding_config import (
    get_default_encoding,
)

BASE58BTC = "base58btc"
BASE58BTC_PREFIX = "z"


def bytes_to_base58(data: bytes) -> str:
    return base58.b58encode(data).decode("utf-8")


def base58_to_bytes(text: str) -> bytes:
    return base58.b58decode(text)


def bytes_to_multibase(data: bytes, encoding: str | None = None) -> str:
    """
    Encode ``data`` as multibase text.

    ``encoding`` defaults to :func:`peerid.encoding_config.get_default_encoding`.
    base58btc goes through ``base58`` so that leading zero bytes (every
    identity multihash starts with one) are kept as ``1`` characters.
    """
    if encoding is None:
        encoding = get_default_encoding()
    if encoding == BASE58BTC:
        return BASE58BTC_PREFIX + bytes_to_base58(data)
    return multibase.encode(encoding, data).decode("utf-8")


def multibase_to_bytes(text: str) -> bytes:
    """
    Decode self-describing multibase text.

    :raises ValueError: if the prefix is unknown or the payload is malformed.
    """
    if text.startswith(BASE58BTC_PREFIX):
        return base58_to_bytes(text[len(BASE58BTC_PREFIX) :])
    return multibase.decode(text)
