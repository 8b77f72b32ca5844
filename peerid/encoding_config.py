"""
Process-wide default multibase encoding used by ``PeerId.to_multibase()``.

CID text is not affected: ``PeerId.to_string()`` always renders base32.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging
import threading

import multibase

logger = logging.getLogger("peerid.encoding_config")

DEFAULT_ENCODING = "base58btc"

_lock = threading.Lock()
_default_encoding: str = DEFAULT_ENCODING


def get_default_encoding() -> str:
    return _default_encoding


def set_default_encoding(encoding: str) -> None:
    """
    Set the default multibase encoding for ``PeerId.to_multibase()``.

    Writes are serialized by a lock; reads are not, so a concurrent reader
    may briefly see the previous value.

    :param encoding: a multibase encoding name known to *py-multibase*
        (``'base58btc'``, ``'base32'``, ``'base16'``, ``'base64'``, ...).
    :raises ValueError: if ``encoding`` is not supported.
    """
    global _default_encoding

    if not multibase.is_encoding_supported(encoding):
        supported = ", ".join(list_supported_encodings())
        raise ValueError(
            f"Unsupported encoding {encoding!r}. Supported encodings: {supported}"
        )

    with _lock:
        _default_encoding = encoding
    logger.debug("default multibase encoding set to %s", encoding)


@contextmanager
def encoding_override(encoding: str) -> Iterator[None]:
    """
    Use ``encoding`` as the default inside a ``with`` block.

    The previous default is restored on exit, exceptions included. The lock
    only covers the two writes, not the block: concurrent overrides from
    several threads can observe each other. Pass ``encoding`` explicitly to
    ``to_multibase()`` when that matters.
    """
    global _default_encoding

    previous = get_default_encoding()
    set_default_encoding(encoding)
    try:
        yield
    finally:
        with _lock:
            _default_encoding = previous


def list_supported_encodings() -> list[str]:
    return sorted(multibase.list_encodings())
