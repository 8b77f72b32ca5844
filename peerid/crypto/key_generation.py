"""
Key pair generation for every supported ``KeyType``.

RSA generation is CPU bound and can take seconds at 2048 bits and above, so
the async entry point runs it in a trio worker thread. Cancelling the
awaiting task abandons the result; the thread itself runs to completion.
"""

import logging
import time

import trio

from peerid.crypto import (
    ed25519,
    rsa,
    secp256k1,
)
from peerid.crypto.exceptions import (
    UnsupportedKeyTypeError,
)
from peerid.crypto.keys import (
    KeyPair,
    KeyType,
)

logger = logging.getLogger("peerid.crypto.key_generation")

DEFAULT_KEY_TYPE = KeyType.RSA
DEFAULT_RSA_BITS = 2048


def generate_key_pair(
    key_type: KeyType = DEFAULT_KEY_TYPE, bits: int = DEFAULT_RSA_BITS
) -> KeyPair:
    """
    Generate a new key pair of ``key_type``.

    ``bits`` only applies to RSA; Ed25519 and Secp256k1 have a fixed size.
    """
    started = time.monotonic()
    if key_type is KeyType.RSA:
        key_pair = rsa.create_new_key_pair(bits)
    elif key_type is KeyType.Ed25519:
        key_pair = ed25519.create_new_key_pair()
    elif key_type is KeyType.Secp256k1:
        key_pair = secp256k1.create_new_key_pair()
    else:
        raise UnsupportedKeyTypeError(f"cannot generate keys of type {key_type.name}")
    logger.debug(
        "generated %s key pair in %.3fs", key_type.name, time.monotonic() - started
    )
    return key_pair


async def generate_key_pair_async(
    key_type: KeyType = DEFAULT_KEY_TYPE, bits: int = DEFAULT_RSA_BITS
) -> KeyPair:
    if key_type is KeyType.RSA:
        return await trio.to_thread.run_sync(
            generate_key_pair, key_type, bits, abandon_on_cancel=True
        )
    await trio.lowlevel.checkpoint()
    return generate_key_pair(key_type, bits)
