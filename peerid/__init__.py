"""Peer identities for libp2p: keys, multihash ids, CIDs and their encodings."""

from importlib.metadata import version as __version

from peerid.cid import (
    CID,
)
from peerid.crypto.key_generation import (
    generate_key_pair,
)
from peerid.crypto.keys import (
    KeyPair,
    KeyType,
    PrivateKey,
    PublicKey,
)
from peerid.encoding_config import (
    get_default_encoding,
    set_default_encoding,
)
from peerid.id import (
    PEER_ID_TAG,
    PeerId,
    compute_digest,
    is_peer_id,
)
from peerid.utils.logging import (
    setup_logging,
)

# Configure logging from PEERID_DEBUG when the package is imported
setup_logging()

__all__ = [
    "CID",
    "KeyPair",
    "KeyType",
    "PEER_ID_TAG",
    "PeerId",
    "PrivateKey",
    "PublicKey",
    "compute_digest",
    "generate_key_pair",
    "get_default_encoding",
    "is_peer_id",
    "set_default_encoding",
    "setup_logging",
]

__version__ = __version("peerid")
