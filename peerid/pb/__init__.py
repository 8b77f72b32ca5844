"""
Protocol buffer package for the peer id wire format.

Contains generated protobuf code for the three-field peer id message.
"""

from .peer_id_pb2 import (
    PeerIdProto,
)

__all__ = ["PeerIdProto"]
