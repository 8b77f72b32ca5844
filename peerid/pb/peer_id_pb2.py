# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# NO CHECKED-IN PROTOBUF GENCODE
# source: peerid/pb/peer_id.proto
# Protobuf Python Version: 6.30.1
"""Generated protocol buffer code."""
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import runtime_version as _runtime_version
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder
_runtime_version.ValidateProtobufRuntimeVersion(
    _runtime_version.Domain.PUBLIC,
    6,
    30,
    1,
    '',
    'peerid/pb/peer_id.proto'
)
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\x0a\x17peerid/pb/peer_id.proto\x12\x09peerid.pb"O\x0a\x0bPeerIdProto\x12\x0e\x0a\x02id\x18\x01 \x01(\x0cR\x02id\x12\x16\x0a\x06pubKey\x18\x02 \x01(\x0cR\x06pubKey\x12\x18\x0a\x07privKey\x18\x03 \x01(\x0cR\x07privKey')

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'peerid.pb.peer_id_pb2', _globals)
if not _descriptor._USE_C_DESCRIPTORS:
  DESCRIPTOR._loaded_options = None
  _globals['_PEERIDPROTO']._serialized_start=38
  _globals['_PEERIDPROTO']._serialized_end=117
# @@protoc_insertion_point(module_scope)
