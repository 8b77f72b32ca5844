# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# NO CHECKED-IN PROTOBUF GENCODE
# source: peerid/crypto/pb/crypto.proto
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
    'peerid/crypto/pb/crypto.proto'
)
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\x0a\x1dpeerid/crypto/pb/crypto.proto\x12\x10peerid.crypto.pb"U\x0a\x09PublicKey\x124\x0a\x08key_type\x18\x01 \x02(\x0e2\x19.peerid.crypto.pb.KeyTypeR\x07keyType\x12\x12\x0a\x04data\x18\x02 \x02(\x0cR\x04data"V\x0a\x0aPrivateKey\x124\x0a\x08key_type\x18\x01 \x02(\x0e2\x19.peerid.crypto.pb.KeyTypeR\x07keyType\x12\x12\x0a\x04data\x18\x02 \x02(\x0cR\x04data*9\x0a\x07KeyType\x12\x07\x0a\x03RSA\x10\x00\x12\x0b\x0a\x07Ed25519\x10\x01\x12\x0d\x0a\x09Secp256k1\x10\x02\x12\x09\x0a\x05ECDSA\x10\x03')

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'peerid.crypto.pb.crypto_pb2', _globals)
if not _descriptor._USE_C_DESCRIPTORS:
  DESCRIPTOR._loaded_options = None
  _globals['_KEYTYPE']._serialized_start=226
  _globals['_KEYTYPE']._serialized_end=283
  _globals['_PUBLICKEY']._serialized_start=51
  _globals['_PUBLICKEY']._serialized_end=136
  _globals['_PRIVATEKEY']._serialized_start=138
  _globals['_PRIVATEKEY']._serialized_end=224
# @@protoc_insertion_point(module_scope)
