"""Compact batch file metadata codec for SPK Network storage contracts."""

from .exceptions import CodecError, ErrorCode, SpkMetaException
from .schemas import BatchHeader, DecodedBatch, FileDescriptor, FileTag
from .services import BatchDecoder, BatchEncoder, decode_batch, encode_batch

__version__ = "0.1.0"

__all__ = [
    "BatchDecoder",
    "BatchEncoder",
    "BatchHeader",
    "CodecError",
    "DecodedBatch",
    "ErrorCode",
    "FileDescriptor",
    "FileTag",
    "SpkMetaException",
    "decode_batch",
    "encode_batch",
]
