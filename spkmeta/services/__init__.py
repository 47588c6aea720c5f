"""Codec services."""

from .batch_decoder import BatchDecoder, decode_batch
from .batch_encoder import BatchEncoder, encode_batch
from .folder_index import FolderIndexTable, allocate_folders

__all__ = [
    "BatchDecoder",
    "BatchEncoder",
    "FolderIndexTable",
    "allocate_folders",
    "decode_batch",
    "encode_batch",
]
