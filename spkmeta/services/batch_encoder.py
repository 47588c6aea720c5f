"""Encode a batch of file descriptors into the compact metadata string.

Wire layout (one flat comma list):

    header,name,ext.index,thumb,flag-license-labels,name,ext.index,...

    header := version [ "#" recipient (":" recipient)* ] ( "|" folder )*

Files are written in ascending ``content_id`` order so the same batch always
produces the same string regardless of the order the caller collected it in.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..core.config import settings
from ..exceptions import (
    EmptyBatchError,
    MalformedFieldError,
    PayloadTooLargeError,
    UnsupportedVersionError,
)
from ..schemas.batch import CURRENT_VERSION, SUPPORTED_VERSIONS, BatchHeader
from ..schemas.file import FIELD_SEPARATOR, FOLDER_SEPARATOR, INDEX_SEPARATOR, FileDescriptor
from .field_packer import pack
from .field_utils import join_segments
from .folder_index import FolderIndexTable, allocate_folders

RECIPIENT_MARKER = "#"
RECIPIENT_SEPARATOR = ":"

logger = logging.getLogger(__name__)

FileInput = Union[FileDescriptor, Mapping[str, Any]]


class BatchEncoder:
    """Stateless batch encoder.

    Holds configuration only. Every ``encode`` call builds its own folder
    table, so one encoder can serve concurrent callers.
    """

    def __init__(self, max_payload_bytes: Optional[int] = None):
        self.max_payload_bytes = (
            settings.max_payload_bytes if max_payload_bytes is None else max_payload_bytes
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def encode(
        self,
        files: Sequence[FileInput],
        encryption_recipients: Sequence[str] = (),
        version: int = CURRENT_VERSION,
    ) -> str:
        """Encode ``files`` into one batch string.

        Args:
            files: File descriptors (or dicts of their fields), any order
            encryption_recipients: Accounts the batch is encrypted for, kept in order
            version: Format version; only 1 exists

        Raises:
            EmptyBatchError: no files
            UnsupportedVersionError: unknown version
            MalformedFieldError: a descriptor or recipient is not encodable
            FolderCapacityError: too many distinct custom folders
            PayloadTooLargeError: result exceeds ``max_payload_bytes``
        """
        if version not in SUPPORTED_VERSIONS:
            logger.warning("Refusing to encode unsupported version", extra={"version": version})
            raise UnsupportedVersionError(version)
        if not files:
            raise EmptyBatchError()

        descriptors = sorted(
            (self._coerce(f) for f in files), key=lambda f: f.content_id
        )
        table = allocate_folders(f.folder for f in descriptors)
        header = self._build_header(version, encryption_recipients, table)

        fields: List[str] = [self.render_header(header)]
        for descriptor in descriptors:
            fields.extend(self.render_file(descriptor, table))
        encoded = FIELD_SEPARATOR.join(fields)

        size = len(encoded.encode("utf-8"))
        if self.max_payload_bytes and size > self.max_payload_bytes:
            logger.warning(
                "Encoded batch exceeds payload limit",
                extra={"size": size, "limit": self.max_payload_bytes},
            )
            raise PayloadTooLargeError(size, self.max_payload_bytes)

        logger.debug(
            "Encoded batch",
            extra={
                "file_count": len(descriptors),
                "custom_folder_count": len(table.custom_folders),
                "encrypted": bool(header.encryption_recipients),
                "size": size,
            },
        )
        return encoded

    @staticmethod
    def render_header(header: BatchHeader) -> str:
        rendered = str(header.version)
        if header.encryption_recipients:
            rendered += RECIPIENT_MARKER + RECIPIENT_SEPARATOR.join(header.encryption_recipients)
        for folder in header.custom_folders:
            rendered += FOLDER_SEPARATOR + folder
        return rendered

    @staticmethod
    def render_file(descriptor: FileDescriptor, table: FolderIndexTable) -> List[str]:
        """The four wire fields of one file."""
        return [
            descriptor.name,
            join_segments([descriptor.ext, table.token_for(descriptor.folder)], INDEX_SEPARATOR),
            descriptor.thumb,
            pack(descriptor.tags, descriptor.license, descriptor.labels),
        ]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce(file: FileInput) -> FileDescriptor:
        if isinstance(file, FileDescriptor):
            file = file.model_dump()
        try:
            return FileDescriptor.model_validate(file)
        except ValidationError as e:
            raise MalformedFieldError(f"Invalid file descriptor: {e}") from e

    @staticmethod
    def _build_header(
        version: int, encryption_recipients: Sequence[str], table: FolderIndexTable
    ) -> BatchHeader:
        try:
            return BatchHeader(
                version=version,
                encryption_recipients=list(encryption_recipients),
                custom_folders=list(table.custom_folders),
            )
        except ValidationError as e:
            raise MalformedFieldError(
                f"Invalid batch header: {e}", field="encryption_recipients"
            ) from e


def encode_batch(
    files: Sequence[FileInput],
    encryption_recipients: Sequence[str] = (),
    version: int = CURRENT_VERSION,
) -> str:
    """Encode with a default-configured ``BatchEncoder``."""
    return BatchEncoder().encode(files, encryption_recipients, version)
