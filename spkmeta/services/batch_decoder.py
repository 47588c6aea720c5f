"""Decode a batch metadata string back into file descriptors."""

import logging
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..exceptions import (
    CidCountMismatchError,
    CodecError,
    MalformedFieldError,
    TruncatedBatchError,
    UnsupportedVersionError,
)
from ..schemas.batch import SUPPORTED_VERSIONS, BatchHeader, DecodedBatch
from ..schemas.file import FIELD_SEPARATOR, FOLDER_SEPARATOR, INDEX_SEPARATOR, FileDescriptor
from .batch_encoder import RECIPIENT_MARKER, RECIPIENT_SEPARATOR
from .field_packer import unpack
from .folder_index import FolderIndexTable

FIELDS_PER_FILE = 4

logger = logging.getLogger(__name__)


class BatchDecoder:
    """Stateless batch decoder.

    ``decode`` either returns every file of the batch or raises; there is no
    partial result.
    """

    def decode(self, encoded: str, cids: Optional[Sequence[str]] = None) -> DecodedBatch:
        """Decode a batch string.

        Args:
            encoded: The wire string
            cids: Content ids of the batch's files in any order. They are
                sorted and attached to the files, which the wire stores in
                content id order. Without them ``content_id`` is left empty.

        Raises:
            TruncatedBatchError: no file section or a partial file group
            UnsupportedVersionError: version other than 1
            UnknownFolderIndexError: file references an undeclared folder
            MalformedFlagError / MalformedFieldError: field does not parse
            CidCountMismatchError: ``cids`` length differs from the file count
        """
        try:
            batch = self._decode(encoded, cids)
        except CodecError as e:
            logger.warning(
                "Rejected batch metadata",
                extra={"error_code": e.error_code.value, "details": e.details},
            )
            raise

        logger.debug(
            "Decoded batch",
            extra={
                "file_count": len(batch.files),
                "custom_folder_count": len(batch.header.custom_folders),
                "encrypted": bool(batch.header.encryption_recipients),
            },
        )
        return batch

    def parse_header(self, header_part: str) -> BatchHeader:
        """Parse ``version[#r1:r2...](|folder)*``."""
        head, *custom_folders = header_part.split(FOLDER_SEPARATOR)
        version_str, marker, recipients_str = head.partition(RECIPIENT_MARKER)

        if not version_str or any(ch not in "0123456789" for ch in version_str):
            raise UnsupportedVersionError(version_str)
        version = int(version_str)
        if version not in SUPPORTED_VERSIONS:
            raise UnsupportedVersionError(version_str)

        recipients: List[str] = recipients_str.split(RECIPIENT_SEPARATOR) if marker else []
        try:
            return BatchHeader(
                version=version,
                encryption_recipients=recipients,
                custom_folders=custom_folders,
            )
        except ValidationError as e:
            raise MalformedFieldError(f"Invalid batch header: {e}", field="header") from e

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _decode(self, encoded: str, cids: Optional[Sequence[str]]) -> DecodedBatch:
        header_part, separator, rest = encoded.partition(FIELD_SEPARATOR)
        if not separator:
            raise TruncatedBatchError(0, reason="Truncated batch: no file section")

        header = self.parse_header(header_part)
        table = FolderIndexTable.from_custom_folders(header.custom_folders)

        fields = rest.split(FIELD_SEPARATOR)
        if len(fields) % FIELDS_PER_FILE:
            raise TruncatedBatchError(len(fields))
        file_count = len(fields) // FIELDS_PER_FILE

        if cids is None:
            content_ids = [""] * file_count
        elif len(cids) != file_count:
            raise CidCountMismatchError(len(cids), file_count)
        else:
            content_ids = sorted(cids)

        files = []
        for file_index in range(file_count):
            start = file_index * FIELDS_PER_FILE
            group = fields[start:start + FIELDS_PER_FILE]
            try:
                files.append(self._decode_file(group, table, content_ids[file_index]))
            except CodecError as e:
                raise e.attach_file_index(file_index)

        return DecodedBatch(header=header, files=files)

    @staticmethod
    def _split_ext(ext_and_index: str) -> Tuple[str, str]:
        ext, dot, token = ext_and_index.rpartition(INDEX_SEPARATOR)
        if not dot:
            return ext_and_index, ""
        return ext, token

    def _decode_file(
        self, group: List[str], table: FolderIndexTable, content_id: str
    ) -> FileDescriptor:
        name, ext_and_index, thumb, body = group
        ext, token = self._split_ext(ext_and_index)
        folder = table.folder_for(token)
        tags, license, labels = unpack(body)
        try:
            return FileDescriptor(
                content_id=content_id,
                name=name,
                ext=ext,
                folder=folder,
                thumb=thumb,
                tags=tags,
                license=license,
                labels=labels,
            )
        except ValidationError as e:
            raise MalformedFieldError(f"Invalid file metadata: {e}") from e


def decode_batch(encoded: str, cids: Optional[Sequence[str]] = None) -> DecodedBatch:
    """Decode with a ``BatchDecoder``."""
    return BatchDecoder().decode(encoded, cids)
