"""Custom exception hierarchy for the SPK batch metadata codec."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes for codec failures."""

    # Alphabet errors
    INVALID_SYMBOL = "INVALID_SYMBOL"
    INVALID_INPUT = "INVALID_INPUT"

    # Folder errors
    UNKNOWN_FOLDER_INDEX = "UNKNOWN_FOLDER_INDEX"
    FOLDER_CAPACITY_EXCEEDED = "FOLDER_CAPACITY_EXCEEDED"

    # Field errors
    MALFORMED_FLAG = "MALFORMED_FLAG"
    MALFORMED_FIELD = "MALFORMED_FIELD"

    # Batch errors
    TRUNCATED_BATCH = "TRUNCATED_BATCH"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
    EMPTY_BATCH = "EMPTY_BATCH"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    CID_COUNT_MISMATCH = "CID_COUNT_MISMATCH"


class SpkMetaException(Exception):
    """
    Base exception for all spkmeta errors.

    Provides structured errors with:
    - Human-readable message
    - Machine-readable error code
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Optional additional context/details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for callers that surface errors.

        Returns:
            Dictionary with error, message, and details fields
        """
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class CodecError(SpkMetaException):
    """Encoding or decoding a batch failed. Nothing was produced."""

    @property
    def file_index(self) -> Optional[int]:
        return self.details.get("file_index")

    def attach_file_index(self, file_index: int) -> "CodecError":
        """Tag the error with the position of the failing file group.

        Returns self so decoders can write ``raise exc.attach_file_index(i)``.
        """
        if "file_index" not in self.details:
            self.details["file_index"] = file_index
            self.message = f"File {file_index}: {self.message}"
            self.args = (self.message,)
        return self


class InvalidSymbolError(CodecError):
    """A string contained a character outside the 64-symbol alphabet."""

    def __init__(self, value: str, symbol: str = "", position: int = -1):
        super().__init__(
            f"Invalid alphabet symbol {symbol!r} in {value!r}",
            ErrorCode.INVALID_SYMBOL,
            details={"value": value, "symbol": symbol, "position": position}
        )


class InvalidInputError(CodecError):
    """A value cannot be expressed in the alphabet (negative or not an int)."""

    def __init__(self, value: Any):
        super().__init__(
            f"Cannot encode {value!r}: expected a non-negative integer",
            ErrorCode.INVALID_INPUT,
            details={"value": repr(value)}
        )


class UnknownFolderIndexError(CodecError):
    """A file references a folder index the batch never declared."""

    def __init__(self, token: str):
        super().__init__(
            f"Unknown folder index: {token!r}",
            ErrorCode.UNKNOWN_FOLDER_INDEX,
            details={"token": token}
        )


class FolderCapacityError(CodecError):
    """The batch references more custom folders than there are index symbols."""

    def __init__(self, limit: int):
        super().__init__(
            f"Too many custom folders (limit {limit})",
            ErrorCode.FOLDER_CAPACITY_EXCEEDED,
            details={"limit": limit}
        )


class MalformedFlagError(CodecError):
    """The flag sub-field is not a valid alphabet number."""

    def __init__(self, flag: str):
        super().__init__(
            f"Malformed flag: {flag!r}",
            ErrorCode.MALFORMED_FLAG,
            details={"flag": flag}
        )


class MalformedFieldError(CodecError):
    """A header segment or file field does not follow the wire grammar."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message,
            ErrorCode.MALFORMED_FIELD,
            details=details
        )


class TruncatedBatchError(CodecError):
    """The file section does not split into whole 4-field groups."""

    def __init__(self, field_count: int, reason: str = ""):
        super().__init__(
            reason or f"Truncated batch: {field_count} file field(s) is not a multiple of 4",
            ErrorCode.TRUNCATED_BATCH,
            details={"field_count": field_count}
        )


class UnsupportedVersionError(CodecError):
    """The batch declares a format version this codec does not implement."""

    def __init__(self, version: Any):
        super().__init__(
            f"Unsupported batch version: {version!r}",
            ErrorCode.UNSUPPORTED_VERSION,
            details={"version": str(version)}
        )


class EmptyBatchError(CodecError):
    """A batch must carry at least one file."""

    def __init__(self):
        super().__init__(
            "Cannot encode an empty batch",
            ErrorCode.EMPTY_BATCH,
        )


class PayloadTooLargeError(CodecError):
    """The encoded batch exceeds the configured payload limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Encoded batch is {size} bytes, limit is {limit}",
            ErrorCode.PAYLOAD_TOO_LARGE,
            details={"size": size, "limit": limit}
        )


class CidCountMismatchError(CodecError):
    """The supplied content ids do not line up with the decoded files."""

    def __init__(self, cid_count: int, file_count: int):
        super().__init__(
            f"Got {cid_count} content id(s) for {file_count} file(s)",
            ErrorCode.CID_COUNT_MISMATCH,
            details={"cid_count": cid_count, "file_count": file_count}
        )
