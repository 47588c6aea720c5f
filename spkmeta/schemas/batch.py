"""Batch header and decode result schemas."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .file import FileDescriptor, normalize_folder

CURRENT_VERSION = 1
SUPPORTED_VERSIONS = frozenset({CURRENT_VERSION})

# A recipient sits between '#' and the first '|' and is split on ':'.
_RECIPIENT_FORBIDDEN = set(",|:#")


class BatchHeader(BaseModel):
    """Everything before the first comma of an encoded batch."""
    model_config = ConfigDict(frozen=True)

    version: int = CURRENT_VERSION
    encryption_recipients: List[str] = []
    custom_folders: List[str] = []  # first-use order, never presets

    @field_validator('encryption_recipients')
    @classmethod
    def validate_recipients(cls, v: List[str]) -> List[str]:
        for recipient in v:
            if not recipient:
                raise ValueError("Recipient cannot be empty")
            if _RECIPIENT_FORBIDDEN & set(recipient):
                raise ValueError(f"Recipient {recipient!r} contains a reserved character")
        return v

    @field_validator('custom_folders')
    @classmethod
    def normalize_custom_folders(cls, v: List[str]) -> List[str]:
        return [normalize_folder(folder) for folder in v]


class DecodedBatch(BaseModel):
    """Result of decoding a batch string."""
    header: BatchHeader = Field(default_factory=BatchHeader)
    files: List[FileDescriptor] = []

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def encryption_recipients(self) -> List[str]:
        return self.header.encryption_recipients
