"""File descriptor schema."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import LICENSES, FileTag, LicenseOption, combine_tags

# Characters that delimit the wire format and can never appear inside a value.
FIELD_SEPARATOR = ","
FOLDER_SEPARATOR = "|"
INDEX_SEPARATOR = "."


def normalize_folder(v: str) -> str:
    """Strip surrounding slashes and collapse repeated ones. Root is ``""``."""
    if not v:
        return ""
    v = v.strip().strip('/')
    while '//' in v:
        v = v.replace('//', '/')
    return v


class FileDescriptor(BaseModel):
    """Metadata for one file of a batch.

    ``content_id`` is only used to order files; it is not written to the wire.
    """
    model_config = ConfigDict(frozen=True)

    content_id: str = ""
    name: str = ""
    ext: str = ""
    folder: str = ""  # "Documents", "Images/2023", "" for root
    thumb: str = ""
    tags: int = Field(default=0, ge=0)
    license: str = ""
    labels: str = ""  # ordered label digits, e.g. "25"

    @field_validator('content_id', 'name', 'thumb')
    @classmethod
    def validate_no_comma(cls, v: str) -> str:
        if FIELD_SEPARATOR in v:
            raise ValueError("Value cannot contain ','")
        return v

    @field_validator('ext')
    @classmethod
    def validate_ext(cls, v: str) -> str:
        if FIELD_SEPARATOR in v or INDEX_SEPARATOR in v:
            raise ValueError("Extension cannot contain ',' or '.'")
        return v

    @field_validator('folder')
    @classmethod
    def normalize_path(cls, v: str) -> str:
        v = normalize_folder(v)
        if FIELD_SEPARATOR in v or FOLDER_SEPARATOR in v:
            raise ValueError("Folder cannot contain ',' or '|'")
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def combine_tag_list(cls, v):
        if isinstance(v, (list, tuple)):
            return combine_tags(list(v))
        return v

    @field_validator('license')
    @classmethod
    def validate_license(cls, v: str) -> str:
        if v and v not in LICENSES:
            raise ValueError(f"Unknown license {v!r}. Must be one of: {sorted(LICENSES)}")
        return v

    @field_validator('labels')
    @classmethod
    def validate_labels(cls, v: str) -> str:
        if not all(ch in "0123456789" for ch in v):
            raise ValueError("Labels must be decimal digits")
        return v

    def replace(self, **changes) -> "FileDescriptor":
        """Copy with ``changes`` applied. Runs the field validators again."""
        return self.model_validate({**self.model_dump(), **changes})

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def has_tag(self, tag: int) -> bool:
        return (self.tags & int(tag)) == int(tag)

    def with_tag(self, tag: int) -> "FileDescriptor":
        return self.replace(tags=self.tags | int(tag))

    def without_tag(self, tag: int) -> "FileDescriptor":
        return self.replace(tags=self.tags & ~int(tag))

    def active_tags(self) -> List[FileTag]:
        return [tag for tag in FileTag if self.has_tag(tag)]

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    def has_label(self, label: str) -> bool:
        return label in self.labels

    def with_label(self, label: str) -> "FileDescriptor":
        """Append a label digit unless it is already set."""
        if len(label) != 1 or label not in "0123456789":
            raise ValueError(f"Invalid label {label!r}")
        if label in self.labels:
            return self
        return self.replace(labels=self.labels + label)

    def without_label(self, label: str) -> "FileDescriptor":
        return self.replace(labels=self.labels.replace(label, ""))

    def active_labels(self) -> List[str]:
        return list(self.labels)

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    def license_details(self) -> Optional[LicenseOption]:
        return LICENSES.get(self.license)

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.ext}" if self.ext else self.name

    @property
    def full_path(self) -> str:
        return f"{self.folder}/{self.filename}" if self.folder else self.filename

    @property
    def is_auxiliary(self) -> bool:
        """True for supporting files (thumbnails, video segments) hidden from explorers."""
        return (
            self.has_tag(FileTag.THUMBNAIL)
            or self.name == ""
            or self.name.startswith("_")
            or self.filename.endswith(".ts")
            or self.filename.endswith("_thumb.m3u8")
        )
