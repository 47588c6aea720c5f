"""Pydantic schemas for batch metadata."""

from .batch import BatchHeader, DecodedBatch, CURRENT_VERSION, SUPPORTED_VERSIONS
from .catalog import FileTag, LICENSES, LABELS, LicenseOption, LabelOption
from .file import FileDescriptor, normalize_folder

__all__ = [
    "BatchHeader",
    "DecodedBatch",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "FileTag",
    "LICENSES",
    "LABELS",
    "LicenseOption",
    "LabelOption",
    "FileDescriptor",
    "normalize_folder",
]
