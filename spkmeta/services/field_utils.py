"""Segment and filename utilities - deep helper module."""

from typing import List, Sequence

FILENAME_MAX_LENGTH = 32
"""
Maximum length of a file name stored in batch metadata.

Every character is paid for on chain; names longer than this are cut
before encoding by callers that want bounded payloads.
"""


def join_segments(segments: Sequence[str], separator: str) -> str:
    """
    Join positional segments, dropping trailing empty ones.

    DEEP MODULE: the only place that decides where separators go. Both the
    ``ext.index`` field and the ``flag-license-labels`` body use it.
    Internal empty segments keep their separator so positions survive:

        ["", "7", "1"], "-"  -> "-7-1"
        ["C", "", "1"], "-"  -> "C--1"
        ["8", "", ""], "-"   -> "8"
        ["pdf", "2"], "."    -> "pdf.2"
        ["txt", ""], "."     -> "txt"

    Args:
        segments: Rendered segments, empty string for absent values
        separator: Single separator character

    Returns:
        Joined string with no trailing separators
    """
    end = len(segments)
    while end and not segments[end - 1]:
        end -= 1
    return separator.join(segments[:end])


def split_segments(value: str, separator: str, width: int) -> List[str]:
    """
    Inverse of ``join_segments`` for a fixed number of positions.

    Pads missing trailing positions with empty strings. Raises ValueError
    when ``value`` has more than ``width`` segments.
    """
    if not value:
        return [""] * width
    parts = value.split(separator)
    if len(parts) > width:
        raise ValueError(f"Expected at most {width} segments, got {len(parts)}")
    return parts + [""] * (width - len(parts))


def truncate_filename(filename: str, limit: int = FILENAME_MAX_LENGTH) -> str:
    """Shorten a file name to ``limit`` characters, keeping its extension."""
    if len(filename) <= limit:
        return filename
    stem, dot, ext = filename.rpartition('.')
    if dot and len(ext) + 1 < limit:
        suffix = dot + ext
        return stem[:limit - len(suffix)] + suffix
    return filename[:limit]
