"""Pack and unpack the ``flag-license-labels`` field of a file group."""

from typing import Tuple

from ..exceptions import MalformedFieldError, MalformedFlagError
from .alphabet import from_alphabet, is_alphabet, to_alphabet
from .field_utils import join_segments, split_segments

BODY_SEPARATOR = "-"


def pack(tags: int, license: str = "", labels: str = "") -> str:
    """
    Render the 4th field of a file group.

    Absent values leave no trace at the end of the field but keep their
    hyphen in the middle: ``pack(0, "7", "1") == "-7-1"``,
    ``pack(12, "1", "25") == "C-1-25"``, ``pack(0) == ""``.
    """
    flag = to_alphabet(tags) if tags else ""
    return join_segments([flag, license or "", labels or ""], BODY_SEPARATOR)


def unpack(body: str) -> Tuple[int, str, str]:
    """
    Parse a packed body back into ``(tags, license, labels)``.

    Raises:
        MalformedFieldError: more than three hyphen-separated parts
        MalformedFlagError: flag is not an alphabet number
    """
    try:
        flag, license, labels = split_segments(body, BODY_SEPARATOR, 3)
    except ValueError as e:
        raise MalformedFieldError(f"Malformed metadata body {body!r}: {e}", field="body") from e

    if not flag:
        return 0, license, labels
    if not is_alphabet(flag):
        raise MalformedFlagError(flag)
    return from_alphabet(flag), license, labels
