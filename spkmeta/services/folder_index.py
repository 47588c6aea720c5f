"""Folder path <-> index token allocation for one batch.

Files reference their folder with a single trailing character (or nothing)
after the extension. Eight well-known folders have fixed digits and are never
declared; every other folder is declared once in the batch header and gets a
token from its position there:

    position 0  -> ""   (no index character at all)
    position 1  -> "1"
    position 2+ -> "A", "B", ... (A-Z a-z without O, I, l)

Root files use the empty token while the batch has no custom folders. Once
the empty token belongs to the first custom folder, root files use "0".

A table is a value built for one encode or decode call and then dropped.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..exceptions import FolderCapacityError, MalformedFieldError, UnknownFolderIndexError

PRESET_FOLDERS: Dict[str, str] = {
    "Documents": "2",
    "Images": "3",
    "Videos": "4",
    "Music": "5",
    "Archives": "6",
    "Code": "7",
    "Trash": "8",
    "Misc": "9",
}
PRESET_BY_INDEX: Dict[str, str] = {index: name for name, index in PRESET_FOLDERS.items()}

ROOT_INDEX = "0"
FIRST_CUSTOM_INDEX = ""
CUSTOM_INDEX_SEQUENCE = "1ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
MAX_CUSTOM_FOLDERS = 1 + len(CUSTOM_INDEX_SEQUENCE)


def custom_index(position: int) -> str:
    """Token of the custom folder declared at ``position`` in the header."""
    if position == 0:
        return FIRST_CUSTOM_INDEX
    return CUSTOM_INDEX_SEQUENCE[position - 1]


@dataclass(frozen=True)
class FolderIndexTable:
    """Mapping between folder paths and index tokens for a single batch."""

    custom_folders: Tuple[str, ...] = ()
    _by_folder: Dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)
    _by_token: Dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.custom_folders) > MAX_CUSTOM_FOLDERS:
            raise FolderCapacityError(MAX_CUSTOM_FOLDERS)

        for position, folder in enumerate(self.custom_folders):
            if not folder:
                raise MalformedFieldError("Custom folder cannot be empty", field="custom_folders")
            if folder in PRESET_FOLDERS:
                raise MalformedFieldError(
                    f"Preset folder {folder!r} cannot be declared", field="custom_folders"
                )
            if folder in self._by_folder:
                raise MalformedFieldError(
                    f"Custom folder {folder!r} declared twice", field="custom_folders"
                )
            token = custom_index(position)
            self._by_folder[folder] = token
            self._by_token[token] = folder

    @classmethod
    def from_custom_folders(cls, custom_folders: Iterable[str]) -> "FolderIndexTable":
        """Rebuild the table from a decoded header's folder list."""
        return cls(tuple(custom_folders))

    def token_for(self, folder: str) -> str:
        """Index token a file in ``folder`` carries after its extension.

        Raises:
            MalformedFieldError: folder is a custom folder this table never allocated.
        """
        if not folder:
            return ROOT_INDEX if self.custom_folders else ""
        if folder in PRESET_FOLDERS:
            return PRESET_FOLDERS[folder]
        try:
            return self._by_folder[folder]
        except KeyError:
            raise MalformedFieldError(
                f"Folder {folder!r} is not part of this batch", field="folder"
            ) from None

    def folder_for(self, token: str) -> str:
        """Folder path for an index token.

        Raises:
            UnknownFolderIndexError: token is not a preset, root or declared folder.
        """
        if token in self._by_token:
            return self._by_token[token]
        if token in PRESET_BY_INDEX:
            return PRESET_BY_INDEX[token]
        if token in ("", ROOT_INDEX):
            return ""
        raise UnknownFolderIndexError(token)


def allocate_folders(folders: Iterable[str]) -> FolderIndexTable:
    """
    Assign tokens to folders in first-use order.

    Args:
        folders: Folder path of every file, in batch order. Paths must be
            normalized; root is ``""``.

    Returns:
        Table whose ``custom_folders`` lists each non-preset folder once

    Raises:
        FolderCapacityError: more custom folders than available tokens
    """
    custom: List[str] = []
    seen = set()
    for folder in folders:
        if not folder or folder in PRESET_FOLDERS or folder in seen:
            continue
        seen.add(folder)
        custom.append(folder)
        if len(custom) > MAX_CUSTOM_FOLDERS:
            raise FolderCapacityError(MAX_CUSTOM_FOLDERS)
    return FolderIndexTable(tuple(custom))
