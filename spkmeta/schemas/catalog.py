"""Fixed vocabularies for file tags, licenses and labels.

Tags are bit flags packed into one integer. Licenses are single-character
identifiers. Labels are single decimal digits kept as an ordered string.
"""

from enum import IntFlag
from typing import Dict, List, Optional

from pydantic import BaseModel


class FileTag(IntFlag):
    """Bit flags carried in a file's ``tags`` mask."""

    ENCRYPTED = 1
    THUMBNAIL = 2  # auxiliary file, hidden from explorers
    NSFW = 4
    EXECUTABLE = 8


class LicenseOption(BaseModel):
    value: str
    label: str
    description: str
    link: Optional[str] = None


class LabelOption(BaseModel):
    value: str
    label: str
    icon: Optional[str] = None


LICENSES: Dict[str, LicenseOption] = {
    opt.value: opt for opt in [
        LicenseOption(
            value="1", label="CC BY",
            description="Creative Commons Attribution License",
            link="https://creativecommons.org/licenses/by/4.0/",
        ),
        LicenseOption(
            value="2", label="CC BY-SA",
            description="Creative Commons Share Alike License",
            link="https://creativecommons.org/licenses/by-sa/4.0/",
        ),
        LicenseOption(
            value="3", label="CC BY-ND",
            description="Creative Commons No Derivatives License",
            link="https://creativecommons.org/licenses/by-nd/4.0/",
        ),
        LicenseOption(
            value="4", label="CC BY-NC-ND",
            description="Creative Commons Non-Commercial No Derivatives License",
            link="https://creativecommons.org/licenses/by-nc-nd/4.0/",
        ),
        LicenseOption(
            value="5", label="CC BY-NC",
            description="Creative Commons Non-Commercial License",
            link="https://creativecommons.org/licenses/by-nc/4.0/",
        ),
        LicenseOption(
            value="6", label="CC BY-NC-SA",
            description="Creative Commons Non-Commercial Share Alike License",
            link="https://creativecommons.org/licenses/by-nc-sa/4.0/",
        ),
        LicenseOption(
            value="7", label="CC0",
            description="CC0: Public Domain Grant",
            link="https://creativecommons.org/publicdomain/zero/1.0/",
        ),
    ]
}

LABELS: Dict[str, LabelOption] = {
    opt.value: opt for opt in [
        LabelOption(value="0", label="Miscellaneous", icon="fa-sink"),
        LabelOption(value="1", label="Important", icon="fa-exclamation"),
        LabelOption(value="2", label="Favorite", icon="fa-star"),
        LabelOption(value="3", label="Random", icon="fa-dice"),
        LabelOption(value="4", label="Red", icon="fa-circle text-red"),
        LabelOption(value="5", label="Orange", icon="fa-circle text-orange"),
        LabelOption(value="6", label="Yellow", icon="fa-circle text-yellow"),
        LabelOption(value="7", label="Green", icon="fa-circle text-green"),
        LabelOption(value="8", label="Blue", icon="fa-circle text-blue"),
        LabelOption(value="9", label="Purple", icon="fa-circle text-purple"),
    ]
}


def combine_tags(tags: List[int]) -> int:
    """OR a list of tag values into one mask."""
    mask = 0
    for tag in tags:
        mask |= int(tag)
    return mask
