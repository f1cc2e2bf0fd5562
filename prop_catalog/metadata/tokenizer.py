"""
Splits UIUC file names into their primary tokens.

Data file:  <mfg>_<diam>x<pitch>_[<deg>deg]_[<n>b]_[spec<k>]_<role or label>_<rpm>
Image file: <mfg>_<diam>x<pitch>[_modifiers]-<view>.jpg
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .. import config


@dataclass(frozen=True)
class SizeToken:
    diameter: str
    pitch: Optional[str] = None


@dataclass(frozen=True)
class FilenameTokens:
    fields: List[str]
    manufacturer: str
    size: Optional[SizeToken] = None
    rest: List[str] = field(default_factory=list)

    @property
    def is_short_form(self) -> bool:
        """'<mfg>_geom' / '<mfg>_thick': no size token, only a role keyword."""
        return len(self.fields) == 2


def split_size(token: str) -> SizeToken:
    parts = token.split(config.SIZE_SEP)
    pitch = parts[1] if len(parts) > 1 else None
    return SizeToken(diameter=parts[0], pitch=pitch)


def tokenize(stem: str) -> FilenameTokens:
    fields = stem.split(config.FIELD_SEP)
    size = split_size(fields[1]) if len(fields) > 1 else None
    return FilenameTokens(
        fields=fields,
        manufacturer=fields[0],
        size=size,
        rest=fields[2:],
    )


def split_image_name(name: str) -> Tuple[str, Optional[str]]:
    """
    'apce_10x5-front.jpg' -> ('apce_10x5', 'front').
    The view segment is None when the name has no separator.
    """
    stem = os.path.splitext(name)[0]
    if config.VIEW_SEP not in stem:
        return stem, None
    prefix, view = stem.split(config.VIEW_SEP, 1)
    return prefix, view
