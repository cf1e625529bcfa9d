"""
Stereo configuration descriptors.

Bracket atoms may carry a chirality tag following the element symbol. Every
tag defined by OpenSMILES is a member of :class:`Configuration`; the member
value is the tag exactly as written, so lookup is a single table access.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Configuration(Enum):
    """Closed enumeration of atom-centred stereo descriptors."""
    
    UNKNOWN = ""
    ANTICLOCKWISE = "@"
    CLOCKWISE = "@@"
    
    # tetrahedral
    TH1 = "@TH1"
    TH2 = "@TH2"
    
    # allene-like (extended tetrahedral)
    AL1 = "@AL1"
    AL2 = "@AL2"
    
    # square planar
    SP1 = "@SP1"
    SP2 = "@SP2"
    SP3 = "@SP3"
    
    # trigonal bipyramidal
    TB1 = "@TB1"
    TB2 = "@TB2"
    TB3 = "@TB3"
    TB4 = "@TB4"
    TB5 = "@TB5"
    TB6 = "@TB6"
    TB7 = "@TB7"
    TB8 = "@TB8"
    TB9 = "@TB9"
    TB10 = "@TB10"
    TB11 = "@TB11"
    TB12 = "@TB12"
    TB13 = "@TB13"
    TB14 = "@TB14"
    TB15 = "@TB15"
    TB16 = "@TB16"
    TB17 = "@TB17"
    TB18 = "@TB18"
    TB19 = "@TB19"
    TB20 = "@TB20"
    
    # octahedral
    OH1 = "@OH1"
    OH2 = "@OH2"
    OH3 = "@OH3"
    OH4 = "@OH4"
    OH5 = "@OH5"
    OH6 = "@OH6"
    OH7 = "@OH7"
    OH8 = "@OH8"
    OH9 = "@OH9"
    OH10 = "@OH10"
    OH11 = "@OH11"
    OH12 = "@OH12"
    OH13 = "@OH13"
    OH14 = "@OH14"
    OH15 = "@OH15"
    OH16 = "@OH16"
    OH17 = "@OH17"
    OH18 = "@OH18"
    OH19 = "@OH19"
    OH20 = "@OH20"
    OH21 = "@OH21"
    OH22 = "@OH22"
    OH23 = "@OH23"
    OH24 = "@OH24"
    OH25 = "@OH25"
    OH26 = "@OH26"
    OH27 = "@OH27"
    OH28 = "@OH28"
    OH29 = "@OH29"
    OH30 = "@OH30"
    
    @property
    def token(self) -> str:
        """The tag as written in SMILES (empty for ``UNKNOWN``)."""
        return self.value
    
    @property
    def shape(self) -> str | None:
        """Two letter class of an extended tag ("TH", "AL", "SP", "TB", "OH")."""
        if len(self.value) > 2:
            return self.value[1:3]
        return None
    
    @classmethod
    def from_token(cls, token: str) -> "Configuration | None":
        """Look up a configuration by its tag, e.g. ``"@TB5"``."""
        return _BY_TOKEN.get(token)
    
    def __str__(self) -> str:
        return self.value


_BY_TOKEN: Final[Mapping[str, Configuration]] = MappingProxyType(
    {config.value: config for config in Configuration}
)

# First letter of an extended tag -> allowed second letters
EXTENDED_CLASSES: Final[Mapping[str, str]] = MappingProxyType({
    "T": "HB",
    "A": "L",
    "S": "P",
    "O": "H",
})
