"""Penn Treebank tag vocabulary accepted as modifiers."""

from __future__ import annotations

from enum import Enum


class PosTag(str, Enum):
    CC = "CC"
    DT = "DT"
    IN = "IN"
    JJ = "JJ"
    NN = "NN"
    NNS = "NNS"
    NNP = "NNP"
    NNPS = "NNPS"
    RB = "RB"
    UH = "UH"
    VB = "VB"
    VBD = "VBD"
    VBG = "VBG"
    VBN = "VBN"

    @property
    def description(self) -> str:
        return TAG_DESCRIPTIONS[self]

    @classmethod
    def lookup(cls, name: str) -> PosTag | None:
        """Resolve a tag code ("jj") or description ("adjective"), case-insensitively."""
        key = name.strip()
        try:
            return cls(key.upper())
        except ValueError:
            pass
        return _BY_DESCRIPTION.get(key.lower())


TAG_DESCRIPTIONS: dict[PosTag, str] = {
    PosTag.CC: "conjunction",
    PosTag.DT: "determiner",
    PosTag.IN: "preposition",
    PosTag.JJ: "adjective",
    PosTag.NN: "noun",
    PosTag.NNS: "noun plural",
    PosTag.NNP: "noun proper",
    PosTag.NNPS: "noun proper plural",
    PosTag.RB: "adverb",
    PosTag.UH: "interjection",
    PosTag.VB: "verb",
    PosTag.VBD: "verb past tense",
    PosTag.VBG: "verb present participle",
    PosTag.VBN: "verb past participle",
}

_BY_DESCRIPTION: dict[str, PosTag] = {desc: tag for tag, desc in TAG_DESCRIPTIONS.items()}

DEFAULT_MODIFIERS: tuple[PosTag, ...] = (PosTag.JJ, PosTag.NN)
