"""Turn raw source text into a lower-cased token stream."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from renamr.models.source import RawSource

# \w covers unicode letters, but also digits and underscore
_NON_WORD = re.compile(r"[^\w\s-]|[\d_]")


def normalize_text(text: str) -> list[str]:
    """Split text into lower-case tokens of letters and inner hyphens.

    Every character that is not a letter, whitespace or hyphen becomes a
    space, so digits, slashes and punctuation never reach a token.
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    pieces = (piece.strip("-") for piece in cleaned.split())
    return [piece for piece in pieces if piece]


def _distinct(tokens: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out = []
    for token in tokens:
        if token not in seen:
            seen.add(token)
            out.append(token)
    return out


@dataclass(frozen=True)
class NormalizedText:
    tokens: tuple[str, ...]

    @property
    def text(self) -> str:
        """Space-joined blob handed to the tagger."""
        return " ".join(self.tokens)

    def distinct(self) -> list[str]:
        return _distinct(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


class Normalizer:
    """Combines the text of all sources into one normalized token sequence."""

    @staticmethod
    def from_sources(sources: Iterable[RawSource]) -> NormalizedText:
        tokens: list[str] = []
        for source in sources:
            tokens.extend(normalize_text(source.text))
        return NormalizedText(tokens=tuple(tokens))


def word_sources(words: Iterable[str]) -> list[RawSource]:
    """Word-list mode: each literal word is its own lower-cased source."""
    return [
        RawSource(identifier=word, text=word.lower())
        for word in _distinct(w.strip() for w in words)
        if word
    ]
