"""Build the tag -> candidate words index from tagged text."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from renamr.clients.lexicon import Lexicon
from renamr.clients.tagger import Tagger

logger = logging.getLogger(__name__)

DEFAULT_DENYLIST: tuple[str, ...] = (r"[0-9]", r"/")
DEFAULT_MIN_LENGTH = 4


@dataclass(frozen=True)
class TagIndex:
    """Immutable mapping of tag code to {word: occurrences}."""

    entries: Mapping[str, Mapping[str, int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {
            tag: MappingProxyType(dict(counts))
            for tag, counts in self.entries.items()
            if counts
        }
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    def words(self, tag: str) -> tuple[str, ...]:
        """Distinct words for tag, sorted. Empty for unknown tags."""
        return tuple(sorted(self.entries.get(tag, {})))

    def frequencies(self, tag: str) -> dict[str, int]:
        return dict(self.entries.get(tag, {}))

    def tags(self) -> list[str]:
        return sorted(self.entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self.entries

    def __len__(self) -> int:
        return sum(len(counts) for counts in self.entries.values())


def _lowered(pairs: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    return [(word.lower(), tag) for word, tag in pairs]


def _without_denied(pairs: list[tuple[str, str]], denylist: Iterable[str]) -> list[tuple[str, str]]:
    patterns = list(denylist)
    if not patterns:
        return pairs
    denied = re.compile("|".join(patterns))
    return [(word, tag) for word, tag in pairs if not denied.search(word)]


def _in_lexicon(
    pairs: list[tuple[str, str]], lexicon: Lexicon, min_length: int
) -> list[tuple[str, str]]:
    return [
        (word, tag)
        for word, tag in pairs
        if len(word) >= min_length and word.isalpha() and lexicon.check(word)
    ]


def index_tagged(
    pairs: Iterable[tuple[str, str]],
    *,
    lexicon: Lexicon | None = None,
    min_length: int = DEFAULT_MIN_LENGTH,
    denylist: Iterable[str] = DEFAULT_DENYLIST,
) -> TagIndex:
    """Filter tagger output and group the surviving words by tag.

    Repeated (word, tag) pairs collapse into a single entry whose count
    records how often the word was seen.
    """
    kept = _without_denied(_lowered(pairs), denylist)
    if lexicon is not None:
        kept = _in_lexicon(kept, lexicon, min_length)

    grouped: dict[str, Counter[str]] = {}
    for word, tag in kept:
        if word:
            grouped.setdefault(tag, Counter())[word] += 1
    return TagIndex(grouped)


class TagIndexBuilder:
    """Runs the tagger once over normalized text and indexes the result."""

    def __init__(
        self,
        tagger: Tagger,
        lexicon: Lexicon | None = None,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        denylist: Iterable[str] = DEFAULT_DENYLIST,
    ):
        self.tagger = tagger
        self.lexicon = lexicon
        self.min_length = min_length
        self.denylist = tuple(denylist)

    def build(self, text: str) -> TagIndex:
        pairs = self.tagger.tag(text)
        index = index_tagged(
            pairs,
            lexicon=self.lexicon,
            min_length=self.min_length,
            denylist=self.denylist,
        )
        logger.info(
            "Indexed %d distinct words across %d tags from %d tagged tokens",
            len(index),
            len(index.entries),
            len(pairs),
        )
        return index
