"""Random suggestion generation with batch-level uniqueness."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable

from renamr.errors import EmptyCandidatesError
from renamr.pipeline.modifiers import ModifierSet
from renamr.pipeline.tag_index import TagIndex

logger = logging.getLogger(__name__)

DEFAULT_RETRY_FACTOR = 10


@dataclass
class SuggestionBatch:
    """Unique suggestions in generation order."""

    suggestions: list[str] = field(default_factory=list)
    requested: int = 0
    attempts: int = 0

    @property
    def exhausted(self) -> bool:
        """True when fewer than the requested number could be produced."""
        return len(self.suggestions) < self.requested

    def __len__(self) -> int:
        return len(self.suggestions)

    def __iter__(self):
        return iter(self.suggestions)


@dataclass(frozen=True)
class _Pool:
    tag: str
    words: tuple[str, ...]
    weights: tuple[int, ...]


Selector = Callable[[random.Random, _Pool], str]


def _pick_uniform(rng: random.Random, pool: _Pool) -> str:
    return rng.choice(pool.words)


def _pick_by_frequency(rng: random.Random, pool: _Pool) -> str:
    return rng.choices(pool.words, weights=pool.weights, k=1)[0]


SELECTORS: dict[str, Selector] = {
    "uniform": _pick_uniform,
    "frequency": _pick_by_frequency,
}


class SuggestionEngine:
    """Picks one word per modifier tag and joins them.

    Candidate pools and the selection function are resolved once here, so
    generation never goes back to the tagger or the index.
    """

    def __init__(
        self,
        index: TagIndex,
        modifiers: ModifierSet,
        *,
        rng: random.Random | None = None,
        retry_factor: int = DEFAULT_RETRY_FACTOR,
        selection: str = "uniform",
    ):
        if retry_factor < 1:
            raise ValueError(f"retry_factor must be at least 1, got {retry_factor}")
        if selection not in SELECTORS:
            raise ValueError(f"Unknown selection policy: {selection!r}")
        self.modifiers = modifiers
        self.retry_factor = retry_factor
        self._rng = rng or random.Random()
        self._select = SELECTORS[selection]
        sep = modifiers.separator
        self._pools = []
        for tag in modifiers.tags:
            freqs = index.frequencies(tag.value)
            # a word holding the separator would split into extra segments
            words = tuple(sorted(w for w in freqs if not sep or sep not in w))
            self._pools.append(
                _Pool(tag=tag.value, words=words, weights=tuple(freqs[w] for w in words))
            )
        for pool in self._pools:
            if not pool.words:
                logger.warning("No candidate words for modifier %s", pool.tag)

    @property
    def space_size(self) -> int:
        """Upper bound on the number of distinct suggestions."""
        return math.prod(len(pool.words) for pool in self._pools)

    def suggest(self) -> str:
        """Return one suggestion, or raise EmptyCandidatesError."""
        words = []
        for pool in self._pools:
            if not pool.words:
                raise EmptyCandidatesError(pool.tag)
            words.append(self._select(self._rng, pool))
        return self.modifiers.separator.join(words)

    def suggestions(self, count: int) -> SuggestionBatch:
        """Collect up to count unique suggestions.

        At most count * retry_factor attempts are made; duplicates and failed
        attempts use up budget. Generation also stops once every achievable
        combination has been produced.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        budget = count * self.retry_factor
        space = self.space_size
        batch = SuggestionBatch(requested=count)
        seen: set[str] = set()

        while len(batch.suggestions) < count and batch.attempts < budget:
            if 0 < space <= len(batch.suggestions):
                break
            batch.attempts += 1
            try:
                suggestion = self.suggest()
            except EmptyCandidatesError as exc:
                logger.debug("Attempt %d failed: %s", batch.attempts, exc)
                continue
            if suggestion in seen:
                continue
            seen.add(suggestion)
            batch.suggestions.append(suggestion)

        if batch.exhausted:
            logger.warning(
                "Not enough input variance to generate requested number of results "
                "(%d of %d after %d attempts)",
                len(batch.suggestions),
                count,
                batch.attempts,
            )
        return batch
