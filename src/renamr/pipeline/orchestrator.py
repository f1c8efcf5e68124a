"""Main pipeline orchestrator - sources to suggestions in one pass."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Sequence

from renamr.clients.lexicon import Lexicon, NltkLexicon, WordListLexicon
from renamr.clients.tagger import NltkTagger, Tagger
from renamr.config import AppConfig
from renamr.errors import ConfigurationError
from renamr.export.writer import ResultWriter
from renamr.models.result import ResultEnvelope
from renamr.models.source import RawSource
from renamr.parsers.normalizer import Normalizer, word_sources
from renamr.pipeline.engine import SuggestionBatch, SuggestionEngine
from renamr.pipeline.modifiers import ModifierSet
from renamr.pipeline.tag_index import TagIndex, TagIndexBuilder
from renamr.sources.collector import collect_link_sources, unique_links
from renamr.sources.fetcher import SourceFetcher

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything produced by one run."""

    batch: SuggestionBatch
    envelope: ResultEnvelope
    writer: ResultWriter
    index: TagIndex
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


def build_lexicon(config: AppConfig) -> Lexicon | None:
    """Lexicon from configuration: word-list file, NLTK corpus, or none."""
    if not config.lexicon.enabled:
        return None
    path = config.lexicon.resolved_wordlist_path
    if path is not None:
        try:
            return WordListLexicon.from_file(path)
        except OSError as exc:
            raise ConfigurationError(f"Cannot read word list {path}: {exc}") from exc
    return NltkLexicon(config.lexicon.locale, auto_download=config.tagger.auto_download)


class ReleaseNamer:
    """Runs fetch -> strip -> normalize -> index -> generate, strictly in order."""

    def __init__(
        self,
        config: AppConfig,
        *,
        fetcher: SourceFetcher | None = None,
        tagger: Tagger | None = None,
        lexicon: Lexicon | None = None,
        use_lexicon: bool = True,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.fetcher = fetcher or SourceFetcher(
            timeout=config.sources.timeout,
            user_agent=config.sources.user_agent,
            max_redirects=config.sources.max_redirects,
            block_private=config.sources.block_private_hosts,
        )
        self.tagger = tagger or NltkTagger(auto_download=config.tagger.auto_download)
        if lexicon is None and use_lexicon:
            lexicon = build_lexicon(config)
        self.lexicon = lexicon if use_lexicon else None
        self.rng = rng or random.Random(config.generator.seed)

    def run(
        self,
        sources: Sequence[str] = (),
        *,
        words_mode: bool = False,
        results: int | None = None,
        modifiers: Sequence[str] | None = None,
        separator: str | None = None,
    ) -> PipelineResult:
        """Generate suggestions from links (or literal words with words_mode)."""
        start = time.monotonic()
        gen = self.config.generator

        # Validate before touching the network
        modifier_set = ModifierSet.parse(
            modifiers if modifiers else gen.modifiers,
            gen.separator if separator is None else separator,
        )
        count = gen.results if results is None else results
        if count < 1:
            raise ConfigurationError(f"Number of results must be at least 1, got {count}")

        raw = self._gather(sources, words_mode)
        identifiers = [s.identifier for s in raw]

        normalized = Normalizer.from_sources(raw)
        logger.info("Normalized %d tokens from %d sources", len(normalized), len(raw))

        builder = TagIndexBuilder(
            self.tagger,
            self.lexicon,
            min_length=self.config.lexicon.min_length,
        )
        index = builder.build(normalized.text)

        engine = SuggestionEngine(
            index,
            modifier_set,
            rng=self.rng,
            retry_factor=gen.retry_factor,
            selection=gen.selection,
        )
        batch = engine.suggestions(count)

        writer = ResultWriter(identifiers, modifier_set)
        return PipelineResult(
            batch=batch,
            envelope=writer.envelope(batch),
            writer=writer,
            index=index,
            elapsed_seconds=time.monotonic() - start,
            metadata={"attempts": batch.attempts, "space_size": engine.space_size},
        )

    def _gather(self, sources: Sequence[str], words_mode: bool) -> list[RawSource]:
        if words_mode:
            raw = word_sources(sources)
            if not raw:
                raise ConfigurationError("Word-list mode requires at least one word")
            return raw

        links = unique_links(sources) or list(self.config.sources.default_links)
        if not links:
            raise ConfigurationError("No source links given and no default links configured")
        return collect_link_sources(links, self.fetcher)
