"""Dictionary validity checks used to filter tagged words."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

import nltk

from renamr.errors import ConfigurationError, TaggerUnavailableError

logger = logging.getLogger(__name__)

# locale -> fileid in the NLTK "words" corpus
LOCALE_WORDLISTS: dict[str, str] = {
    "en": "en",
    "en_US": "en",
    "en_GB": "en",
    "en_CA": "en",
    "en_AU": "en",
    "en-basic": "en-basic",
}


class Lexicon(Protocol):
    def check(self, word: str) -> bool: ...


class WordListLexicon:
    """Case-insensitive membership test over a fixed vocabulary."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: str | Path) -> WordListLexicon:
        """One word per line; blank lines are ignored."""
        text = Path(path).read_text(encoding="utf-8")
        return cls(text.splitlines())

    def check(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)


class NltkLexicon(WordListLexicon):
    """Lexicon loaded from the NLTK "words" corpus for a locale."""

    def __init__(self, locale: str = "en_US", auto_download: bool = True):
        fileid = LOCALE_WORDLISTS.get(locale)
        if fileid is None:
            raise ConfigurationError(
                f"Unsupported lexicon locale {locale!r}; "
                f"expected one of {', '.join(LOCALE_WORDLISTS)}"
            )
        self.locale = locale
        super().__init__(self._load(fileid, auto_download))
        logger.info("Loaded %d dictionary words for %s", len(self), locale)

    @staticmethod
    def _load(fileid: str, auto_download: bool) -> list[str]:
        from nltk.corpus import words

        try:
            return words.words(fileid)
        except LookupError:
            if not auto_download:
                raise TaggerUnavailableError(
                    "NLTK words corpus missing. Run: python -m nltk.downloader words"
                ) from None
        nltk.download("words", quiet=True)
        try:
            return words.words(fileid)
        except LookupError as exc:
            raise TaggerUnavailableError(f"NLTK words corpus unavailable: {exc}") from exc
