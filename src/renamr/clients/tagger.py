"""Part-of-speech tagging backed by the NLTK perceptron tagger."""

from __future__ import annotations

import logging
from typing import Protocol

import nltk

from renamr.errors import TaggerUnavailableError

logger = logging.getLogger(__name__)

# Older NLTK releases ship the pickle model, newer ones the _eng JSON model
TAGGER_RESOURCES = ("averaged_perceptron_tagger_eng", "averaged_perceptron_tagger")


class Tagger(Protocol):
    def tag(self, text: str) -> list[tuple[str, str]]: ...


class NltkTagger:
    """Tags whitespace-separated text with Penn Treebank tags."""

    def __init__(self, auto_download: bool = True):
        self.auto_download = auto_download

    def tag(self, text: str) -> list[tuple[str, str]]:
        tokens = text.split()
        if not tokens:
            return []
        try:
            return nltk.pos_tag(tokens)
        except LookupError:
            if not self.auto_download:
                raise TaggerUnavailableError(
                    "NLTK tagger model missing. Run: "
                    "python -m nltk.downloader averaged_perceptron_tagger_eng"
                ) from None
        self._download()
        try:
            return nltk.pos_tag(tokens)
        except LookupError as exc:
            raise TaggerUnavailableError(f"NLTK tagger model unavailable: {exc}") from exc

    @staticmethod
    def _download() -> None:
        logger.info("Downloading NLTK tagger model")
        for resource in TAGGER_RESOURCES:
            nltk.download(resource, quiet=True)
