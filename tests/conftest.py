"""Shared test fixtures."""

from __future__ import annotations

import random

import httpx
import pytest

from renamr.clients.lexicon import WordListLexicon
from renamr.pipeline.modifiers import ModifierSet
from renamr.pipeline.tag_index import TagIndex
from renamr.sources.fetcher import SourceFetcher


class FakeTagger:
    """Tags each whitespace token from a fixed word -> tag table."""

    def __init__(self, table: dict[str, str], default: str = "FW"):
        self.table = {k.lower(): v for k, v in table.items()}
        self.default = default
        self.calls: list[str] = []

    def tag(self, text: str) -> list[tuple[str, str]]:
        self.calls.append(text)
        return [(w, self.table.get(w.lower(), self.default)) for w in text.split()]


SAMPLE_TAGS = {
    "angry": "JJ",
    "blue": "JJ",
    "quiet": "JJ",
    "dog": "NN",
    "cat": "NN",
    "river": "NN",
    "walked": "VBD",
    "jumped": "VBD",
    "the": "DT",
}

SAMPLE_HTML = """<html>
<head><title>Ignored title</title><style>.x { color: red }</style></head>
<body>
  <h1>The angry dog</h1>
  <p>A blue cat walked by the quiet river in 2024.</p>
  <script>var hidden = "secret";</script>
  <code>print("snippet")</code>
  <p>The dog jumped over http://example.com/path</p>
</body>
</html>
"""


@pytest.fixture
def fake_tagger() -> FakeTagger:
    return FakeTagger(SAMPLE_TAGS)


@pytest.fixture
def sample_lexicon() -> WordListLexicon:
    return WordListLexicon(
        ["angry", "blue", "quiet", "river", "walked", "jumped", "dog", "cat", "over"]
    )


@pytest.fixture
def small_index() -> TagIndex:
    return TagIndex({"JJ": {"angry": 1, "blue": 1}, "NN": {"dog": 1, "cat": 1}})


@pytest.fixture
def adj_noun() -> ModifierSet:
    return ModifierSet.parse(["JJ", "NN"], "_")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


def make_fetcher(handler, **kwargs) -> SourceFetcher:
    """SourceFetcher whose HTTP traffic goes to handler(request) -> Response."""
    return SourceFetcher(transport=httpx.MockTransport(handler), **kwargs)


@pytest.fixture
def html_fetcher(sample_html) -> SourceFetcher:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=sample_html, headers={"content-type": "text/html"})

    return make_fetcher(handler)


@pytest.fixture
def fetcher_factory():
    return make_fetcher
