"""Gather raw text from link sources."""

from __future__ import annotations

import logging
from typing import Iterable

from renamr.models.source import RawSource
from renamr.sources.fetcher import SourceFetcher
from renamr.sources.markup import strip_markup

logger = logging.getLogger(__name__)


def unique_links(links: Iterable[str]) -> list[str]:
    """Drop repeated links, keeping first-seen order."""
    out: list[str] = []
    for link in links:
        link = link.strip()
        if link and link not in out:
            out.append(link)
    return out


def collect_link_sources(links: Iterable[str], fetcher: SourceFetcher) -> list[RawSource]:
    """Fetch every link in turn and strip its markup.

    Links are fetched as given, repeats included (a random-article link
    yields a different page each time). The first failing fetch aborts
    collection; nothing partial is returned.
    """
    sources = []
    for link in links:
        html = fetcher.fetch(link)
        text = strip_markup(html)
        logger.debug("Collected %d characters from %s", len(text), link)
        sources.append(RawSource(identifier=link, text=text))
    return sources
