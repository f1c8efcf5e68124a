"""Extract visible text from HTML pages."""

from __future__ import annotations

from bs4 import BeautifulSoup

HIDDEN_ELEMENTS = ("head", "script", "style", "code")


def strip_markup(html: str) -> str:
    """Return page text with head, script, style and code content removed."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(list(HIDDEN_ELEMENTS)):
        element.extract()
    return soup.get_text(" ")
