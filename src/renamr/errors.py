"""Exception hierarchy for the suggestion pipeline."""

from __future__ import annotations


class RenamrError(Exception):
    """Base class for all renamr errors."""


class ConfigurationError(RenamrError, ValueError):
    """Raised for invalid user input: unknown modifier, format, locale, or empty sources."""


class SourceFetchError(RenamrError):
    """Raised when a source link cannot be fetched."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class BlockedHostError(SourceFetchError):
    """Raised when a link points at a private/internal address and blocking is on."""


class EmptyCandidatesError(RenamrError):
    """Raised when a requested tag has no candidate words."""

    def __init__(self, tag: str):
        super().__init__(f"No candidate words for tag {tag}")
        self.tag = tag


class TaggerUnavailableError(RenamrError):
    """Raised when NLTK model or corpus data is missing and cannot be downloaded."""
