"""Raw text gathered from one source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawSource:
    """A link or literal word plus the plain text derived from it."""

    identifier: str
    text: str
