"""Validated, ordered list of tags that make up each suggestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from renamr.errors import ConfigurationError
from renamr.models.tags import DEFAULT_MODIFIERS, TAG_DESCRIPTIONS, PosTag

DEFAULT_SEPARATOR = "_"


def _split_names(names: Iterable[str]) -> list[str]:
    """Accept ["JJ", "NN"] as well as ["JJ,NN"]."""
    out = []
    for name in names:
        out.extend(part.strip() for part in name.split(",") if part.strip())
    return out


@dataclass(frozen=True)
class ModifierSet:
    tags: tuple[PosTag, ...] = DEFAULT_MODIFIERS
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if not self.tags:
            raise ConfigurationError("At least one modifier is required")
        if any(ch.isalpha() for ch in self.separator):
            raise ConfigurationError(
                f"Invalid separator {self.separator!r}: letters would blend into the words"
            )

    @classmethod
    def parse(
        cls,
        names: Iterable[str] | None = None,
        separator: str | None = None,
    ) -> ModifierSet:
        """Build a ModifierSet from tag codes or descriptions.

        Raises ConfigurationError on the first unrecognized name; nothing is
        partially applied. An empty list falls back to adjective + noun.
        """
        sep = DEFAULT_SEPARATOR if separator is None else separator
        requested = _split_names(names or [])
        if not requested:
            return cls(tags=DEFAULT_MODIFIERS, separator=sep)

        tags = []
        for name in requested:
            tag = PosTag.lookup(name)
            if tag is None:
                raise ConfigurationError(f"Invalid option provided as modifier: {name}")
            tags.append(tag)
        return cls(tags=tuple(tags), separator=sep)

    @property
    def codes(self) -> list[str]:
        return [tag.value for tag in self.tags]

    def __len__(self) -> int:
        return len(self.tags)

    @staticmethod
    def listing() -> list[tuple[str, str]]:
        return [(tag.value, desc) for tag, desc in TAG_DESCRIPTIONS.items()]
