"""Serialize a suggestion batch as text, CSV, JSON or YAML."""

from __future__ import annotations

import csv
import io
import json
import sys
from enum import Enum
from typing import Iterable, TextIO

import yaml

from renamr.models.result import ResultConfig, ResultEnvelope
from renamr.pipeline.engine import SuggestionBatch
from renamr.pipeline.modifiers import ModifierSet


class OutputFormat(str, Enum):
    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"

    @property
    def description(self) -> str:
        return FORMAT_DESCRIPTIONS[self]

    @classmethod
    def lookup(cls, name: str) -> OutputFormat | None:
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


FORMAT_DESCRIPTIONS: dict[OutputFormat, str] = {
    OutputFormat.TEXT: "Plain text separated by a new line.",
    OutputFormat.CSV: "Plain text separated by commas.",
    OutputFormat.JSON: "Object representation conforming to https://www.json.org/",
    OutputFormat.YAML: "Object representation conforming to https://yaml.org/",
}


class ResultWriter:
    """Packages suggestions together with the sources and modifiers used."""

    def __init__(self, sources: Iterable[str], modifiers: ModifierSet):
        self.sources = list(sources)
        self.modifiers = modifiers

    def envelope(self, batch: SuggestionBatch) -> ResultEnvelope:
        return ResultEnvelope(
            config=ResultConfig(sources=self.sources, modifiers=self.modifiers.codes),
            suggestions=list(batch.suggestions),
        )

    def render(self, batch: SuggestionBatch, fmt: OutputFormat | str) -> str:
        """Render batch; unknown formats fall back to plain text."""
        if not isinstance(fmt, OutputFormat):
            fmt = OutputFormat.lookup(fmt) or OutputFormat.TEXT

        if fmt is OutputFormat.JSON:
            return json.dumps(self.envelope(batch).model_dump())
        if fmt is OutputFormat.YAML:
            return yaml.safe_dump(
                self.envelope(batch).model_dump(), sort_keys=False, default_flow_style=False
            ).rstrip("\n")
        if fmt is OutputFormat.CSV:
            return _to_csv(batch.suggestions)
        return "\n".join(batch.suggestions)

    def write(
        self,
        batch: SuggestionBatch,
        fmt: OutputFormat | str,
        stream: TextIO | None = None,
    ) -> None:
        out = stream or sys.stdout
        out.write(self.render(batch, fmt) + "\n")


def _to_csv(values: list[str]) -> str:
    """One row; every value is quoted once there is more than one."""
    buffer = io.StringIO()
    quoting = csv.QUOTE_ALL if len(values) > 1 else csv.QUOTE_MINIMAL
    csv.writer(buffer, quoting=quoting, lineterminator="").writerow(values)
    return buffer.getvalue()
