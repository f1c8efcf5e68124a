"""Data models for the suggestion pipeline."""

from renamr.models.result import ResultConfig, ResultEnvelope
from renamr.models.source import RawSource
from renamr.models.tags import DEFAULT_MODIFIERS, TAG_DESCRIPTIONS, PosTag

__all__ = [
    "DEFAULT_MODIFIERS",
    "PosTag",
    "RawSource",
    "ResultConfig",
    "ResultEnvelope",
    "TAG_DESCRIPTIONS",
]
