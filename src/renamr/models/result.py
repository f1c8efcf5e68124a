"""Pydantic models for the emitted result envelope."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResultConfig(BaseModel):
    sources: list[str] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)


class ResultEnvelope(BaseModel):
    config: ResultConfig
    suggestions: list[str] = Field(default_factory=list)
