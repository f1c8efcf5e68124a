"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from renamr.errors import ConfigurationError

CONFIG_ENV_VAR = "RENAMR_CONFIG"

RANDOM_ARTICLE = "https://en.wikipedia.org/wiki/Special:Random"


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value!r}")


@dataclass(frozen=True)
class GeneratorConfig:
    results: int = 1
    separator: str = "_"
    modifiers: tuple[str, ...] = ("JJ", "NN")
    retry_factor: int = 10
    selection: str = "uniform"  # uniform, frequency
    seed: int | None = None

    def __post_init__(self) -> None:
        _check_range("results", self.results, 1, 10_000)
        _check_range("retry_factor", self.retry_factor, 1, 1000)
        if self.selection not in ("uniform", "frequency"):
            raise ValueError(f"selection must be 'uniform' or 'frequency', got {self.selection!r}")
        # YAML gives lists
        object.__setattr__(self, "modifiers", tuple(self.modifiers))


@dataclass(frozen=True)
class SourceConfig:
    default_links: tuple[str, ...] = (RANDOM_ARTICLE,) * 4
    timeout: float = 30.0
    max_redirects: int = 10
    user_agent: str = "renamr/1.0"
    block_private_hosts: bool = False

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_redirects", self.max_redirects, 0, 50)
        object.__setattr__(self, "default_links", tuple(self.default_links))


@dataclass(frozen=True)
class LexiconConfig:
    enabled: bool = True
    locale: str = "en_US"
    min_length: int = 4
    wordlist_path: str | None = None

    def __post_init__(self) -> None:
        _check_range("min_length", self.min_length, 1, 32)

    @property
    def resolved_wordlist_path(self) -> Path | None:
        if self.wordlist_path is None:
            return None
        return Path(self.wordlist_path).expanduser()


@dataclass(frozen=True)
class TaggerConfig:
    auto_download: bool = True


@dataclass(frozen=True)
class OutputConfig:
    format: str = "text"


@dataclass(frozen=True)
class AppConfig:
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    sources: SourceConfig = field(default_factory=SourceConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    tagger: TaggerConfig = field(default_factory=TaggerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path).expanduser()] if env_path else []
        candidates.append(Path.cwd() / "config.yaml")
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    source = "defaults"
    if path is not None:
        p = Path(path)
        if p.exists():
            source = str(p)
            try:
                raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Invalid YAML in {source}: {exc}") from exc
            if not isinstance(raw, dict):
                raise ConfigurationError(f"Invalid config {source}: expected a mapping")

    try:
        return AppConfig(
            generator=GeneratorConfig(**raw.get("generator", {})),
            sources=SourceConfig(**raw.get("sources", {})),
            lexicon=LexiconConfig(**raw.get("lexicon", {})),
            tagger=TaggerConfig(**raw.get("tagger", {})),
            output=OutputConfig(**raw.get("output", {})),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config {source}: {exc}") from exc
