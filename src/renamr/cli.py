"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

import typer
from typer.core import TyperGroup
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from renamr import __version__
from renamr.config import load_config
from renamr.errors import ConfigurationError, SourceFetchError, TaggerUnavailableError
from renamr.export.writer import FORMAT_DESCRIPTIONS, OutputFormat
from renamr.pipeline.modifiers import ModifierSet
from renamr.pipeline.orchestrator import ReleaseNamer


class DefaultSuggestGroup(TyperGroup):
    """Runs `suggest` when the first argument is not a known command."""

    default_command = "suggest"
    passthrough = {"--help", "--install-completion", "--show-completion"}

    def parse_args(self, ctx, args):
        if not args or (args[0] not in self.commands and args[0] not in self.passthrough):
            args = [self.default_command, *args]
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="renamr",
    cls=DefaultSuggestGroup,
    help=(
        'Return a randomly generated list of possible "release names" using '
        "the words found on one or more links."
    ),
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_listing(rows: list[tuple[str, str]]) -> None:
    table = Table(show_edge=False, box=None, pad_edge=False)
    table.add_column("TYPE", style="bold")
    table.add_column("DESCRIPTION")
    for name, desc in rows:
        table.add_row(name, desc)
    console.print(table)


def _format_rows() -> list[tuple[str, str]]:
    return [(fmt.value, desc) for fmt, desc in FORMAT_DESCRIPTIONS.items()]


@app.command()
def suggest(
    sources: Optional[List[str]] = typer.Argument(
        None, help="Links to harvest words from (or literal words with --words)"
    ),
    results: Optional[int] = typer.Option(
        None, "--results", "-r", min=1, help="Number of result entries to generate"
    ),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Format of returned results"),
    list_formats: bool = typer.Option(
        False, "--list-formats", "-F", help="List available output formats"
    ),
    modifiers: Optional[str] = typer.Option(
        None, "--modifiers", "-m", help="Comma-separated Penn Treebank tags, e.g. JJ,NN"
    ),
    list_modifiers: bool = typer.Option(
        False, "--list-modifiers", "-M", help="List available modifier tags"
    ),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Value placed between modifier words"
    ),
    words: bool = typer.Option(
        False, "--words", "-w", help="Treat arguments as literal words instead of links"
    ),
    no_lexicon: bool = typer.Option(False, "--no-lexicon", help="Skip dictionary filtering"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable output"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate word combination suggestions from the text of the given links."""
    _configure_logging(verbose)

    if list_formats:
        _print_listing(_format_rows())
        raise typer.Exit()
    if list_modifiers:
        _print_listing(ModifierSet.listing())
        raise typer.Exit()

    try:
        config = load_config(config_path)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1)

    fmt_name = fmt or config.output.format
    output_format = OutputFormat.lookup(fmt_name)
    if output_format is None:
        err_console.print(f"[red]Error: Invalid option provided as output format: {fmt_name}[/red]")
        _print_listing(_format_rows())
        raise typer.Exit(1)

    modifier_names = modifiers.split(",") if modifiers else list(config.generator.modifiers)
    try:
        ModifierSet.parse(modifier_names, separator)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        _print_listing(ModifierSet.listing())
        raise typer.Exit(1)

    try:
        namer = ReleaseNamer(
            config,
            use_lexicon=not no_lexicon,
            rng=random.Random(seed) if seed is not None else None,
        )
        result = namer.run(
            sources or [],
            words_mode=words,
            results=results,
            modifiers=modifier_names,
            separator=separator,
        )
    except ConfigurationError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1)
    except SourceFetchError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2)
    except TaggerUnavailableError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(3)

    typer.echo(result.writer.render(result.batch, output_format))


@app.command()
def formats() -> None:
    """List available output formats."""
    _print_listing(_format_rows())


@app.command()
def modifiers() -> None:
    """List available modifier tags."""
    _print_listing(ModifierSet.listing())


@app.command()
def version() -> None:
    """Print the version."""
    typer.echo(f"renamr {__version__}")


if __name__ == "__main__":
    app()
