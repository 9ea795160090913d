from __future__ import annotations

import json
import logging
import random
from typing import Optional

import typer
from dotenv import load_dotenv

from memorable_ids.core.config import Settings
from memorable_ids.core.errors import InvalidConfiguration

app = typer.Typer(add_completion=False, help="Generate and inspect memorable identifiers.")

logger = logging.getLogger("memorable_ids.cli")

def _load_settings() -> Settings:
    """Load .env, build settings and configure logging."""
    from memorable_ids.core.logging_config import setup_logging

    load_dotenv()
    settings = Settings.from_env()
    setup_logging(log_level=settings.log_level, log_dir=settings.log_dir)
    return settings

def _fail(exc: InvalidConfiguration) -> None:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)

def _resolve_suffix_range(suffix: Optional[str], suffix_range: Optional[int]) -> int:
    from memorable_ids.core.suffixes import suffix_range as range_for

    if suffix_range is not None:
        return suffix_range
    return range_for(suffix)

@app.command()
def generate(
    count: int = typer.Option(1, "--count", "-n", help="Number of identifiers to print"),
    components: Optional[int] = typer.Option(None, "--components", "-c", help="Words per identifier (1-5)"),
    suffix: Optional[str] = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Suffix generator: number, number4, hex, timestamp, letter, or 'none'",
    ),
    separator: Optional[str] = typer.Option(None, "--separator", help="Separator between parts"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
) -> None:
    """Print one or more memorable identifiers."""
    from memorable_ids.core.generator import GenerateConfig, generate_many
    from memorable_ids.core.logging_config import log_generated
    from memorable_ids.core.suffixes import get_suffix_generator

    settings = _load_settings()
    rng = random.Random(seed) if seed is not None else None

    suffix_name = settings.suffix if suffix is None else suffix
    if suffix_name and suffix_name.lower() == "none":
        suffix_name = None

    try:
        config = GenerateConfig(
            components=settings.components if components is None else components,
            suffix=get_suffix_generator(suffix_name, rng=rng) if suffix_name else None,
            separator=settings.separator if separator is None else separator,
        )
        logger.debug("Generating %d identifier(s): %s", count, config)
        identifiers = generate_many(count, config, rng=rng)
    except InvalidConfiguration as exc:
        _fail(exc)
        return

    for identifier in identifiers:
        if settings.log_generated:
            log_generated(identifier, config)
        typer.echo(identifier)

@app.command()
def parse(
    identifier: str = typer.Argument(..., help="Identifier to split"),
    separator: str = typer.Option("-", "--separator", help="Separator used when the identifier was built"),
) -> None:
    """Split an identifier into its words and numeric suffix (JSON output)."""
    from memorable_ids.core.parser import parse as parse_identifier

    _load_settings()
    typer.echo(json.dumps(parse_identifier(identifier, separator).to_dict()))

@app.command()
def combinations(
    components: int = typer.Option(2, "--components", "-c", help="Words per identifier (1-5)"),
    suffix: Optional[str] = typer.Option(None, "--suffix", "-s", help="Built-in suffix generator name"),
    suffix_range: Optional[int] = typer.Option(None, "--suffix-range", help="Explicit number of suffix values"),
) -> None:
    """Print the number of distinct identifiers for a configuration."""
    from memorable_ids.core.collision import calculate_combinations

    _load_settings()
    try:
        total = calculate_combinations(components, _resolve_suffix_range(suffix, suffix_range))
    except InvalidConfiguration as exc:
        _fail(exc)
        return
    typer.echo(str(total))

@app.command()
def analysis(
    components: int = typer.Option(2, "--components", "-c", help="Words per identifier (1-5)"),
    suffix: Optional[str] = typer.Option(None, "--suffix", "-s", help="Built-in suffix generator name"),
    suffix_range: Optional[int] = typer.Option(None, "--suffix-range", help="Explicit number of suffix values"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Show collision probabilities for common generation volumes."""
    from memorable_ids.core.collision import get_collision_analysis

    _load_settings()
    try:
        result = get_collision_analysis(components, _resolve_suffix_range(suffix, suffix_range))
    except InvalidConfiguration as exc:
        _fail(exc)
        return

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return

    typer.echo(f"Total combinations: {result.total_combinations:,}")
    if not result.scenarios:
        typer.echo("No realistic scenarios for this configuration.")
        return
    typer.echo(f"{'IDs':>8}  {'Collision':>10}")
    for scenario in result.scenarios:
        typer.echo(f"{scenario.sample_size:>8,}  {scenario.percentage_label:>10}")

@app.command()
def dictionary(
    category: Optional[str] = typer.Option(None, "--category", help="Print the words of one category"),
) -> None:
    """Show vocabulary sizes, or the words of one category."""
    from memorable_ids.core.dictionary import parse_category, stats, words_for

    _load_settings()
    if category is None:
        for name, size in stats().items():
            typer.echo(f"{name}: {size}")
        return
    try:
        selected = parse_category(category)
    except InvalidConfiguration as exc:
        _fail(exc)
        return
    for word in words_for(selected):
        typer.echo(word)

@app.command()
def version() -> None:
    from memorable_ids import __version__

    typer.echo(__version__)

if __name__ == "__main__":
    app()
