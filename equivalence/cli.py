"""
Command-line interface for the equivalence package.

Values are given as JSON documents; anything that does not parse as JSON is
taken as a plain string. JSON objects become mappings and keep their key
order, so ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` are different
values.
"""

import json
from typing import Any, Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import STRATEGIES, StrategyConfig
from .errors import ComparisonError
from .utils.logging_setup import log_operation, setup_logging

console = Console()


def parse_value(text: str) -> Any:
    """Parse a JSON document, falling back to the raw string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def build_hasher(strategy: Optional[str], config_path: Optional[str]):
    """Build the hasher from a config file, letting ``--strategy`` override it."""
    config = StrategyConfig.load_or_default(config_path)
    if strategy is not None and strategy != config.strategy:
        overrides = config.overrides if strategy == "value" else {}
        config = StrategyConfig(strategy=strategy, overrides=overrides)
    return config.build()


@click.group(name="equivalence")
@click.version_option(__version__, prog_name="equivalence")
@click.option(
    "--strategy",
    type=click.Choice(sorted(STRATEGIES)),
    default=None,
    help="Hashing strategy (default: from config, else 'value')"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML strategy configuration"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-json", is_flag=True, help="Emit log records as JSON objects")
@click.pass_context
def main(ctx, strategy, config_path, verbose, log_json):
    """Compare and hash values the way hash-based containers see them."""
    logger = setup_logging(level="DEBUG" if verbose else "WARNING", json_format=log_json)
    log_operation(logger, "cli", strategy=strategy, config=config_path)

    try:
        ctx.obj = build_hasher(strategy, config_path)
    except (ComparisonError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e


@main.command(name="hash")
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def hash_command(hasher, values):
    """Print the hash code of each VALUE."""
    table = Table(title=f"{type(hasher).__name__} hash codes")
    table.add_column("Value")
    table.add_column("Hash", justify="right")

    for text in values:
        value = parse_value(text)
        try:
            code = hasher.hash(value)
        except ComparisonError as e:
            raise click.ClickException(str(e)) from e
        table.add_row(repr(value), str(code))

    console.print(table)


@main.command(name="compare")
@click.argument("left")
@click.argument("right")
@click.pass_context
def compare_command(ctx, left, right):
    """Report whether LEFT and RIGHT are equivalent (exit status 1 if not)."""
    hasher = ctx.obj
    left_value = parse_value(left)
    right_value = parse_value(right)

    try:
        equivalent = hasher.equivalent(left_value, right_value)
        left_hash = hasher.hash(left_value)
        right_hash = hasher.hash(right_value)
    except ComparisonError as e:
        raise click.ClickException(str(e)) from e

    if equivalent:
        console.print("[green]✓ equivalent[/green]")
    else:
        console.print("[red]✗ not equivalent[/red]")
    console.print(f"left hash:  {left_hash}")
    console.print(f"right hash: {right_hash}")

    if not equivalent:
        ctx.exit(1)


if __name__ == "__main__":
    main()
