"""
Command-line interface for seqext.

A thin shell over the library: items are plain strings given on the command
line and sets are comma-separated lists. Defaults not given on the command
line come from the YAML configuration (see ``seqext.config``).
"""

import logging
import re
from pathlib import Path
from typing import List, Sequence

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ConfigManager, SeqextConfig, create_default_config_file
from .core import chunk, init, partition, slice_sequence, tail
from .errors import SequenceError
from .similarity import jaccard_index, jaccard_scores
from .types import OnEmpty
from .utils.logging_setup import log_operation, setup_logging


console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _split_set(value: str) -> List[str]:
    """Parse a comma-separated set, dropping blank members."""
    return [member.strip() for member in value.split(",") if member.strip()]


def _fail(ctx: click.Context, error: SequenceError) -> None:
    err_console.print(f"[red]✗ {escape(error.message)}[/red]")
    logger.debug("command failed", extra={'extra_fields': error.details})
    ctx.exit(1)


def _policy(ctx: click.Context, strict: bool) -> OnEmpty:
    return OnEmpty.THROW if strict else ctx.obj["config"].policy


def _load_config(ctx: click.Context, manager: ConfigManager) -> SeqextConfig:
    try:
        config = manager.load()
    except (ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        ctx.exit(1)
    return config


@click.group(name="seqext")
@click.version_option(__version__, prog_name="seqext")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Also write JSON-lines logs to this directory"
)
@click.pass_context
def cli(ctx, config_path, verbose, log_dir):
    """Sequence transforms and Jaccard similarity ranking."""
    manager = ConfigManager(Path(config_path) if config_path else None)
    config = None
    level = "DEBUG" if verbose else "WARNING"

    # The config commands must work on a file that does not validate
    if ctx.invoked_subcommand != "config":
        config = _load_config(ctx, manager)
        problems = config.validate()
        if problems:
            for problem in problems:
                err_console.print(f"[red]✗ {escape(problem)}[/red]")
            ctx.exit(1)
        if not verbose:
            level = config.log_level

    setup_logging("seqext", level=level, log_dir=log_dir, file=log_dir is not None)
    ctx.obj = {"manager": manager, "config": config}


@cli.command(name="slice")
@click.argument("items", nargs=-1)
@click.option("--start", type=int, default=0, show_default=True, help="Inclusive start index (never negative)")
@click.option("--end", type=int, help="Exclusive end index; negative counts from the tail")
@click.pass_context
def slice_command(ctx, items, start, end):
    """Print the ITEMS in the window [START, END)."""
    log_operation(logger, "slice", start=start, end=end)
    items = list(items)
    window_end = len(items) if end is None else end
    try:
        result = slice_sequence(items, start, window_end)
    except SequenceError as e:
        _fail(ctx, e)
    click.echo(" ".join(result))


@cli.command(name="init")
@click.argument("items", nargs=-1)
@click.option("--strict", is_flag=True, help="Fail on an empty input instead of printing nothing")
@click.pass_context
def init_command(ctx, items, strict):
    """Print every item except the last one."""
    try:
        result = init(list(items), _policy(ctx, strict))
    except SequenceError as e:
        _fail(ctx, e)
    click.echo(" ".join(result))


@cli.command(name="tail")
@click.argument("items", nargs=-1)
@click.option("--strict", is_flag=True, help="Fail on an empty input instead of printing nothing")
@click.pass_context
def tail_command(ctx, items, strict):
    """Print every item except the first one."""
    try:
        result = tail(list(items), _policy(ctx, strict))
    except SequenceError as e:
        _fail(ctx, e)
    click.echo(" ".join(result))


@cli.command(name="chunk")
@click.argument("items", nargs=-1)
@click.option("--size", type=int, help="Items per chunk (default from config)")
@click.option("--strict", is_flag=True, help="Fail on an empty input instead of printing nothing")
@click.pass_context
def chunk_command(ctx, items, size, strict):
    """Print ITEMS in groups of SIZE, one group per line."""
    size = ctx.obj["config"].chunk_size if size is None else size
    log_operation(logger, "chunk", size=size)
    try:
        groups = chunk(list(items), size, _policy(ctx, strict))
    except SequenceError as e:
        _fail(ctx, e)
    for group in groups:
        click.echo(" ".join(group))


@cli.command(name="partition")
@click.argument("items", nargs=-1)
@click.option("--pattern", required=True, help="Regular expression an item must match to pass")
@click.option("--strict", is_flag=True, help="Fail on an empty input instead of printing nothing")
@click.pass_context
def partition_command(ctx, items, pattern, strict):
    """Split ITEMS into those matching PATTERN and the rest."""
    try:
        matcher = re.compile(pattern)
    except re.error as e:
        raise click.BadParameter(str(e), param_hint="--pattern")
    try:
        result = partition(list(items), lambda item: matcher.search(item) is not None, _policy(ctx, strict))
    except SequenceError as e:
        _fail(ctx, e)
    click.echo(f"passed: {' '.join(result.passed)}")
    click.echo(f"failed: {' '.join(result.failed)}")


@cli.command(name="jaccard")
@click.option("--source", required=True, help="Comma-separated reference set")
@click.option("--compare", "compare_to", required=True, help="Comma-separated set to compare against")
@click.pass_context
def jaccard_command(ctx, source, compare_to):
    """Print the Jaccard coefficient of two sets."""
    precision = ctx.obj["config"].score_precision
    try:
        value = jaccard_index(_split_set(source), _split_set(compare_to))
    except SequenceError as e:
        _fail(ctx, e)
    click.echo(f"{value:.{precision}f}")


def _render_ranking(candidates: Sequence[List[str]], scores, precision: int) -> Table:
    table = Table(title="Jaccard ranking")
    table.add_column("Rank", justify="right")
    table.add_column("Input #", justify="right")
    table.add_column("Coefficient", justify="right")
    table.add_column("Members")
    for rank, score in enumerate(scores, start=1):
        table.add_row(
            str(rank),
            str(score.source_index),
            f"{score.value:.{precision}f}",
            escape(", ".join(candidates[score.source_index])),
        )
    return table


@cli.command(name="rank")
@click.option("--source", required=True, help="Comma-separated reference set")
@click.argument("candidates", nargs=-1, required=True)
@click.pass_context
def rank_command(ctx, source, candidates):
    """Rank comma-separated CANDIDATES by similarity to SOURCE."""
    log_operation(logger, "rank", candidates=len(candidates))
    parsed = [_split_set(candidate) for candidate in candidates]
    try:
        scores = jaccard_scores(_split_set(source), parsed)
    except SequenceError as e:
        _fail(ctx, e)
    console.print(_render_ranking(parsed, scores, ctx.obj["config"].score_precision))


@cli.group(name="config")
def config_group():
    """Manage seqext configuration."""
    pass


@config_group.command(name="init")
@click.option(
    "--path",
    type=click.Path(dir_okay=False),
    help="Path for config file (default: the --config path or .seqext.yml)"
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def config_init(ctx, path, force):
    """Initialize a configuration file with defaults."""
    config_path = Path(path) if path else ctx.obj["manager"].config_path

    if config_path.exists() and not force:
        if not click.confirm(f"Config file {config_path} already exists. Overwrite?"):
            console.print("[yellow]Aborted[/yellow]")
            return

    if create_default_config_file(config_path):
        console.print(f"[green]✓ Created config file at {config_path}[/green]")
    else:
        console.print("[red]✗ Failed to create config file[/red]")
        raise SystemExit(1)


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display the effective configuration and any problems in it."""
    manager = ctx.obj["manager"]
    config = _load_config(ctx, manager)
    manager.display(config, console=console)
    for problem in config.validate():
        err_console.print(f"[yellow]⚠ {escape(problem)}[/yellow]")


def main():
    """Console script entry point."""
    cli(prog_name="seqext")


if __name__ == "__main__":
    main()
