"""aoc-input CLI entrypoint."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from aocinput.config import FIRST_DAY, INPUT_DIR_ENV, LAST_DAY, default_input_dir
from aocinput.reader import InputError, InputSource
from aocinput.renderer.scaffold_renderer import SHAPES, ScaffoldRenderer
from aocinput.runner import SolutionNotFound, run_day

DAY = click.IntRange(1, 25)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--input-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=INPUT_DIR_ENV,
    default=None,
    help=f"Directory holding dayNN.txt files [env: {INPUT_DIR_ENV}; default: ./input]",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, input_dir: Path | None, verbose: bool) -> None:
    """Read and inspect Advent of Code puzzle input, and run day solutions."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = input_dir or default_input_dir()


@main.command()
@click.argument("day", type=DAY)
@click.option(
    "--solutions-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory holding dayNN.py solution modules",
)
@click.pass_obj
def run(input_dir: Path, day: int, solutions_dir: Path) -> None:
    """Run the solution for DAY."""
    try:
        with _input_dir_env(input_dir):
            run_day(day, solutions_dir)
    except (InputError, SolutionNotFound) as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("identifier")
@click.pass_obj
def inspect(input_dir: Path, identifier: str) -> None:
    """Summarize the lines and blocks of an input file (a day number or file stem)."""
    key = _input_key(identifier)
    try:
        with InputSource.open(key, input_dir) as source:
            name = source.name
            lines = source.read_lines()
        with InputSource.open(key, input_dir) as source:
            sizes = [len(block) for block in source.blocks()]
    except (InputError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{name}: {len(lines)} lines, {len(sizes)} blocks")
    if len(sizes) > 1:
        click.echo("block sizes: " + " ".join(str(size) for size in sizes))
    if lines:
        widths = {len(line) for line in lines}
        click.echo(f"line width: {min(widths)}..{max(widths)}")


@main.command()
@click.argument("day", type=DAY)
@click.option(
    "--shape",
    type=click.Choice(SHAPES, case_sensitive=False),
    default="lines",
    show_default=True,
    help="How the skeleton reads its input",
)
@click.option(
    "--solutions-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write dayNN.py into",
)
@click.option("--force", is_flag=True, help="Overwrite an existing solution module")
def new(day: int, shape: str, solutions_dir: Path, force: bool) -> None:
    """Write a solution skeleton for DAY."""
    try:
        target = ScaffoldRenderer().write(day, solutions_dir, shape=shape.lower(), force=force)
    except FileExistsError as exc:
        raise click.ClickException(f"{exc}; use --force to overwrite") from exc

    click.echo(f"Created: {target}")


def _input_key(identifier: str) -> int | str:
    # Day numbers outside 1..25 are file stems, e.g. "2021" for 2021.txt.
    if identifier.isdecimal() and FIRST_DAY <= int(identifier) <= LAST_DAY:
        return int(identifier)
    return identifier


@contextmanager
def _input_dir_env(input_dir: Path) -> Iterator[None]:
    # Solutions call InputSource.day(n) without a directory, so they resolve
    # through the environment.
    previous = os.environ.get(INPUT_DIR_ENV)
    os.environ[INPUT_DIR_ENV] = str(input_dir)
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop(INPUT_DIR_ENV, None)
        else:
            os.environ[INPUT_DIR_ENV] = previous


if __name__ == "__main__":  # pragma: no cover
    main()
