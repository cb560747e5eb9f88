# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/13 00:48:19
# @Author : Kariko Lin

"""Command-line interface for cfgparser.

Commands:
- `show`: parse a cfg file and pretty-print its sections.
- `check`: validate a cfg file, pointing at the first grammar failure.
- `convert`: translate between cfg, JSON and YAML files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from .errors import CfgError, CfgParseError
from .formats import HANDLERS, from_path, get_handler
from .model import Config

app = typer.Typer(
    name='cfgparser',
    no_args_is_help=True,
    help='Parse, check and convert cfg files.',
)

EncodingOption = Annotated[
    str | None,
    typer.Option(
        '--encoding', '-e',
        help='Source text encoding, guessed when it fails.'),
]


def _exit_with_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    typer.secho(f'{command_name} failed: {exc}', fg=typer.colors.RED, err=True)
    if isinstance(exc, CfgParseError):
        line = exc.doc.split('\n')[exc.lineno - 1]
        typer.secho(
            f'  kind: {exc.kind.value}', fg=typer.colors.YELLOW, err=True)
        typer.echo(f'  {line}', err=True)
        typer.echo('  ' + ' ' * (exc.colno - 1) + '^', err=True)
    raise typer.Exit(code=1) from exc


def _echo_config(config: Config) -> None:
    """Print sections in declaration order, pairs indented below their header."""

    for section in config.sections():
        typer.secho(str(section), bold=True)
        width = max(len(key) for key in section) if section else 0
        for key, value in section.items():
            typer.echo(f'  {key.ljust(width)} = {value}')


@app.callback()
def _configure(
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Show debug logging.')
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s',
    )


@app.command('show')
def show_command(
    path: Annotated[Path, typer.Argument(help='cfg file to parse.')],
    encoding: EncodingOption = None,
) -> None:
    """Parse a cfg file and print every section."""

    try:
        config = from_path(path, encoding)
    except CfgError as exc:
        _exit_with_error('show', exc)
    _echo_config(config)


@app.command('check')
def check_command(
    path: Annotated[Path, typer.Argument(help='cfg file to validate.')],
    encoding: EncodingOption = None,
) -> None:
    """Validate a cfg file without printing its contents."""

    try:
        config = from_path(path, encoding)
    except CfgError as exc:
        _exit_with_error('check', exc)
    pairs = sum(len(section) for section in config.sections())
    typer.secho(
        f'{path}: OK, {len(config)} section(s), {pairs} pair(s).',
        fg=typer.colors.GREEN,
    )


_FORMATS = ', '.join(HANDLERS)


@app.command('convert')
def convert_command(
    source: Annotated[Path, typer.Argument(help='File to read.')],
    target: Annotated[Path, typer.Argument(help='File to write.')],
    from_format: Annotated[
        str | None,
        typer.Option(
            '--from',
            help=f'Source format ({_FORMATS}), by extension otherwise.'),
    ] = None,
    to_format: Annotated[
        str | None,
        typer.Option(
            '--to',
            help=f'Target format ({_FORMATS}), by extension otherwise.'),
    ] = None,
    encoding: EncodingOption = None,
) -> None:
    """Convert between cfg, JSON and YAML."""

    try:
        config = get_handler(source, from_format, encoding).read()
        get_handler(target, to_format).write(config)
    except (CfgError, OSError) as exc:
        _exit_with_error('convert', exc)
    typer.echo(f'{source} -> {target}: {len(config)} section(s).')


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == '__main__':
    main()
