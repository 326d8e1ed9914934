"""CLI interface for statscan."""

from __future__ import annotations

import asyncio
import json
import logging
import re
import sys

import click


def _run(coro):
    """Run an async coroutine synchronously."""
    return asyncio.run(coro)


def _jsonable(value):
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


@click.command()
@click.version_option(package_name="statscan")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--filter", "-f", "substring", default=None, help="Keep paths containing TEXT.")
@click.option("--regex", "-r", default=None, help="Keep paths matching PATTERN.")
@click.option("--no-recursive", is_flag=True, help="Do not descend into subdirectories.")
@click.option("--list-of", "-l", default="path", show_default=True, help="Entry field to print.")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON.")
@click.option("--blocking", is_flag=True, help="Use the blocking scanner instead of asyncio.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(
    paths: tuple[str, ...],
    substring: str | None,
    regex: str | None,
    no_recursive: bool,
    list_of: str,
    json_output: bool,
    blocking: bool,
    verbose: bool,
) -> None:
    """statscan — list filesystem entries under PATHS (default: current directory)."""
    from .core import Scanner
    from .errors import ScanError
    from .options import ScanOptions

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if substring is not None and regex is not None:
        raise click.UsageError("--filter and --regex are mutually exclusive.")
    if regex is not None:
        try:
            flt = re.compile(regex)
        except re.error as exc:
            raise click.BadParameter(str(exc), param_hint="--regex") from exc
    else:
        flt = substring if substring is not None else True

    options = ScanOptions(filter=flt, recursive=not no_recursive, list_of=list_of)
    scanner = Scanner()
    try:
        if blocking:
            results = scanner.scan_sync(list(paths), options)
        else:
            results = _run(scanner.scan(list(paths), options))
    except ScanError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps([_jsonable(v) for v in results], indent=2, ensure_ascii=False))
    else:
        for value in results:
            click.echo(value)
