# SPDX-License-Identifier: MIT
"""Command line interface for parsing and comparing rpm versions."""

from __future__ import annotations

import json

import click

from . import __version__
from .compare import version_key
from .evr import compare_rpm_versions
from .vercmp import rpmvercmp
from .version import ValidationFailure, parse_version


def echo_info(message: str) -> None:
    click.echo(message)


def echo_success(message: str) -> None:
    click.secho(message, fg="green")


def echo_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


@click.group()
@click.version_option(__version__, prog_name="rpm-version")
def cli() -> None:
    """Parse and compare rpm version identifiers."""


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the fields as JSON.")
def parse(version: str, as_json: bool) -> None:
    """Parse VERSION and print its epoch, upstream version and revision.

    \b
    Examples:
        rpm-version parse 1:2.0-3.el7
        rpm-version parse 2.0 --json
    """
    try:
        parsed = parse_version(version)
    except ValidationFailure as e:
        echo_error(e.message)
        raise SystemExit(1)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "epoch": parsed.epoch,
                    "upstream_version": parsed.upstream_version,
                    "revision": parsed.revision,
                }
            )
        )
        return

    echo_info(f"Epoch: {parsed.epoch}")
    echo_info(f"Upstream version: {parsed.upstream_version}")
    echo_info(f"Revision: {parsed.revision if parsed.revision is not None else '(none)'}")


@cli.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--evr/--segments",
    default=False,
    help="Compare as [epoch:]version[-release] strings instead of single fields.",
)
def compare(first: str, second: str, evr: bool) -> None:
    """Print -1, 0 or 1 as FIRST is older than, equal to or newer than SECOND.

    By default FIRST and SECOND are compared with rpmvercmp as single fields.
    With --evr the release of SECOND is ignored when FIRST has none.

    \b
    Examples:
        rpm-version compare 1.0~rc1 1.0          # -1
        rpm-version compare --evr 1.0 1.0-5.el7  # 0
    """
    if evr:
        rc = compare_rpm_versions(second, first)
    else:
        rc = rpmvercmp(first, second)
    click.echo(str(rc))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print the newest version first.")
def sort_versions(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered from oldest to newest."""
    try:
        ordered = sorted(versions, key=version_key, reverse=reverse)
    except ValidationFailure as e:
        echo_error(e.message)
        raise SystemExit(1)

    for version in ordered:
        echo_info(version)


def main() -> None:
    cli()
