# main.py
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from smartignore.config import VERSION, load_settings
from smartignore.detector import detection_table
from smartignore.errors import SmartIgnoreError
from smartignore.fetcher import filter_valid_stacks
from smartignore.generator import generate_ignore_file
from smartignore.models import FetchTier, WriteMode

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_MODE_MESSAGES = {
    WriteMode.CREATED: ".gitignore created",
    WriteMode.OVERWRITTEN: ".gitignore overwritten",
    WriteMode.MERGED: ".gitignore updated with new rules",
    WriteMode.UNCHANGED: ".gitignore already up to date",
}


def _print_detection_table():
    for marker, stacks in detection_table():
        click.echo(f"{marker:<22} {', '.join(stacks)}")


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False), default='.')
@click.option("-f", "--force", is_flag=True,
              help="Overwrite an existing .gitignore instead of merging into it.")
@click.option("-v", "--verbose", is_flag=True,
              help="Show detection and fetch details.")
@click.option("-n", "--dry-run", is_flag=True,
              help="Print the resulting .gitignore instead of writing it.")
@click.option("--templates-dir", type=click.Path(file_okay=False), default=None,
              help="Directory with local <stack>.gitignore templates.")
@click.option("--list-stacks", is_flag=True,
              help="Print the marker files used for detection and exit.")
@click.version_option(VERSION, prog_name="smart-gitignore")
@click.pass_context
def cli(ctx, path, force, verbose, dry_run, templates_dir, list_stacks):
    """
    Generates a .gitignore for PATH from the technology stacks found in it.

    Templates come from github/gitignore, then gitignore.io, then local
    templates. An existing .gitignore is merged: your rules stay, new ones
    are appended.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

    if list_stacks:
        _print_detection_table()
        return

    root = Path(path).resolve()
    try:
        settings = load_settings(templates_dir)
    except ValidationError as e:
        click.secho(f"Error: invalid configuration: {e}", fg="red", err=True)
        ctx.exit(1)

    try:
        report = generate_ignore_file(root, force, settings=settings, dry_run=dry_run)
    except SmartIgnoreError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        ctx.exit(1)

    if report.stacks:
        click.secho(f"Detected stacks: {', '.join(report.stacks)}", err=True)
        if verbose:
            dropped = sorted(set(report.stacks) - set(filter_valid_stacks(report.stacks)))
            if dropped:
                click.echo(f"Not known to gitignore.io: {', '.join(dropped)}", err=True)
    else:
        click.secho("No stack detected, using the default template.", fg="yellow", err=True)

    if report.tier == FetchTier.LOCAL_FALLBACK:
        click.secho("Remote templates unavailable, used a local template.", fg="yellow", err=True)
    elif verbose:
        click.echo(f"Templates from: {report.tier}", err=True)

    if dry_run:
        click.echo(report.content, nl=False)
        return

    click.secho(_MODE_MESSAGES[WriteMode(report.mode)], fg="green", err=True)
    if verbose and report.written:
        click.echo(f"Saved to {report.path}", err=True)


if __name__ == "__main__":
    cli()
