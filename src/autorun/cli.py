"""
autorun CLI - inspect and manage the autorun directory.

Usage:
    autorun --help
    autorun base
    autorun ls scripts
    autorun mkdir plugins/my_plugin
"""

import logging
import sys

import click

from . import fs
from .exceptions import EnvironmentResolutionError
from .utils import init_logging


def _fatal(error: EnvironmentResolutionError) -> None:
    click.echo(f"Fatal: {error}", err=True)
    if error.suggestion:
        click.echo(f"Hint: {error.suggestion}", err=True)
    sys.exit(2)


def _fail(error: OSError) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


class _AutorunGroup(click.Group):
    """Group that turns environment resolution failures into a clean exit."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except EnvironmentResolutionError as e:
            _fatal(e)


@click.group(cls=_AutorunGroup)
@click.version_option(package_name="autorun")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Manage files under the autorun directory.

    All paths are relative to the autorun root (normally ~/autorun).
    """
    init_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
def home():
    """Print the resolved home directory."""
    click.echo(str(fs.home_dir()))


@main.command("base")
def base_cmd():
    """Print the autorun root directory."""
    click.echo(str(fs.base()))


@main.command("ls")
@click.argument("directory", default=".")
def ls(directory: str):
    """List entries of DIRECTORY, one root-relative path per line."""
    try:
        entries = fs.list_dir(directory)
    except OSError as e:
        _fail(e)
    for entry in entries:
        suffix = "/" if fs.in_autorun(entry).is_dir() else ""
        click.echo(f"{entry.as_posix()}{suffix}")


@main.command()
@click.argument("file")
def cat(file: str):
    """Print the contents of FILE."""
    try:
        click.echo(fs.read_to_string(file), nl=False)
    except OSError as e:
        _fail(e)


@main.command()
@click.argument("directory")
def mkdir(directory: str):
    """Create DIRECTORY (its parent must exist)."""
    try:
        fs.create_dir(fs.FSPath(directory))
    except OSError as e:
        _fail(e)


@main.command()
@click.argument("file")
def touch(file: str):
    """Create FILE, truncating it if it exists."""
    try:
        fs.create_file(fs.FSPath(file)).close()
    except OSError as e:
        _fail(e)


@main.command()
@click.argument("directory")
@click.confirmation_option(prompt="Remove the directory and everything in it?")
def rmdir(directory: str):
    """Recursively remove DIRECTORY."""
    try:
        fs.remove_dir(fs.FSPath(directory))
    except OSError as e:
        _fail(e)


if __name__ == "__main__":
    main()
