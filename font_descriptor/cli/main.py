"""
Main CLI entry point for font-descriptor.
"""

import json
import logging
import sys
from pathlib import Path

import click

from font_descriptor import __version__
from font_descriptor.core.descriptor import FontDescriptor
from font_descriptor.utils.logging import logger


def echo_descriptors(descriptors: list[FontDescriptor], as_json: bool) -> None:
    """Print descriptors as text lines or a JSON array."""
    if as_json:
        click.echo(json.dumps([d.to_dict() for d in descriptors], indent=2))
        return

    for d in descriptors:
        flags = [name for name, on in (("italic", d.italic), ("mono", d.monospace)) if on]
        click.echo(
            f"{d.path}\t{d.family}\t{d.style}\t{d.postscript_name}"
            f"\twght={d.weight}\twdth={d.width}"
            + (f"\t{','.join(flags)}" if flags else "")
        )


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Read font metadata (family, style, weight, width, flags)."""
    if verbose:
        logger.setLevel(logging.DEBUG)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=str)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array.")
def show(paths, as_json):
    """Describe one or more font files."""
    from font_descriptor.operations.extract import as_list, create_from_path

    descriptors = []
    for path in paths:
        try:
            descriptors.extend(as_list(create_from_path(path)))
        except FileNotFoundError as e:
            logger.error(f"Font file not found: {e.filename}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Failed to read font {path}: {e}")
            sys.exit(1)

    echo_descriptors(descriptors, as_json)


@cli.command()
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("-r", "--recursive", is_flag=True, help="Descend into subdirectories.")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array.")
def scan(directory, recursive, as_json):
    """Describe every font file in a directory."""
    from font_descriptor.core.font_io import iter_font_files
    from font_descriptor.operations.extract import as_list, create_from_path

    descriptors = []
    failed = 0
    for font_path in iter_font_files(directory, recursive=recursive):
        try:
            descriptors.extend(as_list(create_from_path(str(font_path))))
        except Exception as e:
            logger.error(f"Failed to read font {font_path}: {e}")
            failed += 1

    if not descriptors and not failed:
        logger.warning(f"No font files found in {directory}/")

    echo_descriptors(descriptors, as_json)

    if failed:
        logger.error(f"{failed} font file(s) could not be read")
        sys.exit(1)


if __name__ == "__main__":
    cli()
