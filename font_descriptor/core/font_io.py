"""
Font I/O utilities for resolving, opening, and traversing font files.
"""

import errno
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTCollection, TTFont
from fontTools.ttLib.macUtils import getSFNTResIndices

from font_descriptor.config.defaults import (
    COLLECTION_TAG,
    FONT_FILE_PATTERNS,
    RESOURCE_FORK_TAG,
)
from font_descriptor.utils.logging import logger


@dataclass(frozen=True)
class SingleFont:
    """A file holding one font program."""

    font: TTFont


@dataclass(frozen=True)
class FontCollection:
    """A TTC/OTC container or .dfont suitcase; fonts are kept in file order."""

    fonts: tuple[TTFont, ...]


ParsedFont = SingleFont | FontCollection


def resolve_font_path(filepath: str) -> str:
    """
    Resolve a font path against the current working directory.

    Args:
        filepath: Relative or absolute path

    Returns:
        Absolute, normalized path

    Raises:
        TypeError: If filepath is not a str
        FileNotFoundError: If nothing exists at the resolved path
    """
    if not isinstance(filepath, str):
        raise TypeError(
            f"filepath must be `str`, found '{type(filepath).__name__}'"
        )

    fixed_path = os.path.abspath(filepath)
    if not os.path.exists(fixed_path):
        raise FileNotFoundError(
            errno.ENOENT, f"{fixed_path} does not exist", fixed_path
        )
    return fixed_path


def read_header_tag(path: str) -> bytes:
    """Read the first four bytes of a file."""
    with open(path, "rb") as f:
        return f.read(4)


def resource_fork_indices(path: str, tag: bytes | None = None) -> list[int]:
    """
    List the sfnt resources of a Mac font suitcase (.dfont).

    Args:
        path: Absolute path to a font file
        tag: Header tag if already read

    Returns:
        1-based resource indices, empty if the file is not a suitcase
    """
    if tag is None:
        tag = read_header_tag(path)
    if tag != RESOURCE_FORK_TAG:
        return []
    return getSFNTResIndices(path)


@contextmanager
def open_font_file(path: str) -> Iterator[ParsedFont]:
    """
    Context manager opening a font file with fontTools.

    Parse errors raised by fontTools are not caught.

    Args:
        path: Absolute path to a font file

    Yields:
        SingleFont or FontCollection
    """
    tag = read_header_tag(path)
    resource_indices = resource_fork_indices(path, tag)

    if tag == COLLECTION_TAG:
        collection = TTCollection(path)
        try:
            logger.debug(f"Opened collection {path} ({len(collection.fonts)} fonts)")
            yield FontCollection(tuple(collection.fonts))
        finally:
            collection.close()
    elif resource_indices:
        fonts = tuple(TTFont(path, res_name_or_index=i) for i in resource_indices)
        try:
            logger.debug(f"Opened suitcase {path} ({len(fonts)} fonts)")
            yield FontCollection(fonts)
        finally:
            for font in fonts:
                font.close()
    else:
        font = TTFont(path)
        try:
            logger.debug(f"Opened font {path}")
            yield SingleFont(font)
        finally:
            font.close()


def iter_font_files(
    directory: Path,
    patterns: tuple[str, ...] = FONT_FILE_PATTERNS,
    exclude_patterns: list[str] | None = None,
    *,
    recursive: bool = False,
) -> Iterator[Path]:
    """
    Iterate over font files matching any pattern, sorted by path.

    Args:
        directory: Directory to search
        patterns: Glob patterns to match
        exclude_patterns: Substrings to exclude from filenames
        recursive: Whether to descend into subdirectories

    Yields:
        Paths to matching font files
    """
    glob = directory.rglob if recursive else directory.glob
    fonts = sorted({f for pattern in patterns for f in glob(pattern) if f.is_file()})
    if exclude_patterns:
        fonts = [f for f in fonts if not any(p in f.name for p in exclude_patterns)]
    return iter(fonts)
