"""
Descriptor extraction operations.

Reads metadata from single font files, collections, and directories.
"""

from pathlib import Path

from font_descriptor.core.descriptor import FontDescriptor
from font_descriptor.core.font_io import (
    FontCollection,
    iter_font_files,
    open_font_file,
    resolve_font_path,
)
from font_descriptor.utils.logging import logger


def create_from_path(filepath: str) -> FontDescriptor | list[FontDescriptor]:
    """
    Extract descriptors from a font file.

    A collection (.ttc/.otc) gives a list with one descriptor per font in
    file order; any other font gives a single descriptor, not wrapped.

    Args:
        filepath: Relative or absolute path to the font file

    Returns:
        FontDescriptor or list of FontDescriptor

    Raises:
        TypeError: If filepath is not a str
        FileNotFoundError: If the file does not exist
    """
    fixed_path = resolve_font_path(filepath)

    with open_font_file(fixed_path) as parsed:
        if isinstance(parsed, FontCollection):
            return [FontDescriptor.from_font(font, fixed_path) for font in parsed.fonts]
        return FontDescriptor.from_font(parsed.font, fixed_path)


def as_list(
    result: FontDescriptor | list[FontDescriptor],
) -> list[FontDescriptor]:
    """Flatten a create_from_path result into a list."""
    if isinstance(result, FontDescriptor):
        return [result]
    return list(result)


def extract_directory(
    directory: Path,
    *,
    recursive: bool = False,
) -> list[FontDescriptor]:
    """
    Extract descriptors from every font file in a directory.

    Collections contribute one entry per contained font.

    Args:
        directory: Directory containing fonts
        recursive: Whether to descend into subdirectories

    Returns:
        Descriptors in path order
    """
    descriptors = []
    for font_path in iter_font_files(directory, recursive=recursive):
        descriptors.extend(as_list(create_from_path(str(font_path))))

    logger.debug(f"Extracted {len(descriptors)} descriptors from {directory}")
    return descriptors
