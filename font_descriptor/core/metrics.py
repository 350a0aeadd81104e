"""
OS/2 and post table readers.

Tables may be missing entirely; defaults are applied in resolve_metrics only.
"""

from dataclasses import dataclass

from fontTools.ttLib import TTFont

from font_descriptor.config.defaults import (
    DEFAULT_ITALIC,
    DEFAULT_WEIGHT,
    DEFAULT_WIDTH,
    FS_SELECTION_ITALIC,
)


@dataclass(frozen=True)
class OS2Metrics:
    """Fields read from an OS/2 table."""

    width_class: int
    weight_class: int
    italic: bool = DEFAULT_ITALIC


def read_os2_metrics(font: TTFont) -> OS2Metrics | None:
    """
    Read width, weight, and italic flag from the OS/2 table.

    Values are copied as stored; usWeightClass of 0 or 1200 is not rejected.

    Args:
        font: TTFont instance

    Returns:
        OS2Metrics, or None if the font has no OS/2 table
    """
    if "OS/2" not in font:
        return None

    os2 = font["OS/2"]
    fs_selection = getattr(os2, "fsSelection", None)
    italic = (
        bool(fs_selection & FS_SELECTION_ITALIC)
        if fs_selection is not None
        else DEFAULT_ITALIC
    )
    return OS2Metrics(
        width_class=os2.usWidthClass,
        weight_class=os2.usWeightClass,
        italic=italic,
    )


def resolve_metrics(metrics: OS2Metrics | None) -> OS2Metrics:
    """Fill in defaults for a font without an OS/2 table."""
    if metrics is None:
        return OS2Metrics(DEFAULT_WIDTH, DEFAULT_WEIGHT, DEFAULT_ITALIC)
    return metrics


def read_fixed_pitch(font: TTFont) -> int | None:
    """Return post.isFixedPitch, or None if the font has no post table."""
    if "post" not in font:
        return None
    return getattr(font["post"], "isFixedPitch", None)


def is_monospace(fixed_pitch: int | None) -> bool:
    """Anything but an explicit 0 counts as monospace."""
    return fixed_pitch != 0
