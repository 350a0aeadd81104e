"""
Font descriptor value record.
"""

from dataclasses import dataclass
from typing import Any

from fontTools.ttLib import TTFont

from font_descriptor.config.defaults import (
    DEFAULT_ITALIC,
    DEFAULT_STYLE,
    DEFAULT_WEIGHT,
    DEFAULT_WIDTH,
    NAME_ID_FAMILY,
    NAME_ID_POSTSCRIPT,
    NAME_ID_SUBFAMILY,
)
from font_descriptor.core.metrics import (
    is_monospace,
    read_fixed_pitch,
    read_os2_metrics,
    resolve_metrics,
)
from font_descriptor.core.naming import fix_incorrect_string, read_name


@dataclass(frozen=True)
class FontDescriptor:
    """
    Metadata of one font program.

    A collection file yields one descriptor per font, all sharing ``path``.
    """

    path: str
    family: str
    postscript_name: str
    style: str = DEFAULT_STYLE
    width: int = DEFAULT_WIDTH
    weight: int = DEFAULT_WEIGHT
    italic: bool = DEFAULT_ITALIC
    monospace: bool = True

    @classmethod
    def from_font(cls, font: TTFont, path: str) -> "FontDescriptor":
        """
        Build a descriptor from an open font.

        Args:
            font: TTFont instance
            path: Absolute path of the file the font was read from

        Returns:
            FontDescriptor
        """
        family = read_name(font, NAME_ID_FAMILY)
        postscript_name = read_name(font, NAME_ID_POSTSCRIPT)
        style = read_name(font, NAME_ID_SUBFAMILY)
        metrics = resolve_metrics(read_os2_metrics(font))

        return cls(
            path=path,
            family=fix_incorrect_string(family) if family is not None else "",
            postscript_name=(
                fix_incorrect_string(postscript_name)
                if postscript_name is not None
                else ""
            ),
            style=fix_incorrect_string(style) if style is not None else DEFAULT_STYLE,
            width=metrics.width_class,
            weight=metrics.weight_class,
            italic=metrics.italic,
            monospace=is_monospace(read_fixed_pitch(font)),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping of the descriptor."""
        return {
            "path": self.path,
            "family": self.family,
            "postscriptName": self.postscript_name,
            "style": self.style,
            "width": self.width,
            "weight": self.weight,
            "italic": self.italic,
            "monospace": self.monospace,
        }

    def __str__(self) -> str:
        return f"{self.family} {self.style} ({self.postscript_name})"
