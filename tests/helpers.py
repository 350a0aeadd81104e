"""Helpers for building test fonts."""

import struct
from io import BytesIO
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont


def build_font(
    family: str | None = "Test Sans",
    style: str | None = "Regular",
    postscript_name: str | None = "TestSans-Regular",
    *,
    os2: dict | None = None,
    fixed_pitch: int | None = 0,
) -> TTFont:
    """
    Build a minimal TrueType font in memory.

    Args:
        family: nameID 1, omitted if None
        style: nameID 2, omitted if None
        postscript_name: nameID 6, omitted if None
        os2: OS/2 values; the table is omitted if None
        fixed_pitch: post.isFixedPitch; the table is omitted if None
    """
    fb = FontBuilder(unitsPerEm=1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space"])
    fb.setupCharacterMap({0x20: "space"})
    fb.setupGlyf({".notdef": TTGlyphPen(None).glyph(), "space": TTGlyphPen(None).glyph()})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "space": (500, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)

    names = {}
    if family is not None:
        names["familyName"] = family
    if style is not None:
        names["styleName"] = style
    if postscript_name is not None:
        names["psName"] = postscript_name
    fb.setupNameTable(names)

    if os2 is not None:
        fb.setupOS2(**os2)
    if fixed_pitch is not None:
        fb.setupPost(isFixedPitch=fixed_pitch)

    return fb.font


def save_font(font: TTFont, path: Path) -> Path:
    """Save a font and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    font.save(path)
    return path


def font_bytes(font: TTFont) -> bytes:
    """Compile a font to bytes."""
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def save_suitcase(fonts: list[TTFont], path: Path) -> Path:
    """
    Write fonts as 'sfnt' resources of a data-fork suitcase (.dfont).

    Layout: 16-byte header padded to 256, resource data, then a resource
    map with a single 'sfnt' type and unnamed references.
    """
    data = b""
    offsets = []
    for font in fonts:
        blob = font_bytes(font)
        offsets.append(len(data))
        data += struct.pack(">L", len(blob)) + blob

    type_list_offset = 28
    ref_list_offset = 2 + 8
    name_list_offset = type_list_offset + ref_list_offset + 12 * len(fonts)

    resource_map = bytes(22)
    resource_map += struct.pack(">HHH", 0, type_list_offset, name_list_offset)
    resource_map += struct.pack(">H", 0)
    resource_map += struct.pack(">4sHH", b"sfnt", len(fonts) - 1, ref_list_offset)
    for i, offset in enumerate(offsets):
        resource_map += struct.pack(
            ">hhB3sL", 128 + i, -1, 0, offset.to_bytes(3, "big"), 0
        )

    data_offset = 256
    map_offset = data_offset + len(data)
    header = struct.pack(">LLLL", data_offset, map_offset, len(data), len(resource_map))

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(header.ljust(data_offset, b"\x00") + data + resource_map)
    return path
