"""
Name table lookup and string cleanup.
"""

from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._n_a_m_e import NameRecord

from font_descriptor.config.defaults import PREFERRED_NAME_PLATFORMS


def fix_incorrect_string(value: str | bytes) -> str:
    """
    Clean a name string that may arrive as a raw byte buffer.

    Zero bytes are dropped and every remaining byte is decoded on its own,
    so b"\\x00A\\x00B" becomes "AB". Bytes above 0x7F become U+FFFD.

    Args:
        value: Decoded text or raw bytes

    Returns:
        Text
    """
    if isinstance(value, str):
        return value
    return "".join(
        bytes([byte]).decode("utf-8", errors="replace") for byte in value if byte != 0
    )


def find_name_record(font: TTFont, name_id: int) -> NameRecord | None:
    """
    Find the best name record for a name ID.

    Windows English is preferred, then Mac English, then whatever
    record carries the ID first.

    Returns:
        NameRecord or None
    """
    if "name" not in font:
        return None

    name_table = font["name"]
    for platform_id, encoding_id, language_id in PREFERRED_NAME_PLATFORMS:
        record = name_table.getName(name_id, platform_id, encoding_id, language_id)
        if record is not None:
            return record

    for record in name_table.names:
        if record.nameID == name_id:
            return record
    return None


def record_value(record: NameRecord) -> str | bytes:
    """Decode a name record, or return its raw bytes if that is not possible."""
    if isinstance(record.string, str):
        return record.string
    # getEncoding() falls back to ascii unless a default is passed
    if record.getEncoding(None) is None:
        return record.string
    try:
        return record.toUnicode()
    except UnicodeDecodeError:
        return record.string


def read_name(font: TTFont, name_id: int) -> str | bytes | None:
    """
    Read a name string from the name table.

    Args:
        font: TTFont instance
        name_id: Name table ID

    Returns:
        Text, raw bytes when the record cannot be decoded, or None
    """
    record = find_name_record(font, name_id)
    if record is None:
        return None
    return record_value(record)
