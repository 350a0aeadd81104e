"""
Descriptor defaults and lookup constants.

Centralizes values used when a font omits a table or a name record.
"""

# Fallbacks applied when the font has no OS/2 table or subfamily name
DEFAULT_WIDTH = 500
DEFAULT_WEIGHT = 3
DEFAULT_STYLE = "Regular"
DEFAULT_ITALIC = False

# fsSelection bit 0
FS_SELECTION_ITALIC = 1 << 0

# Name table IDs
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_POSTSCRIPT = 6

# (platformID, platEncID, langID) in lookup order
PREFERRED_NAME_PLATFORMS = (
    (3, 1, 0x409),  # Windows, Unicode BMP, English (US)
    (1, 0, 0),  # Macintosh, Roman, English
)

# Header tag of TrueType/OpenType collections
COLLECTION_TAG = b"ttcf"

# Data offset 256 at the start of a data-fork resource file (.dfont)
RESOURCE_FORK_TAG = b"\x00\x00\x01\x00"

# Glob patterns for directory scans
FONT_FILE_PATTERNS = (
    "*.ttf",
    "*.otf",
    "*.ttc",
    "*.otc",
    "*.woff",
    "*.woff2",
    "*.dfont",
)

# Environment variable controlling the log level
LOG_LEVEL_ENV = "FONT_DESCRIPTOR_LOG_LEVEL"
LOG_LEVEL_DEFAULT = "INFO"
