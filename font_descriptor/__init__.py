"""
Font metadata extraction built on fontTools.
"""

__version__ = "1.0.0"

from font_descriptor.core.descriptor import FontDescriptor  # noqa: E402
from font_descriptor.operations.extract import create_from_path  # noqa: E402

__all__ = ["FontDescriptor", "__version__", "create_from_path"]
