# __init__.py

# Clipboard utilities
from .clipboard_utils import ClipboardUtils, ClipboardError, ClipboardReader, get_clipboard

__all__ = [
    "ClipboardUtils",
    "ClipboardError",
    "ClipboardReader",
    "get_clipboard",
]
