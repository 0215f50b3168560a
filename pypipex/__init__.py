"""C-style character, string, byte-buffer and linked-list helpers."""

__version__ = "0.1.0"