"""Input parsing plus character, string, byte, linked-list and printf-style helpers."""

__version__ = "1.0.0"