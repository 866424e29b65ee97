"""Minimal printf-style formatting with C-flavoured character, memory, string and output helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "textutils", "output", "formatting"]