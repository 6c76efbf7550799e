"""Helpers for characters, numbers, strings, byte buffers, matrices, output, line reading and lists."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conversions",
    "matrix",
    "textutils",
    "memory",
    "line_reader",
    "output",
    "linked",
    "indexed",
]