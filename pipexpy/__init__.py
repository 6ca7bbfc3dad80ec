"""Run two commands joined by a pipe between an input file and an output file."""

__version__ = "0.1.0"
__all__ = ["cli", "dprintf", "formatspec", "linereader", "render", "strutil"]