"""Run two commands joined by a pipe between an input and an output file, with small text, byte and list helpers."""

__version__ = "1.0.0"