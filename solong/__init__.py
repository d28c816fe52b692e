"""Helpers for a tile-based puzzle game: characters, buffers, strings, lists, output, line reading and argument checks."""

__version__ = "0.1.0"