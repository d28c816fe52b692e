"""Command-line argument checks for the map file."""

from __future__ import annotations

from collections.abc import Sequence

MAP_EXTENSION = ".ber"
USAGE = "Usage: ./so_long <map_file.ber>"


class ArgumentError(ValueError):
    """Raised when the command line does not name a usable map file."""


def _validate_file_name(name: str) -> None:
    if len(name) < len(MAP_EXTENSION) or not name.endswith(MAP_EXTENSION):
        raise ArgumentError("Wrong file extension. Expected '.ber'.")
    stem = name[: -len(MAP_EXTENSION)]
    if not stem or stem.endswith("/"):
        raise ArgumentError("Invalid file name. Expected a name before '.ber'.")


def validate_args(argv: Sequence[str]) -> str:
    """Check the arguments after the program name and return the map file name."""
    if len(argv) < 1:
        raise ArgumentError(f"Add a map file.\n{USAGE}")
    if len(argv) > 1:
        raise ArgumentError(f"Too many arguments.\n{USAGE}")
    name = argv[0]
    _validate_file_name(name)
    return name