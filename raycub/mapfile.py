"""Checks and extraction for the map section of a scene description file.

A scene file holds texture and colour elements followed by the map grid.
The grid may only use ``0`` (floor), ``1`` (wall), a single start heading
``N``, ``S``, ``W`` or ``E``, and spaces.  Blank lines may come before the
grid but not inside or after it.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import TextIO

__all__ = [
    "MAP_EXTENSION",
    "MapError",
    "MapLayout",
    "report_error",
    "check_forbidden",
    "check_map_path",
    "scan_map",
    "extract_map",
]

MAP_EXTENSION = ".cub"
_ALLOWED = frozenset("01NSWE ")


class MapError(Exception):
    """A scene file or its map section is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class MapLayout:
    """Dimensions of the map grid and the blank lines found before it."""

    width: int
    height: int
    leading_blank: int


def report_error(message: str, stream: TextIO | None = None) -> int:
    """Write the standard error report for ``message`` and return exit status 1."""
    target = sys.stdout if stream is None else stream
    target.write(f"Error\n{message}\n")
    return 1


def check_forbidden(line: str) -> None:
    """Raise :class:`MapError` if ``line`` holds a character not allowed in the map."""
    if any(ch not in _ALLOWED for ch in line):
        raise MapError("Found extra element or forbidden character")


def check_map_path(path: str | os.PathLike[str]) -> Path:
    """Check that ``path`` exists, is readable and names a ``.cub`` file."""
    name = os.fspath(path)
    if not os.access(name, os.F_OK):
        raise MapError("Map can't be accessed")
    if not os.access(name, os.R_OK):
        raise MapError("Map does not have read permission")
    if not name.endswith(MAP_EXTENSION):
        raise MapError("Map needs to have .cub file name extension")
    return Path(name)


def scan_map(lines: Iterable[str]) -> MapLayout:
    """Measure the map grid in ``lines`` (newlines already removed).

    ``lines`` starts right after the element section.  Every grid line is
    checked for forbidden characters; a blank line once the grid has begun
    is an error, as is a section with no grid at all.
    """
    width = height = leading = 0
    started = False
    for line in lines:
        if not line:
            if started:
                raise MapError("Empty line on map")
            leading += 1
            continue
        check_forbidden(line)
        started = True
        height += 1
        width = max(width, len(line))
    if not width:
        raise MapError("Map not found")
    return MapLayout(width=width, height=height, leading_blank=leading)


def extract_map(lines: Iterable[str], skip: int, height: int) -> list[str]:
    """Return the ``height`` grid rows that follow the first ``skip`` lines.

    ``skip`` counts every line before the grid in the same sequence, element
    lines and blank lines alike.
    """
    if skip < 0 or height < 0:
        raise ValueError("skip and height must not be negative")
    return list(islice(lines, skip, skip + height))