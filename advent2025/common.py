"""Helpers shared by the daily puzzle solvers."""

from __future__ import annotations

from os import PathLike
from pathlib import Path


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read a puzzle input file and split it into lines on ``\\n``.

    A trailing newline yields a trailing empty line. An empty file is an error.
    """
    content = Path(path).read_text()
    if not content:
        raise ValueError(f"File is empty: {path}")
    return content.split("\n")