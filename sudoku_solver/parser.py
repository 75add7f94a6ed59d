"""Reading grids from their plain-text form.

The text is 9 lines of 9 characters. A digit 1-9 is a given, anything else
(conventionally `-`) is an empty cell. `0` counts as "anything else" and is
read as empty too. Whitespace around the whole text is stripped first, so
leading or trailing blank lines are tolerated.
"""
from __future__ import annotations

import logging
from pathlib import Path

from .grid import Grid

_file_logger = logging.getLogger(__name__)


def parse_cell(char: str):
    if char in "123456789":
        return int(char)
    return None


def parse_grid(text: str) -> Grid:
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    rows = [[parse_cell(char) for char in line] for line in lines]
    return Grid.construct(rows)


def load_grid(path) -> Grid:
    path = Path(path)
    _file_logger.info("Loading grid from %s", path)
    return parse_grid(path.read_text(encoding="utf-8"))
