#!/usr/bin/env python3
"""
Input loading and the small grammars shared by the day solvers.

Parsers consume their whole input: an unknown character, a blank line in the
middle of a grid or a line that does not match the record pattern raises
ParseError instead of being skipped.
"""

import re
from pathlib import Path
from typing import Callable, Dict, List, TypeVar, Union

from aoc24.core.errors import ParseError
from aoc24.core.types import Grid, Tile

T = TypeVar("T")

INPUT_DIR = Path("input")

MAZE_LEGEND: Dict[str, Tile] = {t.value: t for t in Tile}


def start_day(day: str) -> str:
    print(f"Advent of Code 2024 - Day {day:0>2}")
    return (INPUT_DIR / f"{day}.txt").read_text()


def _lines(text: str) -> List[str]:
    lines = text.splitlines()
    if not lines:
        raise ParseError("empty input")
    return lines


def parse_grid(text: str, legend: Union[Dict[str, T], Callable[[str], T]]) -> Grid[T]:
    """Build a grid from rows of single-character cell codes."""
    rows: List[List[T]] = []
    for lineno, line in enumerate(_lines(text), start=1):
        if not line:
            raise ParseError("blank line inside grid", lineno)
        row: List[T] = []
        for col, ch in enumerate(line):
            try:
                row.append(legend[ch] if isinstance(legend, dict) else legend(ch))
            except (KeyError, ValueError):
                raise ParseError(f"unexpected character {ch!r} at column {col}", lineno) from None
        if rows and len(row) != len(rows[0]):
            raise ParseError(f"row has {len(row)} cells, expected {len(rows[0])}", lineno)
        rows.append(row)
    return Grid.from_rows(rows)


def parse_maze(text: str) -> Grid[Tile]:
    return parse_grid(text, MAZE_LEGEND)


def parse_records(text: str, pattern: Union[str, "re.Pattern[str]"], convert: Callable[..., T]) -> List[T]:
    """One record per line; every line must match `pattern` in full."""
    rx = re.compile(pattern) if isinstance(pattern, str) else pattern
    out: List[T] = []
    for lineno, line in enumerate(_lines(text), start=1):
        m = rx.fullmatch(line)
        if m is None:
            raise ParseError(f"cannot parse {line!r}", lineno)
        out.append(convert(*m.groups()))
    return out
