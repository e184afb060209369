"""Pretty-print helpers for word search boards."""

from __future__ import annotations

import sys
from typing import List, Sequence

from ..core.constants import EMPTY_CELL


STYLES = ("compact", "grid", "coordinates")


def cell_symbol(cell: str, empty_char: str = "·") -> str:
    return empty_char if cell == EMPTY_CELL else cell


def format_compact(rows: Sequence[Sequence[str]], empty_char: str = "·") -> str:
    return "\n".join(" ".join(cell_symbol(cell, empty_char) for cell in row) for row in rows)


def format_bordered(rows: Sequence[Sequence[str]], empty_char: str = "·") -> str:
    lines: List[str] = []
    for index, row in enumerate(rows):
        lines.append("|" + "|".join(f" {cell_symbol(cell, empty_char)} " for cell in row) + "|")
        if index < len(rows) - 1:
            lines.append("+" + "+".join("---" for _ in row) + "+")
    return "\n".join(lines)


def format_with_coordinates(rows: Sequence[Sequence[str]], empty_char: str = "·") -> str:
    width = len(rows[0]) if rows else 0
    lines = ["   " + " ".join(f"{c:>2}" for c in range(width))]
    for r, row in enumerate(rows):
        row_render = " ".join(f"{cell_symbol(cell, empty_char):>2}" for cell in row)
        lines.append(f"{r:>2} {row_render}")
    return "\n".join(lines)


def format_board(
    rows: Sequence[Sequence[str]],
    style: str = "compact",
    empty_char: str = "·",
) -> str:
    if style == "compact":
        return format_compact(rows, empty_char)
    if style == "grid":
        return format_bordered(rows, empty_char)
    if style == "coordinates":
        return format_with_coordinates(rows, empty_char)
    raise ValueError(f"Unknown board style {style!r}; expected one of {', '.join(STYLES)}")


def pretty_print_board(
    rows: Sequence[Sequence[str]],
    *,
    style: str = "compact",
    empty_char: str = "·",
    label: str | None = None,
    stream=None,
) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(rows, style=style, empty_char=empty_char), file=stream)
