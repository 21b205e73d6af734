"""Recombining binary tree stored row by row, with a text rendering."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_BRANCH = "/   \\ "


def _format(value: Any) -> str:
    """Format a node value the way a default stream insertion would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def size_float(num: Any) -> int:
    """Number of characters a value takes when printed, trailing zeros dropped."""
    text = _format(num)
    dot = text.find(".")
    if dot != -1:
        stripped = text.rstrip("0")
        if stripped and len(stripped) - 1 > dot:
            text = stripped
    return len(text)


def _gap(value: Any, digits: int) -> str:
    if digits in (2, 3):
        return "     "
    if digits == 4:
        return "    "
    if digits == 5:
        return "   " if size_float(value) == 1 else "    "
    if digits == 6:
        return "   "
    return "  "


class BinaryTree:
    """Triangular array where row ``n`` holds ``n + 1`` nodes."""

    def __init__(self, depth: int = 0) -> None:
        self._depth = 0
        self._tree: list[list[Any]] = [[None]]
        self.set_depth(depth)

    @property
    def depth(self) -> int:
        return self._depth

    def set_depth(self, depth: int) -> None:
        """Resize the tree, keeping the values of nodes that still exist."""
        if depth < 0:
            raise ValueError("Depth must be non negative")
        rows = self._tree[: depth + 1]
        rows += [[] for _ in range(depth + 1 - len(rows))]
        self._tree = [
            row[: n + 1] + [None] * (n + 1 - len(row[: n + 1]))
            for n, row in enumerate(rows)
        ]
        self._depth = depth

    def _check(self, row: int, col: int) -> None:
        if row < 0 or row > self._depth or col < 0 or col > row:
            raise IndexError("Invalid row or column index.")

    def set_node(self, row: int, col: int, value: Any) -> None:
        self._check(row, col)
        self._tree[row][col] = value

    def get_node(self, row: int, col: int) -> Any:
        self._check(row, col)
        return self._tree[row][col]

    def _render_row(self, row: int) -> str:
        values = self._tree[row]
        parts = []
        for col, value in enumerate(values):
            width = size_float(value)
            if col < row:
                width += size_float(values[col + 1])
            parts.append(_format(value) + _gap(value, width))
        return "".join(parts)

    def render(self) -> str:
        """Return the flat listing of rows followed by a drawn tree."""
        out = ["".join(f"{_format(v)} " for v in row) + "\n" for row in self._tree]
        out.append("\n")

        depth = self._depth
        root = self._tree[0][0]
        lead = " " if size_float(root) < 3 else ""
        out.append(lead + " " * (3 * depth) + _format(root) + "\n")
        out.append(" " * (3 * depth - 1) + _BRANCH + "\n")
        for row in range(1, depth):
            out.append(" " * (3 * (depth - row) + 1) + self._render_row(row) + "\n")
            out.append(" " * (3 * (depth - row) - 1) + _BRANCH * (row + 1) + "\n")
        out.append(" " + self._render_row(depth) + "\n\n")
        return "".join(out)

    def display(self, stream: TextIO | None = None) -> None:
        """Write the rendering to ``stream`` (standard output by default)."""
        (stream if stream is not None else sys.stdout).write(self.render())