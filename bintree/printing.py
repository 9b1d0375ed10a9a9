"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


class _Canvas:
    """Rows of characters that grow to the right as they are written to."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        if column < 0:
            return
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> list[str]:
        result = []
        for row in self._rows:
            text = "".join(row).rstrip(" ")
            # The first two columns are always kept, even when blank.
            result.append(text.ljust(2))
        return result


def _draw(node: Node | None, offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw the subtree at the given offset and return the width it takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                canvas.put(depth - 1, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                canvas.put(depth - 1, start + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each level on its own newline-terminated line."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to the given stream, standard output by default."""
    stream = sys.stdout if file is None else file
    stream.write(render(tree))