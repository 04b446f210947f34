"""ASCII drawing of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree_kit.measure import height
from bintree_kit.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col >= len(row):
        row.extend(" " * (col + 1 - len(row)))
    row[col] = char


def _layout(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = "(%03d)" % tree.value
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)

    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)

    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))