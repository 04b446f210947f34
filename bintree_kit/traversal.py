"""Depth-first traversals yielding node values."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree_kit.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node.value
        stack.append(node.right)
        stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    stack: list[tuple[Optional[Node], bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if node is None:
            continue
        if expanded:
            yield node.value
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))