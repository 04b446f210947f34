"""Size, shape and balance measurements of binary trees."""

from __future__ import annotations

from typing import Optional

from bintree_kit.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return max(
        (1 + height(child) for child in (tree.left, tree.right) if child is not None),
        default=0,
    )


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 0
    return 1 + inner_nodes(tree.left) + inner_nodes(tree.right)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is None or tree.right is None:
        return False
    return (
        is_perfect(tree.left)
        and is_perfect(tree.right)
        and _levels(tree.left) == _levels(tree.right)
    )