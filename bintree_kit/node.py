"""Binary tree nodes with parent links and structural queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node sets its parent link only; the caller attaches it
    to the parent's ``left`` or ``right`` slot.
    """

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            new.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            new.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if self is not parent.left:
            return parent.left
        return parent.right

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        grandparent = parent.parent
        if grandparent is None:
            return None
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left