# bintree_kit

A small library for plain binary trees of integers. Each node keeps a link to
its parent and to its two children. The library can build trees, walk them in
the usual depth-first orders, measure them and draw them as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree_kit.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)     # 128 takes the place of 402, and 402 becomes its right child
```

`Node(value, parent=None, left=None, right=None)` creates a node. Passing a
parent only sets the new node's `parent` link; attach it yourself with
`parent.left = ...` or `parent.right = ...`.

`insert_left(value)` and `insert_right(value)` create a child of the node and
return it. If that slot already holds a child, the old child moves down one
level and hangs below the new node on the same side.

A node can also answer questions about where it sits:

- `is_leaf()`: true when the node has no children
- `is_root()`: true when the node has no parent
- `depth()`: the number of edges from the node up to the root
- `sibling()`: the other child of the node's parent, or `None`
- `uncle()`: the sibling of the node's parent, or `None`
- `delete()`: detaches the node from its parent and clears every link in the
  subtree rooted at it

## Traversal

```python
from bintree_kit.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 128, 402]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 402, 128, 98]
```

Each function is a generator of node values. An empty tree (`None`) yields
nothing.

## Measurements

```python
from bintree_kit.measure import (
    height, size, leaves, inner_nodes, balance, is_full, is_perfect,
)

height(root)       # edges on the longest downward path
size(root)         # number of nodes
leaves(root)       # number of nodes without children
inner_nodes(root)  # number of nodes with at least one child
balance(root)      # height of the left subtree minus height of the right
is_full(root)      # every node has either no children or two
is_perfect(root)   # full, and every leaf at the same depth
```

All of these accept `None` as the empty tree: the counts and `balance` give
`0`, and `is_full` and `is_perfect` give `False`.

## Rendering

```python
from bintree_kit.render import render, print_tree

text = render(root)       # the drawing as a string, one line per level
print_tree(root)          # writes the drawing to standard output
print_tree(root, file)    # or to any text file object
```

The drawing of the tree built above:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Each value is shown padded to three digits in parentheses. Dots and dashes
connect each node to its children. Rendering `None` gives an empty string.

## What it does not do

The package is a library only: it has no command-line tool, it does not keep
trees ordered by value (it is not a search tree), and it has no way to save
or load trees.