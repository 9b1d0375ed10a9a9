# bintree

A small binary tree of integers. Each `Node` holds a value and links to its
parent and its two children. The package has traversals, measurements and
structural checks, and it can draw a tree as ASCII art.

## Installing

```
pip install .
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)               # or Node(98, parent) to link a node to a parent
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)        # 128 takes the right slot; 402 becomes its right child
```

`insert_left` and `insert_right` create a new node in that slot and return
it. If a child is already there, the old child moves down and becomes the
new node's child on the same side.

The `value`, `parent`, `left` and `right` attributes can also be set
directly.

## Asking about the tree

```python
root.size()          # number of nodes in the subtree
root.height()        # edges on the longest path down to a leaf (0 for a leaf)
root.depth()         # edges up to the root (0 for the root)
root.leaves()        # number of leaves in the subtree
root.inner_nodes()   # nodes with at least one child
root.balance()       # height of the left subtree minus height of the right
root.is_full()       # every node has 0 or 2 children
root.is_perfect()    # full, with all leaves at the same depth
root.is_leaf(), root.is_root()
root.sibling(), root.uncle()   # a Node, or None
```

`preorder()`, `inorder()` and `postorder()` return iterators over the node
values:

```python
list(root.preorder())   # [98, 12, 54, 128, 402]
```

`delete()` detaches the node's subtree from its parent and breaks every link
inside it.

## Drawing

```python
from bintree.printing import render, print_tree

text = render(root)   # one newline-terminated line per level; "" for None
print_tree(root)      # writes to standard output, or to a stream given as `file`
```

For the tree built above this gives:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Values are drawn zero-padded to three digits.

## What it does not do

The tree lives in memory only: there is no saving or loading, and no
command-line tool. Values are placed where they are inserted; the tree does
not keep them sorted or rebalance itself.

## Running the tests

```
pip install ".[test]"
pytest
```