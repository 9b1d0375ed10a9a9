"""Binary tree nodes and the operations defined on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _subtree(self) -> Iterator[Node]:
        yield self
        for child in self._children():
            yield from child._subtree()

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        for node in list(self._subtree()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left, right."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left, node, right."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left, right, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        return max((1 + child.height() for child in self._children()), default=0)

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Return the number of nodes in this subtree."""
        return sum(1 for _ in self._subtree())

    def leaves(self) -> int:
        """Return the number of leaves in this subtree."""
        return sum(1 for node in self._subtree() if node.is_leaf())

    def inner_nodes(self) -> int:
        """Return the number of nodes with at least one child in this subtree."""
        return sum(1 for node in self._subtree() if not node.is_leaf())

    @staticmethod
    def _levels(node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(Node._levels(node.left), Node._levels(node.right))

    def balance(self) -> int:
        """Return the left subtree's height minus the right subtree's height."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node in the subtree has zero or two children."""
        if self.left is None and self.right is None:
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """Return True if all inner nodes have two children and all leaves share a level."""
        leaf_depths = set()
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                leaf_depths.add(level)
                continue
            if node.left is None or node.right is None:
                return False
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return len(leaf_depths) == 1

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if parent is grandparent.left:
            return grandparent.right
        return grandparent.left