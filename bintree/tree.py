"""Tree data structures for cursor-driven binary trees.

A BinaryTree owns at most one root Node. Each Node owns its two
children through its left and right links and keeps a non-owning
back-link to its parent for upward navigation.

Trees are never reshaped directly: every structural edit goes through
a Cursor (see bintree.cursor), obtained with BinaryTree.root().
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from .errors import LinkError

if TYPE_CHECKING:
    from .cursor import Cursor

T = TypeVar("T")

WALK_ORDERS = ("pre", "in", "post", "bfs")


@dataclass(eq=False)
class Node(Generic[T]):
    """A single tree element.

    Nodes compare by identity and repr only their payload. A node
    whose parent is None is either the root of a tree or a detached
    subtree on its way to a paste.

    Attributes:
        item: Opaque payload supplied by the caller.
        left: Left child, or None.
        right: Right child, or None.
        parent: Node holding this one as a child, or None.
    """

    item: T
    left: Node[T] | None = field(default=None, repr=False)
    right: Node[T] | None = field(default=None, repr=False)
    parent: Node[T] | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.left is None and self.right is None

    def size(self) -> int:
        """Count nodes in this subtree."""
        return sum(1 for _ in walk(self, "pre"))

    def height(self) -> int:
        """Edges on the longest downward path (0 for a leaf)."""
        depth = -1
        level = [self]
        while level:
            depth += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return depth


def walk(node: Node[T] | None, order: str = "in") -> Iterator[Node[T]]:
    """
    Walk subtree nodes in specified order.

    Args:
        node: Subtree root to start from (None walks nothing)
        order: "pre", "in", "post" for depth-first orders, "bfs" for breadth-first

    Iterative, so chains deeper than the recursion limit are fine.
    """
    if order not in WALK_ORDERS:
        raise ValueError(f"Unknown order: {order}")
    if node is None:
        return

    if order == "bfs":
        queue = deque([node])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(c for c in (current.left, current.right) if c is not None)
    elif order == "pre":
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(c for c in (current.right, current.left) if c is not None)
    elif order == "in":
        stack = []
        current = node
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right
    else:
        # Reverse of a root-right-left preorder.
        stack = [node]
        out: list[Node[T]] = []
        while stack:
            current = stack.pop()
            out.append(current)
            stack.extend(c for c in (current.left, current.right) if c is not None)
        yield from reversed(out)


@dataclass(eq=False)
class BinaryTree(Generic[T]):
    """Container for zero or one root node.

    Trees compare by identity: a cursor belongs to exactly one tree
    object, which is how pasting a tree into itself is detected.

    Attributes:
        root_node: Root node, or None for an empty tree.
    """

    root_node: Node[T] | None = None

    def is_empty(self) -> bool:
        """True if the tree holds no node."""
        return self.root_node is None

    def root(self) -> Cursor[T]:
        """Cursor on the root node (at bottom if the tree is empty)."""
        from .cursor import Cursor

        return Cursor(self, self.root_node)

    @property
    def node_count(self) -> int:
        """Total nodes in the tree."""
        return 0 if self.root_node is None else self.root_node.size()

    @property
    def height(self) -> int:
        """Height of the root node, -1 when empty."""
        return -1 if self.root_node is None else self.root_node.height()

    def items(self, order: str = "in") -> Iterator[T]:
        """Yield payloads in the given walk order."""
        for node in walk(self.root_node, order):
            yield node.item

    def __iter__(self) -> Iterator[T]:
        return self.items("in")

    def __len__(self) -> int:
        return self.node_count

    def check_links(self) -> None:
        """Verify that every parent back-link matches its child link.

        Raises:
            LinkError: If the root has a parent, or a child's parent
                is not the node holding it.
        """
        if self.root_node is None:
            return
        if self.root_node.parent is not None:
            raise LinkError(f"Root node {self.root_node.item!r} has a parent")
        for node in walk(self.root_node, "pre"):
            for side, child in (("left", node.left), ("right", node.right)):
                if child is not None and child.parent is not node:
                    raise LinkError(
                        f"{side} child {child.item!r} of {node.item!r} points to another parent"
                    )
