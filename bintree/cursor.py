r"""Zipper-style cursor over a BinaryTree.

A Cursor designates a position in a tree: the node at that position
(its focus, or None when the position is an empty slot, "bottom") and
the node above it together with the side it hangs from.

Navigation (up, left, right, leftmost, rightmost, alias) returns a new
Cursor and never moves the receiver. Structural edits (insert, cut,
paste, rotate_left, rotate_right) reshape the tree at the receiver's
position and update the receiver's focus.

Cursors are not invalidated when another cursor edits the tree. A
cursor whose ancestry was cut, pasted or rotated through some other
cursor must not be used again.

Rotations:

         |  <- i                     |  <- i
        [y]                         [x]
        / \     rotate_right        / \
      [x]  c       ---->           a  [y]
      / \          <----              / \
     a   b      rotate_left          b   c
"""

from __future__ import annotations

from typing import Generic

from .config import RuntimeConfig, runtime_config
from .errors import CycleError, InvalidPosition, RootError
from .logging import get_logger
from .tree import BinaryTree, Node, T


class Cursor(Generic[T]):
    """A position inside a BinaryTree.

    Attributes:
        tree: Tree the cursor was created against.
        focus: Node at this position, or None at bottom.
        parent: Node above the focus, or None at the root position.
        from_left: True if the position hangs from parent's left link.
            Meaningless when parent is None.
    """

    __slots__ = ("tree", "focus", "parent", "from_left")

    def __init__(
        self,
        tree: BinaryTree[T],
        focus: Node[T] | None = None,
        parent: Node[T] | None = None,
        from_left: bool = False,
    ):
        self.tree = tree
        self.focus = focus
        self.parent = parent
        self.from_left = from_left

    def __repr__(self) -> str:
        if self.focus is None:
            where = "bottom"
        else:
            where = f"item={self.focus.item!r}"
        if self.parent is None:
            side = "root"
        else:
            side = "left" if self.from_left else "right"
        return f"Cursor({where}, {side})"

    # ------------------------------------------------------------------
    # Positional queries
    # ------------------------------------------------------------------

    def is_root(self) -> bool:
        """True if the position is the tree's root slot."""
        return self.parent is None

    def is_bottom(self) -> bool:
        """True if no node sits at this position."""
        return self.focus is None

    def has_left(self) -> bool:
        return self.focus is not None and self.focus.left is not None

    def has_right(self) -> bool:
        return self.focus is not None and self.focus.right is not None

    def is_leaf(self) -> bool:
        return self.focus is not None and self.focus.is_leaf

    def is_inside(self, tree: BinaryTree[T]) -> bool:
        """True if this cursor was created against ``tree``."""
        return self.tree is tree

    def consult(self) -> T:
        """Return the payload at this position.

        Raises:
            InvalidPosition: If the cursor is at bottom.
        """
        if self.focus is None:
            raise InvalidPosition("Cannot consult at bottom")
        return self.focus.item

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def up(self) -> Cursor[T]:
        """Cursor on the parent of this position.

        Raises:
            RootError: If the cursor is at the root position.
        """
        if self.parent is None:
            raise RootError("Cannot go up from the root")
        above = self.parent.parent
        return Cursor(
            self.tree,
            self.parent,
            above,
            above is not None and above.left is self.parent,
        )

    def left(self) -> Cursor[T]:
        """Cursor on the left child slot of the focus.

        Raises:
            InvalidPosition: If the cursor is at bottom.
        """
        if self.focus is None:
            raise InvalidPosition("Cannot go left from bottom")
        return Cursor(self.tree, self.focus.left, self.focus, True)

    def right(self) -> Cursor[T]:
        """Cursor on the right child slot of the focus.

        Raises:
            InvalidPosition: If the cursor is at bottom.
        """
        if self.focus is None:
            raise InvalidPosition("Cannot go right from bottom")
        return Cursor(self.tree, self.focus.right, self.focus, False)

    def leftmost(self) -> Cursor[T]:
        """Cursor on the empty slot reached by following left links."""
        cursor = self.alias()
        while cursor.focus is not None:
            cursor.parent = cursor.focus
            cursor.focus = cursor.focus.left
            cursor.from_left = True
        return cursor

    def rightmost(self) -> Cursor[T]:
        """Cursor on the empty slot reached by following right links."""
        cursor = self.alias()
        while cursor.focus is not None:
            cursor.parent = cursor.focus
            cursor.focus = cursor.focus.right
            cursor.from_left = False
        return cursor

    def alias(self) -> Cursor[T]:
        """Independent cursor at the same position."""
        return Cursor(self.tree, self.focus, self.parent, self.from_left)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def update(self, item: T) -> None:
        """Replace the payload at this position.

        Raises:
            InvalidPosition: If the cursor is at bottom.
        """
        if self.focus is None:
            raise InvalidPosition("Cannot update at bottom")
        self.focus.item = item

    def insert(self, item: T) -> None:
        """Replace the subtree at this position with a single leaf."""
        runtime = self._prepare()
        self._detach()
        self._attach(Node(item, parent=self.parent))
        self._verify(runtime)
        get_logger(__name__, runtime).debug("cursor_insert", item=item, root=self.is_root())

    def cut(self) -> BinaryTree[T]:
        """Detach the subtree at this position.

        The cursor is left at bottom and the detached subtree is
        returned as a tree of its own. Cutting at bottom returns an
        empty tree and changes nothing.
        """
        runtime = self._prepare()
        sub = self._cut()
        if sub.root_node is not None:
            self._verify(runtime)
            get_logger(__name__, runtime).debug(
                "cursor_cut", item=sub.root_node.item, root=self.is_root()
            )
        return sub

    def paste(self, tree: BinaryTree[T]) -> None:
        """Replace the subtree at this position with the content of ``tree``.

        Whatever sat at this position is discarded. ``tree`` is emptied:
        its nodes now belong to the cursor's tree. Pasting an empty tree
        leaves the position at bottom.

        Raises:
            CycleError: If this cursor is inside ``tree``.
        """
        runtime = self._prepare()
        if self.is_inside(tree):
            get_logger(__name__, runtime).warning(
                "paste_rejected", reason="cursor inside source tree"
            )
            raise CycleError("Cannot paste a tree into a cursor inside it")
        if runtime.check_links:
            tree.check_links()
        self._paste(tree)
        self._verify(runtime)
        if self.focus is not None:
            get_logger(__name__, runtime).debug(
                "cursor_paste", item=self.focus.item, root=self.is_root()
            )

    def rotate_right(self) -> None:
        """Raise the focus's left child into this position.

        Raises:
            InvalidPosition: If the focus or its left child is missing.
        """
        runtime = self._prepare()
        if not self.has_left():
            raise InvalidPosition("Cannot rotate right without a left child")
        y = self._cut().root()
        b = y.left().right()._cut()
        x = y.left()._cut().root()
        y.left()._paste(b)
        x.right()._paste(y.tree)
        self._paste(x.tree)
        self._verify(runtime)
        get_logger(__name__, runtime).debug(
            "cursor_rotate", direction="right", item=self.focus.item
        )

    def rotate_left(self) -> None:
        """Raise the focus's right child into this position.

        Raises:
            InvalidPosition: If the focus or its right child is missing.
        """
        runtime = self._prepare()
        if not self.has_right():
            raise InvalidPosition("Cannot rotate left without a right child")
        x = self._cut().root()
        b = x.right().left()._cut()
        y = x.right()._cut().root()
        x.right()._paste(b)
        y.left()._paste(x.tree)
        self._paste(y.tree)
        self._verify(runtime)
        get_logger(__name__, runtime).debug(
            "cursor_rotate", direction="left", item=self.focus.item
        )

    # ------------------------------------------------------------------
    # Link bookkeeping
    # ------------------------------------------------------------------

    def _prepare(self) -> RuntimeConfig:
        """Resolve configuration and check links before an edit starts."""
        runtime = runtime_config()
        if runtime.check_links:
            self.tree.check_links()
        return runtime

    def _verify(self, runtime: RuntimeConfig) -> None:
        if runtime.check_links:
            self.tree.check_links()

    def _cut(self) -> BinaryTree[T]:
        node = self._detach()
        return BinaryTree() if node is None else BinaryTree(node)

    def _paste(self, tree: BinaryTree[T]) -> None:
        self._detach()
        node = tree.root_node
        if node is None:
            return
        tree.root_node = None
        node.parent = self.parent
        self._attach(node)

    def _attach(self, node: Node[T]) -> None:
        """Hang ``node`` at this position; its parent link is already set."""
        if self.parent is None:
            self.tree.root_node = node
        elif self.from_left:
            self.parent.left = node
        else:
            self.parent.right = node
        self.focus = node

    def _detach(self) -> Node[T] | None:
        """Unhang the focus and return it with its parent link cleared."""
        node = self.focus
        if node is None:
            return None
        if self.parent is None:
            self.tree.root_node = None
        elif self.from_left:
            self.parent.left = None
        else:
            self.parent.right = None
        node.parent = None
        self.focus = None
        return node
