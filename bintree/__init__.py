"""bintree -- a binary tree edited through zipper-style cursors.

Payloads are opaque: the tree neither orders nor searches them. All
reshaping goes through a Cursor, which can walk up and down, replace
payloads, cut and paste whole subtrees, and perform the left and right
rotations that self-balancing trees are built from.

    tree = BinaryTree()
    top = tree.root()
    top.insert("y")
    top.left().insert("x")
    top.rotate_right()
"""

from .cursor import Cursor
from .errors import CycleError, InvalidPosition, LinkError, RootError, TreeError
from .tree import BinaryTree, Node, walk

__all__ = [
    "BinaryTree",
    "Cursor",
    "CycleError",
    "InvalidPosition",
    "LinkError",
    "Node",
    "RootError",
    "TreeError",
    "walk",
]
