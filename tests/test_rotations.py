"""Tests for left and right rotations."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from bintree.errors import InvalidPosition
from bintree.tree import BinaryTree

# y(x(a, b), c) with leaf payloads 1, 2, 3
LEANING_LEFT = ("y", ("x", 1, 2), 3)
# x(a, y(b, c))
LEANING_RIGHT = ("x", 1, ("y", 2, 3))

_items = st.integers(min_value=0, max_value=99)
_trees = st.recursive(
    st.none(),
    lambda children: st.tuples(_items, children, children),
    max_leaves=16,
)
_subtrees = st.tuples(_items, _trees, _trees)
# Pivots always carry the child that rises.
_leaning_left = st.tuples(_items, _subtrees, _trees)
_leaning_right = st.tuples(_items, _trees, _subtrees)
_paths = st.lists(st.booleans(), max_size=8)
_property_settings = settings(
    max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture]
)


def _slot(tree, path):
    """Empty slot reached by following left (True) / right (False) steps."""
    cursor = tree.root()
    for go_left in path:
        if cursor.is_bottom():
            break
        cursor = cursor.left() if go_left else cursor.right()
    return cursor.leftmost()


def _leaves(tree):
    return [node.item for node in _leaf_nodes(tree.root_node)]


def _leaf_nodes(node):
    if node is None:
        return []
    if node.is_leaf:
        return [node]
    return _leaf_nodes(node.left) + _leaf_nodes(node.right)


class TestRotateRight:
    def test_shape(self, build, shape):
        tree = build(LEANING_LEFT)
        cursor = tree.root()
        cursor.rotate_right()
        assert cursor.consult() == "x"
        assert cursor.is_root()
        assert shape(tree) == shape(build(LEANING_RIGHT))
        tree.check_links()

    def test_leaves_keep_order(self, build):
        tree = build(LEANING_LEFT)
        assert _leaves(tree) == [1, 2, 3]
        tree.root().rotate_right()
        assert _leaves(tree) == [1, 2, 3]
        assert list(tree) == [1, "x", 2, "y", 3]

    def test_inside_subtree(self, build, shape):
        tree = build(("top", LEANING_LEFT, "sibling"))
        cursor = tree.root().left()
        cursor.rotate_right()
        assert cursor.consult() == "x"
        assert tree.root_node.left.item == "x"
        assert tree.root_node.left.parent is tree.root_node
        assert shape(tree)[2] == ("sibling", None, None)
        tree.check_links()

    def test_without_inner_subtree(self, build, shape):
        tree = build(("y", ("x", "a", None), "c"))
        tree.root().rotate_right()
        assert shape(tree) == ("x", ("a", None, None), ("y", None, ("c", None, None)))
        tree.check_links()

    def test_missing_left_child_rejected(self, build, shape):
        tree = build(("y", None, "c"))
        before = shape(tree)
        with pytest.raises(InvalidPosition):
            tree.root().rotate_right()
        assert shape(tree) == before

    def test_at_bottom_rejected(self):
        with pytest.raises(InvalidPosition):
            BinaryTree().root().rotate_right()


class TestRotateLeft:
    def test_shape(self, build, shape):
        tree = build(LEANING_RIGHT)
        cursor = tree.root()
        cursor.rotate_left()
        assert cursor.consult() == "y"
        assert shape(tree) == shape(build(LEANING_LEFT))
        tree.check_links()

    def test_missing_right_child_rejected(self, build, shape):
        tree = build(("x", "a", None))
        before = shape(tree)
        with pytest.raises(InvalidPosition):
            tree.root().rotate_left()
        assert shape(tree) == before

    def test_undoes_rotate_right(self, build, shape):
        tree = build(LEANING_LEFT)
        before = shape(tree)
        cursor = tree.root()
        cursor.rotate_right()
        cursor.rotate_left()
        assert shape(tree) == before
        assert list(tree) == [1, "x", 2, "y", 3]


class TestRotationProperties:
    @_property_settings
    @given(context=_trees, path=_paths, pivot=_leaning_left)
    def test_rotate_right_keeps_in_order(self, fill, context, path, pivot):
        tree = BinaryTree()
        fill(tree.root(), context)
        cursor = _slot(tree, path)
        fill(cursor, pivot)
        before = list(tree)
        cursor.rotate_right()
        assert cursor.consult() == pivot[1][0]
        assert list(tree) == before
        tree.check_links()

    @_property_settings
    @given(context=_trees, path=_paths, pivot=_leaning_right)
    def test_rotations_are_inverse(self, fill, shape, context, path, pivot):
        tree = BinaryTree()
        fill(tree.root(), context)
        cursor = _slot(tree, path)
        fill(cursor, pivot)
        before = shape(tree)
        cursor.rotate_left()
        cursor.rotate_right()
        assert shape(tree) == before
        tree.check_links()

    @_property_settings
    @given(context=_trees, path=_paths, pivot=_subtrees)
    def test_cut_then_paste_restores(self, fill, shape, context, path, pivot):
        tree = BinaryTree()
        fill(tree.root(), context)
        cursor = _slot(tree, path)
        fill(cursor, pivot)
        before = shape(tree)
        sub = cursor.cut()
        assert cursor.is_bottom()
        cursor.paste(sub)
        assert cursor.consult() == pivot[0]
        assert sub.is_empty()
        assert shape(tree) == before
