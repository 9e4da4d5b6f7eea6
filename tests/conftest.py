"""Shared fixtures for building and inspecting trees."""

import pytest

from bintree import config as bt_config
from bintree.tree import BinaryTree


def _fill_at(cursor, shape):
    """Insert a nested (item, left, right) shape at ``cursor``.

    A bare item stands for a leaf; None leaves the slot empty.
    """
    if shape is None:
        return
    if isinstance(shape, tuple):
        item, left, right = shape
    else:
        item, left, right = shape, None, None
    cursor.insert(item)
    _fill_at(cursor.left(), left)
    _fill_at(cursor.right(), right)


def _shape_of(node):
    if node is None:
        return None
    return (node.item, _shape_of(node.left), _shape_of(node.right))


@pytest.fixture
def fill():
    return _fill_at


@pytest.fixture
def build():
    def _build(shape):
        tree = BinaryTree()
        _fill_at(tree.root(), shape)
        return tree

    return _build


@pytest.fixture
def shape():
    """Nested (item, left, right) tuples for a whole tree."""

    def _shape(tree):
        return _shape_of(tree.root_node)

    return _shape


@pytest.fixture(autouse=True)
def _fresh_runtime_config(monkeypatch):
    for key in ["BINTREE_LOG_LEVEL", "BINTREE_CHECK_LINKS"]:
        monkeypatch.delenv(key, raising=False)
    bt_config.reset_runtime_config_cache()
    yield
    bt_config.reset_runtime_config_cache()
