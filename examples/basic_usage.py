#!/usr/bin/env python3
"""Basic usage example for bintree.

Demonstrates building a tree through cursors, moving subtrees around
with cut and paste, and rebalancing a left-leaning chain by hand.

Usage:
    python examples/basic_usage.py
"""

import sys
import os

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from bintree import BinaryTree, CycleError, RootError


def example_build_and_navigate():
    """Insert nodes through derived cursors and walk back up."""
    print("=" * 60)
    print("Example 1: Build and Navigate")
    print("=" * 60)

    tree = BinaryTree()
    top = tree.root()
    top.insert("d")
    top.left().insert("b")
    top.right().insert("f")
    top.left().left().insert("a")
    top.left().right().insert("c")

    print(f"  In-order:     {list(tree)}")
    print(f"  Pre-order:    {list(tree.items('pre'))}")
    print(f"  Nodes:        {tree.node_count}")
    print(f"  Height:       {tree.height}")

    slot = top.leftmost()
    print(f"  Leftmost:     bottom={slot.is_bottom()}, above={slot.up().consult()!r}")

    try:
        top.up()
    except RootError as e:
        print(f"  Up from root: {e}")
    print()


def example_cut_and_paste():
    """Move a subtree from one tree into another."""
    print("=" * 60)
    print("Example 2: Cut and Paste")
    print("=" * 60)

    source = BinaryTree()
    cursor = source.root()
    cursor.insert("root")
    cursor.left().insert("branch")
    cursor.left().left().insert("leaf")

    branch = cursor.left().cut()
    print(f"  Source after cut: {list(source)}")
    print(f"  Cut subtree:      {list(branch)}")

    target = BinaryTree()
    target.root().insert("other")
    target.root().right().paste(branch)
    print(f"  Target:           {list(target)}")
    print(f"  Cut tree emptied: {branch.is_empty()}")

    try:
        target.root().paste(target)
    except CycleError as e:
        print(f"  Self paste:       {e}")
    print()


def example_rebalance_chain():
    """Turn a left chain of three into a balanced tree."""
    print("=" * 60)
    print("Example 3: Rotate a Left Chain")
    print("=" * 60)

    tree = BinaryTree()
    cursor = tree.root()
    for item in (3, 2, 1):
        cursor.insert(item)
        cursor = cursor.left()

    print(f"  Before: height={tree.height}, in-order={list(tree)}")
    top = tree.root()
    top.rotate_right()
    print(f"  After:  height={tree.height}, in-order={list(tree)}")
    print(f"  Root:   {top.consult()}, left={top.left().consult()}, right={top.right().consult()}")
    tree.check_links()
    print()


if __name__ == "__main__":
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ]
    )
    example_build_and_navigate()
    example_cut_and_paste()
    example_rebalance_chain()
    print("All examples completed successfully.")
