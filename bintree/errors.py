"""Errors raised by cursor navigation and structural edits.

Every error derives from TreeError, itself a ValueError, so callers can
catch the whole family at once or a single kind.
"""


class TreeError(ValueError):
    """Base class for binary tree errors."""


class RootError(TreeError):
    """Raised when moving up from the root position."""


class InvalidPosition(TreeError):
    """Raised when an operation needs a node that is not there.

    Covers reading or writing at bottom, descending from bottom, and
    rotating without the child that would rise.
    """


class CycleError(TreeError):
    """Raised when pasting a tree into a cursor that lives inside it."""


class LinkError(TreeError):
    """Raised when a parent back-link disagrees with its child link."""
