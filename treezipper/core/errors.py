"""Exceptions raised by TreeZipper.

Navigation past a boundary (``up`` at the root, ``left`` at the first
sibling, ``down`` on a leaf) is not an error: those moves return ``None``.
The exceptions here cover edits that have no meaningful result and
capabilities used outside their contract.
"""


class ZipperError(Exception):
    """Base class for all TreeZipper errors."""
    pass


class InvalidEditError(ZipperError, ValueError):
    """Raised when an edit is impossible at the zipper's position.

    The top-level node has no siblings and no parent, so inserting a
    sibling next to it or removing it cannot produce a tree.
    """
    pass


class CapabilityError(ZipperError, TypeError):
    """Raised when a tree capability is asked for something it cannot do.

    Examples: listing the children of a leaf, or promoting a value that
    has no branch form.
    """
    pass
