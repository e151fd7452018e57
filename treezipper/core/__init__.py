"""Core abstractions for TreeZipper.

This package contains the capability contract, the Zipper cursor and the
traversal drivers built on top of it.
"""

from .errors import ZipperError, InvalidEditError, CapabilityError
from .capability import TreeCapability, Zipable, ZipableCapability
from .zipper import Zipper, PathMarker
from .traversal import (
    Action,
    traverse,
    fold,
    map_nodes,
    traverse_while,
    fold_while,
    find,
)

__all__ = [
    "ZipperError",
    "InvalidEditError",
    "CapabilityError",
    "TreeCapability",
    "Zipable",
    "ZipableCapability",
    "Zipper",
    "PathMarker",
    "Action",
    "traverse",
    "fold",
    "map_nodes",
    "traverse_while",
    "fold_while",
    "find",
]
