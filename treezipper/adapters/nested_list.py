"""Nested list capability for TreeZipper.

Every ``list`` is a branch whose elements are its children; any other
value (including tuples and strings) is a leaf.

Example:
    >>> from treezipper import Zipper
    >>> z = Zipper.new([1, [2, [3, 4], 5], 6], NestedListCapability())
    >>> list(z)
    [[1, [2, [3, 4], 5], 6], 1, [2, [3, 4], 5], 2, [3, 4], 3, 4, 5, 6]
"""

from typing import Any, List, Sequence

from ..core.capability import TreeCapability
from ..core.errors import CapabilityError


class NestedListCapability(TreeCapability):
    """Zip trees made of nested Python lists.

    Rebuilt branches are always new ``list`` objects, so the original
    lists are never mutated. Promoting a leaf replaces it with a
    one-element list; the leaf value itself is discarded, as a plain
    list has nowhere to keep it.
    """

    def is_branch(self, node: Any) -> bool:
        return isinstance(node, list)

    def children(self, node: Any) -> Sequence[Any]:
        if not isinstance(node, list):
            raise CapabilityError(f"{node!r} is a leaf, not a list")
        return node

    def make_node(self, node: Any, children: List[Any]) -> List[Any]:
        return list(children)
