"""Labeled tuple capability for TreeZipper.

Trees are written as ``(label, [children...])`` tuples whose leaves are
bare values:

    (1, [2, (3, [4, 5]), 6])

    #     1
    #  +--+--+
    #  2  3  6
    #    +-+
    #    4 5

A tuple is a branch only when its child list is non-empty; ``(3, [])``
is a leaf holding a tuple value.
"""

from typing import Any, List, Sequence, Tuple

from ..core.capability import TreeCapability
from ..core.errors import CapabilityError


def _is_labeled(node: Any) -> bool:
    return isinstance(node, tuple) and len(node) == 2 and isinstance(node[1], list)


class LabeledTupleCapability(TreeCapability):
    """Zip ``(label, [children])`` trees.

    ``make_node`` keeps the label of a labeled node; a bare leaf value
    becomes the label of the new branch.
    """

    def is_branch(self, node: Any) -> bool:
        return _is_labeled(node) and len(node[1]) > 0

    def children(self, node: Any) -> Sequence[Any]:
        if not _is_labeled(node):
            raise CapabilityError(f"{node!r} is not a (label, [children]) node")
        return node[1]

    def make_node(self, node: Any, children: List[Any]) -> Tuple[Any, List[Any]]:
        if _is_labeled(node):
            return (node[0], list(children))
        return (node, list(children))
