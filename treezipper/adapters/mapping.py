"""Nested mapping capability for TreeZipper.

A tree of dictionaries is zipped as key/value items:

- the top-level ``dict`` is a branch whose children are its items
- an item ``(key, value)`` is a branch when ``value`` is a dict, with the
  items of ``value`` as children
- any other item is a leaf

Children follow the dictionaries' insertion order.

Example:
    >>> from treezipper import Zipper
    >>> z = Zipper.new({"a": 1, "b": {"c": 2, "d": 3}}, MappingCapability())
    >>> list(z)[1:]
    [('a', 1), ('b', {'c': 2, 'd': 3}), ('c', 2), ('d', 3)]
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

from ..core.capability import TreeCapability
from ..core.errors import CapabilityError


def _is_item(node: Any) -> bool:
    return isinstance(node, tuple) and len(node) == 2


class MappingCapability(TreeCapability):
    """Zip trees of nested dictionaries.

    Items are represented as ``(key, value)`` tuples. A leaf item that
    gets a child is promoted to ``(key, {child_key: child_value})``, so
    children added to a mapping tree must themselves be items. Keys must
    stay unique among siblings; a rebuild with a repeated key raises
    ``CapabilityError``.
    """

    def is_branch(self, node: Any) -> bool:
        if isinstance(node, dict):
            return True
        return _is_item(node) and isinstance(node[1], dict)

    def children(self, node: Any) -> Sequence[Tuple[Any, Any]]:
        if isinstance(node, dict):
            return list(node.items())
        if _is_item(node) and isinstance(node[1], dict):
            return list(node[1].items())
        raise CapabilityError(f"{node!r} is neither a dict nor an item holding a dict")

    def make_node(self, node: Any, children: List[Any]) -> Union[Dict[Any, Any], Tuple[Any, Dict[Any, Any]]]:
        seen = set()
        for child in children:
            if not _is_item(child):
                raise CapabilityError(f"mapping children must be (key, value) items, got {child!r}")
            if child[0] in seen:
                raise CapabilityError(f"duplicate key {child[0]!r} in mapping children")
            seen.add(child[0])
        if _is_item(node):
            return (node[0], dict(children))
        if isinstance(node, dict):
            return dict(children)
        raise CapabilityError(f"cannot make a mapping node from {node!r}")
