"""Test fixtures for TreeZipper consumers.

These helpers give tests an independent point of comparison for zipper
behavior: a small ``Zipable`` node type, a stack-based pre-order walk
that does not use the zipper at all, and a seeded random tree builder.
"""

import random
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..core.capability import TreeCapability, Zipable


@dataclass(frozen=True)
class LabeledNode(Zipable):
    """Immutable tree node that zips itself.

    A node is a branch when it has at least one child, so a childless
    node is a leaf until something is appended to it.

    Example:
        node = LabeledNode.build((1, [2, (3, [4])]))
        assert node.kids[1].value == 3
    """

    value: Any
    kids: tuple = field(default=())

    @classmethod
    def build(cls, shape: Any) -> 'LabeledNode':
        """Build nodes from ``(value, [children])`` tuples and bare values."""
        if isinstance(shape, tuple) and len(shape) == 2 and isinstance(shape[1], list):
            value, kids = shape
            return cls(value, tuple(cls.build(kid) for kid in kids))
        return cls(shape)

    def is_branch(self) -> bool:
        return len(self.kids) > 0

    def children(self) -> Sequence[Any]:
        return self.kids

    def make_node(self, children: List[Any]) -> 'LabeledNode':
        return LabeledNode(self.value, tuple(children))

    def __repr__(self) -> str:
        if not self.kids:
            return f"LabeledNode({self.value!r})"
        return f"LabeledNode({self.value!r}, {list(self.kids)!r})"


def reference_preorder(tree: Any, capability: TreeCapability) -> List[Any]:
    """Pre-order list of nodes computed with an explicit stack.

    Empty branches count as single nodes, matching the zipper's view.
    """
    result = []
    stack = [tree]
    while stack:
        node = stack.pop()
        result.append(node)
        if capability.is_branch(node):
            stack.extend(reversed(list(capability.children(node))))
    return result


def random_labeled_tree(seed: int,
                        max_depth: int = 4,
                        max_children: int = 4,
                        rng: Optional[random.Random] = None) -> Any:
    """Build a random ``(label, [children])`` tree with unique integer labels.

    Args:
        seed: Seed for the random generator (ignored when ``rng`` is given)
        max_depth: Maximum nesting depth below the root
        max_children: Maximum children per branch

    Returns:
        Tree usable with ``LabeledTupleCapability``
    """
    rng = rng or random.Random(seed)
    counter = iter(range(1_000_000))

    def build(depth: int) -> Any:
        label = next(counter)
        if depth >= max_depth or rng.random() < 0.3:
            return label
        count = rng.randint(1, max_children)
        return (label, [build(depth + 1) for _ in range(count)])

    # Root is always a branch so every tree has something to navigate
    return (next(counter), [build(1) for _ in range(rng.randint(1, max_children))])
