#!/usr/bin/env python3
"""Demo script for TreeZipper navigation, editing and traversal.

Walks through the same small tree with three different capabilities:
nested lists, labeled tuples and a nested dict.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treezipper import (
    Action,
    Zipper,
    find,
    fold,
    fold_while,
    get_tree_paths,
    get_tree_stats,
    map_nodes,
)
from treezipper.adapters import (
    LabeledTupleCapability,
    MappingCapability,
    NestedListCapability,
)


def demo_navigation():
    """Move around a nested list and edit it."""
    print("\n=== Navigation and Editing ===")

    z = Zipper.new([1, [2, 3], 4], NestedListCapability())
    inner = z.down().right()
    print(f"Focus: {inner.node} at position {inner.position}")

    edited = inner.append_child(99).down().replace(20)
    print(f"After edits: {edited.root()}")
    print(f"Original is untouched: {z.node}")

    print("Pre-order:", list(z))


def demo_traversal():
    """Map, fold and search a labeled tree."""
    print("\n=== Traversal ===")

    tree = (1, [2, (3, [4, 5]), 6])
    z = Zipper.new(tree, LabeledTupleCapability())

    doubled = map_nodes(z, lambda n: n * 2 if isinstance(n, int) else n)
    print(f"Leaves doubled: {doubled.root()}")

    _, total = fold(z, 0, lambda z, acc: (z, acc + (z.node if isinstance(z.node, int) else 0)))
    print(f"Sum of leaves: {total}")

    def leaves_until_five(current, seen):
        if isinstance(current.node, tuple):
            return Action.CONTINUE, current, seen
        seen = seen + [current.node]
        return (Action.HALT if current.node == 5 else Action.CONTINUE), current, seen

    _, seen = fold_while(z, [], leaves_until_five)
    print(f"Leaves up to 5: {seen}")

    found = find(z, lambda z: z.node == 4)
    print(f"Found 4 at position {found.position}, depth {found.depth}")


def demo_mapping():
    """Zip a nested dict through (key, value) items."""
    print("\n=== Mappings ===")

    config = {"server": {"host": "localhost", "port": 8080}, "debug": False}
    capability = MappingCapability()

    for position, node in get_tree_paths(config, capability):
        print(f"  {position}: {node!r}")

    stats = get_tree_stats(config, capability)
    print(f"Stats: {stats['total_nodes']} nodes, max depth {stats['max_depth']}")


def main():
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)

    demo_navigation()
    demo_traversal()
    demo_mapping()


if __name__ == "__main__":
    main()
