"""High-level API for TreeZipper.

This module provides simple, functional interfaces for common operations
on raw tree values. These functions wrap the Zipper and ExecutionPlan for
ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .config import DepthConfig, FilterConfig, TraversalConfig
from .core.capability import TreeCapability
from .core.traversal import map_nodes
from .core.zipper import Zipper
from .planning import ExecutionPlan


def zipper(tree: Any, capability: TreeCapability) -> Zipper:
    """Create a top-level zipper over ``tree``."""
    return Zipper.new(tree, capability)


def traverse_tree(
    tree: Any,
    capability: TreeCapability,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    leaves_only: bool = False,
    max_nodes: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for a filtered pre-order walk.

    Args:
        tree: Root value of the tree
        capability: Capability for the tree shape
        max_depth: Maximum depth to walk (root is depth 0)
        min_depth: Minimum depth before yielding nodes
        include_filter: Only yield nodes for which this returns True
        exclude_filter: Skip nodes, and their subtrees, for which this returns True
        leaves_only: Only yield nodes without children
        max_nodes: Stop after yielding this many nodes

    Yields:
        Nodes in depth-first pre-order

    Example:
        >>> from treezipper.adapters import NestedListCapability
        >>> list(traverse_tree([1, [2, [3]]], NestedListCapability(), max_depth=1))
        [[1, [2, [3]]], 1, [2, [3]]]
    """
    config = TraversalConfig(
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
        leaves_only=leaves_only,
        max_nodes=max_nodes,
    )
    plan = ExecutionPlan(config, capability)

    for current, _ in plan.execute(tree):
        yield current.location


def count_nodes(tree: Any, capability: TreeCapability, **kwargs) -> int:
    """Count nodes that match the criteria.

    Args:
        tree: Root value of the tree
        capability: Capability for the tree shape
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(tree, capability, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: Any,
    capability: TreeCapability,
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Args:
        tree: Root value of the tree
        capability: Capability for the tree shape
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate, in pre-order
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, capability, **kwargs)


def get_leaf_nodes(tree: Any, capability: TreeCapability, **kwargs) -> Iterator[Any]:
    """Get all leaf nodes of a tree, left to right.

    Example:
        >>> from treezipper.adapters import LabeledTupleCapability
        >>> list(get_leaf_nodes((1, [2, (3, [4, 5])]), LabeledTupleCapability()))
        [2, 4, 5]
    """
    kwargs['leaves_only'] = True
    yield from traverse_tree(tree, capability, **kwargs)


def get_tree_paths(
    tree: Any,
    capability: TreeCapability,
    **kwargs
) -> Iterator[Tuple[Tuple[int, ...], Any]]:
    """Get the child-index path from the root to each node.

    Args:
        tree: Root value of the tree
        capability: Capability for the tree shape
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Tuples of (position, node); the root's position is ``()``
    """
    config = _build_config_from_kwargs(**kwargs)
    plan = ExecutionPlan(config, capability)

    for current, _ in plan.execute(tree):
        yield current.position, current.location


def get_tree_stats(tree: Any, capability: TreeCapability, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Root value of the tree
        capability: Capability for the tree shape
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with tree statistics
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    config = _build_config_from_kwargs(**kwargs)
    plan = ExecutionPlan(config, capability)

    for current, depth in plan.execute(tree):
        stats['total_nodes'] += 1

        if current.down() is None:
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


def map_tree(tree: Any, capability: TreeCapability, fun: Callable[[Any], Any]) -> Any:
    """Return a copy of ``tree`` with every node replaced by ``fun(node)``.

    Parents are mapped before their children, see ``map_nodes``.
    """
    return map_nodes(Zipper.new(tree, capability), fun).root()


# Helper functions

def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from traverse_tree keyword arguments."""
    config = TraversalConfig()

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'leaves_only' in kwargs:
        config.leaves_only = kwargs.pop('leaves_only')

    if 'max_nodes' in kwargs:
        config.max_nodes = kwargs.pop('max_nodes')

    if kwargs:
        raise TypeError(f"Unknown traversal options: {', '.join(sorted(kwargs))}")

    return config
