"""TreeZipper - Immutable tree cursors for any tree shape.

TreeZipper implements Huet's zipper: a value that stands at one node of an
immutable tree and can move to any neighbour, edit the node in focus, and
rebuild the whole tree with the edits applied. The original tree is never
mutated.

A tree shape is described by a TreeCapability with three operations:
    is_branch(node), children(node), make_node(node, children)

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treezipper import Zipper
    from treezipper.adapters import NestedListCapability

    z = Zipper.new([1, [2, 3]], NestedListCapability())
    z.down().right().append_child(4).root()   # [1, [2, 3, 4]]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.errors import ZipperError, InvalidEditError, CapabilityError
from .core.capability import TreeCapability, Zipable, ZipableCapability
from .core.zipper import Zipper, PathMarker
from .core.traversal import (
    Action,
    traverse,
    fold,
    map_nodes,
    traverse_while,
    fold_while,
    find,
)

# Adapters
from .adapters import (
    NestedListCapability,
    MappingCapability,
    LabeledTupleCapability,
)

# Configuration and planning
from .config import TraversalConfig, DepthConfig, FilterConfig
from .planning import ExecutionPlan, ConfigurationError

# High-level API
from .api import (
    zipper,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    map_tree,
)

__all__ = [
    '__version__',
    # Core
    'ZipperError',
    'InvalidEditError',
    'CapabilityError',
    'TreeCapability',
    'Zipable',
    'ZipableCapability',
    'Zipper',
    'PathMarker',
    'Action',
    'traverse',
    'fold',
    'map_nodes',
    'traverse_while',
    'fold_while',
    'find',
    # Adapters
    'NestedListCapability',
    'MappingCapability',
    'LabeledTupleCapability',
    # Config
    'TraversalConfig',
    'DepthConfig',
    'FilterConfig',
    'ExecutionPlan',
    'ConfigurationError',
    # API
    'zipper',
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_paths',
    'get_tree_stats',
    'map_tree',
]
