"""Configuration system for TreeZipper.

This module defines how users describe a filtered walk over a tree: which
depths to report, which nodes to include or prune, and when to stop.
Walks are always depth-first pre-order, the order of ``Zipper.next``.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Set


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    # Pruning behavior
    prune_on_exclude: bool = True  # Don't walk into excluded branches

    def should_include(self, node: Any) -> bool:
        """Check if a node should be reported.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True

    def should_explore_children(self, node: Any) -> bool:
        """Check if the walk should enter this node's children.

        Only the exclude filter prunes: a node that fails the include
        filter may still have children that pass it.

        Args:
            node: Node to check

        Returns:
            True if children should be explored
        """
        if not self.prune_on_exclude or self.exclude_filter is None:
            return True
        return not self.exclude_filter(node)


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.specific_depths is not None:
            return any(d > depth for d in self.specific_depths)

        if self.max_depth is not None:
            return depth < self.max_depth

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a filtered pre-order walk.

    The ExecutionPlan validates this configuration before any node of the
    tree is visited.
    """

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    leaves_only: bool = False          # Report only nodes without children
    max_nodes: Optional[int] = None    # Stop after reporting this many nodes

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config that stops descending at ``max_depth``.

        Args:
            max_depth: How deep to walk (default 1 = root and its children)

        Returns:
            TraversalConfig for shallow walks
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def leaves(cls) -> 'TraversalConfig':
        """Create config reporting only leaf nodes."""
        return cls(leaves_only=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        for name in ("include_filter", "exclude_filter"):
            predicate = getattr(self.filter, name)
            if predicate is not None and not callable(predicate):
                errors.append(f"{name} must be callable")

        return errors
