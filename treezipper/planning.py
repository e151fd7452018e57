"""Execution planning for TreeZipper.

The ExecutionPlan validates that a TraversalConfig makes sense for a
TreeCapability and then runs the walk. The walk is driven by the zipper's
own linearization: ``next`` to go on, ``skip`` to prune a subtree that
the configuration excludes or that lies below the maximum depth.
"""

import logging
from typing import Any, Iterator, Tuple

from .config import TraversalConfig
from .core.capability import TreeCapability
from .core.errors import ZipperError
from .core.zipper import Zipper

logger = logging.getLogger(__name__)


class ConfigurationError(ZipperError, ValueError):
    """Raised when a traversal configuration or capability is unusable."""
    pass


class ExecutionPlan:
    """Validated execution plan for a filtered pre-order walk.

    Validation happens in the constructor, so a bad configuration fails
    before the tree is touched.
    """

    def __init__(self, config: TraversalConfig, capability: TreeCapability):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            capability: Capability for the tree shape being walked

        Raises:
            ConfigurationError: If the config or capability is invalid
        """
        self.config = config
        self.capability = capability

        if not isinstance(capability, TreeCapability):
            raise ConfigurationError(
                f"Expected a TreeCapability, got {type(capability).__name__}"
            )

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.nodes_processed = 0
        self.nodes_reported = 0
        logger.debug("execution plan ready\n%s", self.get_summary())

    def execute(self, tree: Any) -> Iterator[Tuple[Zipper, int]]:
        """Walk ``tree`` and yield the zippers the configuration selects.

        Args:
            tree: Root value of the tree

        Yields:
            Tuples of (zipper, depth) in depth-first pre-order
        """
        depth_config = self.config.depth
        filter_config = self.config.filter
        max_nodes = self.config.max_nodes

        # Reset execution state
        self.nodes_processed = 0
        self.nodes_reported = 0

        zipper = Zipper.new(tree, self.capability)
        depth = 0
        while not zipper.is_end:
            node = zipper.location
            self.nodes_processed += 1

            if (depth_config.should_yield(depth)
                    and filter_config.should_include(node)
                    and not (self.config.leaves_only and zipper.down() is not None)):
                yield zipper, depth
                self.nodes_reported += 1
                if max_nodes is not None and self.nodes_reported >= max_nodes:
                    logger.debug("max_nodes=%d reached after %d nodes",
                                 max_nodes, self.nodes_processed)
                    return

            explore = (depth_config.should_explore(depth)
                       and filter_config.should_explore_children(node))
            child = zipper.down() if explore else None
            if child is not None:
                zipper, depth = child, depth + 1
            else:
                zipper = zipper.skip()
                depth = zipper.depth

    def get_summary(self) -> str:
        """Get a human-readable summary of the plan.

        Useful for debugging and logging.
        """
        depth = self.config.depth
        lines = [
            f"Capability: {self.capability!r}",
            f"Depth: {depth.min_depth}..{depth.max_depth if depth.max_depth is not None else 'unlimited'}",
            f"Leaves only: {self.config.leaves_only}",
            f"Max nodes: {self.config.max_nodes if self.config.max_nodes is not None else 'unlimited'}",
        ]
        return "\n".join(lines)
