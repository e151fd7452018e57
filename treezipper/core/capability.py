"""TreeCapability abstraction for TreeZipper.

The TreeCapability is what lets one zipper work over any tree shape. The
zipper never looks inside a node itself; it asks the capability three
questions - is this a branch, what are its children, and how do I rebuild
it with new children - and builds every move and edit out of the answers.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from .errors import CapabilityError


class TreeCapability(ABC):
    """Abstract contract a tree shape implements to be zippable.

    Implementations must be pure: the same node must always give the same
    answers, and ``make_node`` must return a new value instead of mutating
    ``node``. Zippers derived from one tree can then be moved and edited
    independently, from any thread, without locking.

    Capabilities are expected to be stateless. Two instances of the same
    class compare equal, so zippers built with separately constructed
    capabilities of one kind still compare by tree content. A capability
    that carries configuration should override ``__eq__`` and ``__hash__``.
    """

    @abstractmethod
    def is_branch(self, node: Any) -> bool:
        """Check whether ``node`` can have children.

        A branch may still have an empty child sequence; the zipper then
        treats it like a leaf for navigation.

        Args:
            node: Any value of the tree

        Returns:
            True if ``children`` and ``make_node`` accept this node
        """
        pass

    @abstractmethod
    def children(self, node: Any) -> Sequence[Any]:
        """Return the ordered children of a branch.

        Only called when ``is_branch(node)`` is true.

        Args:
            node: A branch node

        Returns:
            Children in tree order
        """
        pass

    @abstractmethod
    def make_node(self, node: Any, children: List[Any]) -> Any:
        """Build a node of the same kind as ``node`` with new children.

        Called on branches when edits are pulled back up the tree, and on
        leaves when a child is added to them (promoting the leaf into a
        one-child branch).

        Args:
            node: The existing node, branch or leaf
            children: The new child list, in tree order

        Returns:
            The rebuilt node
        """
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeCapability):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Zipable(ABC):
    """Interface for node types that know how to zip themselves.

    Used together with ``ZipableCapability`` when a tree is built from
    objects of several classes: each node answers the capability
    questions for itself, so differently shaped nodes can live side by
    side in one tree.
    """

    @abstractmethod
    def is_branch(self) -> bool:
        pass

    @abstractmethod
    def children(self) -> Sequence[Any]:
        pass

    @abstractmethod
    def make_node(self, children: List[Any]) -> "Zipable":
        pass


class ZipableCapability(TreeCapability):
    """Capability that dispatches to the nodes' own ``Zipable`` methods.

    Values that do not implement ``Zipable`` are leaves. They can be
    visited and replaced, but children cannot be added to them because
    there is no node type to promote them into.
    """

    def is_branch(self, node: Any) -> bool:
        if not isinstance(node, Zipable):
            return False
        return node.is_branch()

    def children(self, node: Any) -> Sequence[Any]:
        if not isinstance(node, Zipable):
            raise CapabilityError(f"{node!r} is not Zipable and has no children")
        return node.children()

    def make_node(self, node: Any, children: List[Any]) -> Any:
        if not isinstance(node, Zipable):
            raise CapabilityError(f"cannot make a branch from non-Zipable value {node!r}")
        return node.make_node(children)
